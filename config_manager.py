"""
Configuration management for the Suvit blog.
Handles loading, validating, and providing access to application settings.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class AppConfig:
    """Application configuration settings."""
    host: str
    port: int
    debug: bool


@dataclass
class BlogConfig:
    """Blog page and query API settings."""
    default_page_size: int
    max_page_size: int
    site_name: str


@dataclass
class PathsConfig:
    """Path configuration settings."""
    ui_dir: str


class ConfigManager:
    """Manages application configuration loading and access."""

    def __init__(self, config_file: str = "web_app_config.json"):
        self.config_file = Path(config_file)
        self._config: Optional[Dict[str, Any]] = None
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from file and environment variables."""
        self._config = self._get_default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                    self._merge_config(file_config)
            except (json.JSONDecodeError, FileNotFoundError):
                # Keep default config if file is invalid or not found
                pass

        self._override_with_env()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration."""
        return {
            "app": {
                "host": "0.0.0.0",
                "port": 3000,
                "debug": False
            },
            "blog": {
                "default_page_size": 12,
                "max_page_size": 100,
                "site_name": "Suvit"
            },
            "paths": {
                "ui_dir": "ui"
            }
        }

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """Merge file configuration with current config."""
        for section, values in file_config.items():
            if section in self._config:
                if isinstance(values, dict):
                    self._config[section].update(values)
                else:
                    self._config[section] = values
            else:
                self._config[section] = values

    def _override_with_env(self) -> None:
        """Override configuration with environment variables."""
        # App settings
        if os.getenv("APP_HOST"):
            self._config["app"]["host"] = os.getenv("APP_HOST")

        if os.getenv("APP_PORT"):
            self._config["app"]["port"] = int(os.getenv("APP_PORT"))

        if os.getenv("APP_DEBUG"):
            self._config["app"]["debug"] = os.getenv("APP_DEBUG").lower() == "true"

        # Blog settings
        if os.getenv("BLOG_DEFAULT_PAGE_SIZE"):
            self._config["blog"]["default_page_size"] = int(os.getenv("BLOG_DEFAULT_PAGE_SIZE"))

        if os.getenv("BLOG_MAX_PAGE_SIZE"):
            self._config["blog"]["max_page_size"] = int(os.getenv("BLOG_MAX_PAGE_SIZE"))

        if os.getenv("BLOG_SITE_NAME"):
            self._config["blog"]["site_name"] = os.getenv("BLOG_SITE_NAME")

        # Paths
        if os.getenv("UI_DIR"):
            self._config["paths"]["ui_dir"] = os.getenv("UI_DIR")

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        app_config = self._config["app"]
        return AppConfig(
            host=app_config["host"],
            port=app_config["port"],
            debug=app_config["debug"]
        )

    def get_blog_config(self) -> BlogConfig:
        """Get blog configuration."""
        blog_config = self._config["blog"]
        return BlogConfig(
            default_page_size=blog_config["default_page_size"],
            max_page_size=blog_config["max_page_size"],
            site_name=blog_config["site_name"]
        )

    def get_paths_config(self) -> PathsConfig:
        """Get paths configuration."""
        paths_config = self._config["paths"]
        return PathsConfig(
            ui_dir=paths_config["ui_dir"]
        )

    def get_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return self._config.copy()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    def save_config(self) -> None:
        """Save current configuration to file."""
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config, f, indent=2, ensure_ascii=False)


# Global configuration instance
config_manager = ConfigManager()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return config_manager.get_app_config()


def get_blog_config() -> BlogConfig:
    """Get blog configuration."""
    return config_manager.get_blog_config()


def get_paths_config() -> PathsConfig:
    """Get paths configuration."""
    return config_manager.get_paths_config()


def reload_config() -> None:
    """Reload configuration."""
    config_manager.reload()


def save_config() -> None:
    """Save configuration to file."""
    config_manager.save_config()

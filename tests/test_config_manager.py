"""
Test cases for the configuration management system.
Tests config loading, validation, and access functionality.
"""

import os
import json
from unittest.mock import patch, mock_open

from config_manager import (
    ConfigManager,
    AppConfig,
    BlogConfig,
    PathsConfig,
    get_app_config,
    get_blog_config,
    get_paths_config,
)


class TestConfigManager:
    """Test the ConfigManager class functionality."""

    def test_defaults_without_file(self):
        """Test ConfigManager falls back to defaults when no file exists."""
        with patch('config_manager.Path') as mock_path:
            mock_path.return_value.exists.return_value = False
            with patch.dict(os.environ, {}, clear=True):
                manager = ConfigManager()

                assert manager.get_app_config() == AppConfig(host="0.0.0.0", port=3000, debug=False)
                assert manager.get_blog_config() == BlogConfig(default_page_size=12, max_page_size=100, site_name="Suvit")
                assert manager.get_paths_config() == PathsConfig(ui_dir="ui")

    def test_load_config_from_file(self):
        """Test loading configuration from existing file."""
        test_config = {
            "app": {"host": "localhost", "port": 8080, "debug": True},
            "blog": {"default_page_size": 6},
        }

        with patch('builtins.open', mock_open(read_data=json.dumps(test_config))):
            with patch('config_manager.Path') as mock_path:
                mock_path.return_value.exists.return_value = True
                with patch.dict(os.environ, {}, clear=True):
                    manager = ConfigManager()

                    assert manager.get_app_config().host == "localhost"
                    assert manager.get_app_config().port == 8080
                    blog = manager.get_blog_config()
                    assert blog.default_page_size == 6
                    # untouched keys keep their defaults
                    assert blog.max_page_size == 100

    def test_invalid_json_keeps_defaults(self):
        """Test that a corrupt config file is ignored."""
        with patch('builtins.open', mock_open(read_data="{not json")):
            with patch('config_manager.Path') as mock_path:
                mock_path.return_value.exists.return_value = True
                with patch.dict(os.environ, {}, clear=True):
                    manager = ConfigManager()
                    assert manager.get_app_config().port == 3000

    def test_override_with_env_variables(self):
        """Test that environment variables override config values."""
        env = {
            "APP_HOST": "127.0.0.1",
            "APP_PORT": "9000",
            "APP_DEBUG": "TRUE",
            "BLOG_DEFAULT_PAGE_SIZE": "9",
            "BLOG_MAX_PAGE_SIZE": "30",
            "BLOG_SITE_NAME": "Acme",
            "UI_DIR": "templates",
        }
        with patch('config_manager.Path') as mock_path:
            mock_path.return_value.exists.return_value = False
            with patch.dict(os.environ, env, clear=True):
                manager = ConfigManager()

                app = manager.get_app_config()
                assert (app.host, app.port, app.debug) == ("127.0.0.1", 9000, True)
                blog = manager.get_blog_config()
                assert (blog.default_page_size, blog.max_page_size, blog.site_name) == (9, 30, "Acme")
                assert manager.get_paths_config().ui_dir == "templates"

    def test_save_and_reload(self, tmp_path):
        """Test saving configuration and reading it back."""
        config_file = tmp_path / "web_app_config.json"
        with patch.dict(os.environ, {}, clear=True):
            manager = ConfigManager(str(config_file))
            manager._config["blog"]["site_name"] = "Saved"
            manager.save_config()

            saved = json.loads(config_file.read_text(encoding="utf-8"))
            assert saved["blog"]["site_name"] == "Saved"

            fresh = ConfigManager(str(config_file))
            assert fresh.get_blog_config().site_name == "Saved"

    def test_get_config_returns_copy(self):
        with patch('config_manager.Path') as mock_path:
            mock_path.return_value.exists.return_value = False
            manager = ConfigManager()
            config = manager.get_config()
            config["extra"] = {}
            assert "extra" not in manager.get_config()


class TestGlobalHelpers:
    """Test the module-level configuration helpers."""

    def test_helpers_return_dataclasses(self):
        assert isinstance(get_app_config(), AppConfig)
        assert isinstance(get_blog_config(), BlogConfig)
        assert isinstance(get_paths_config(), PathsConfig)

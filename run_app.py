#!/usr/bin/env python3
"""
Simple runner script for the Flask application.
This script ensures the correct Python path is set and runs the app.
"""

import sys
import logging
from pathlib import Path

# Add the current directory to Python path
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from config_manager import get_app_config
from post_service.logging_config import setup_logging

# Import and run the Flask app
from app.main import app


def main() -> None:
    app_config = get_app_config()
    setup_logging(debug=app_config.debug)

    logger = logging.getLogger("run_app")
    logger.info("Starting Flask application...")
    logger.info(f"Working directory: {current_dir}")

    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )


if __name__ == "__main__":
    main()

import argparse
import logging
from pathlib import Path
from datetime import datetime

# Import configuration management
import sys
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager

from flask import (
    Flask,
    render_template_string,
    jsonify,
    url_for,
    Response,
)
from werkzeug.middleware.proxy_fix import ProxyFix

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

config_manager = ConfigManager()
app_config = config_manager.get_app_config()
blog_config = config_manager.get_blog_config()
paths_config = config_manager.get_paths_config()

UI_DIR = PROJECT_ROOT / paths_config.ui_dir

# Post images and avatars are referenced as /images/<name>
app = Flask(__name__, static_folder=str(UI_DIR / "images"), static_url_path="/images")
app.wsgi_app = ProxyFix(
        app.wsgi_app,
        x_proto = 1,     # trust 1 hop for X-Forwarded-Proto
        x_host  = 1,     # trust 1 hop for X-Forwarded-Host
        x_prefix= 1)     # <-- pay attention to X-Forwarded-Prefix

# Load templates
with open(UI_DIR / "layout.html", "r", encoding="utf-8") as f:
    LAYOUT_TEMPLATE = f.read()

with open(UI_DIR / "index.html", "r", encoding="utf-8") as f:
    INDEX_TEMPLATE = LAYOUT_TEMPLATE.replace("{# page #}", f.read())

with open(UI_DIR / "blog.html", "r", encoding="utf-8") as f:
    BLOG_TEMPLATE = LAYOUT_TEMPLATE.replace("{# page #}", f.read())

BASE_CSS = (UI_DIR / "base.css").read_text(encoding="utf-8")

# -----------------------------------------------------------------------------
# Modules
# -----------------------------------------------------------------------------

from app.newsletter.factory import create_newsletter_module
from app.blog.factory import create_blog_module

newsletter_module = create_newsletter_module(return_path="/blog")

blog_module = create_blog_module(
    blog_template=BLOG_TEMPLATE,
    blog_config=blog_config,
    subscribe_url="/api/newsletter/subscribe",
)

# Register blueprints
app.register_blueprint(blog_module["blueprint"])
app.register_blueprint(newsletter_module["blueprint"])

# -----------------------------------------------------------------------------
# Template Context Processors (for cache busting)
# -----------------------------------------------------------------------------

def get_file_version(filepath: Path) -> str:
    """Get version string based on file modification time for cache busting."""
    try:
        if filepath.exists():
            return hex(int(filepath.stat().st_mtime))[2:]
    except OSError:
        pass
    return hex(int(datetime.now().timestamp()))[2:]


@app.context_processor
def inject_layout_helpers():
    """Inject shared layout values into template context."""
    def base_css_versioned() -> str:
        """Generate versioned URL for base.css."""
        return f"{url_for('base_css')}?v={get_file_version(UI_DIR / 'base.css')}"

    return {
        'base_css_versioned': base_css_versioned,
        'site_name': blog_config.site_name,
        'current_year': datetime.now().year,
    }

# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@app.get("/")
def index():
    """Render the product home page."""
    return render_template_string(INDEX_TEMPLATE)


@app.get("/assets/base.css")
def base_css():
    """Serve base.css with cache control headers."""
    response = Response(BASE_CSS, mimetype="text/css")
    response.headers['Cache-Control'] = 'public, max-age=31536000, must-revalidate'
    return response


@app.get("/actuator/health")
def actuator_health():
    """Health check endpoint for monitoring tools and cloud platforms."""
    return jsonify({
        "status": "UP",
        "service": "suvit-blog"
    }), 200

# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Flask application for the Suvit blog")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    from post_service.logging_config import setup_logging
    setup_logging(debug=app_config.debug)

    logger.info(f"Serving {len(blog_module['service'].posts)} blog posts")
    logger.info(f"Page size: {blog_config.default_page_size} (max {blog_config.max_page_size})")
    logger.info(f"Server: {app_config.host}:{app_config.port}")
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )

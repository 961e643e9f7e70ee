"""Application factory for the liquidación trigger backend."""
from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .extensions import cors, limiter


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    trusted_proxies = int(app.config.get("TRUSTED_PROXY_COUNT") or 0)
    if trusted_proxies > 0:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=trusted_proxies)

    if cors is not None:
        allowed_origins = [
            origin.strip()
            for origin in (app.config.get("CORS_ALLOWED_ORIGINS") or "").split(",")
            if origin.strip()
        ]
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": allowed_origins}},
            allow_headers=["Content-Type"],
        )

    limiter.init_app(app)

    from .api.health import bp as health_bp
    from .api.trigger import bp as trigger_bp
    from .form.views import bp as form_bp

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(trigger_bp, url_prefix="/api")
    app.register_blueprint(form_bp)

    if not app.config.get("MAKE_WEBHOOK_URL"):
        app.logger.warning("MAKE_WEBHOOK_URL is not set; submissions will be rejected.")

    return app

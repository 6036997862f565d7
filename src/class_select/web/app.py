from __future__ import annotations

from flask import Flask

from class_select.service import ClassSelect


def create_app(
    selector: ClassSelect | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})
    # Option order is meaningful; keep dicts in insertion order.
    app.json.sort_keys = False

    app.extensions["class_select"] = selector or ClassSelect()

    from class_select.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app

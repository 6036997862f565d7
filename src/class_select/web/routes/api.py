from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from class_select.service import ClassSelect

api_bp = Blueprint("api", __name__)


def _selector() -> ClassSelect:
    return current_app.extensions["class_select"]


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/classes")
def classes():
    """Return the whole class registry, or one scope's classes."""
    scope = request.args.get("scope", "")
    return jsonify(_selector().get_classes(scope))


@api_bp.route("/options/<context_id>")
def options(context_id: str):
    """Return the grouped class options for a context."""
    option_set = _selector().options_for(context_id)
    return jsonify({
        "context": context_id,
        "placeholder": option_set.placeholder,
        "groups": [
            {"key": g.key, "label": g.label, "options": g.options}
            for g in option_set.groups
        ],
    })


@api_bp.route("/field", methods=["OPTIONS"])
def field_preflight():
    """Handle CORS preflight for field configuration."""
    return "", 204


@api_bp.route("/field", methods=["POST"])
def field():
    """Merge class options into a host field configuration."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("field"), dict):
        return jsonify({"error": "field object required"}), 400

    merged = _selector().set_class_options(
        data["field"],
        field_key=str(data.get("field_key", "")),
        form_key=str(data.get("form_key", "")),
    )
    return jsonify({"field": merged})


@api_bp.route("/cache/flush", methods=["POST"])
def flush_cache():
    """Invalidate the cached class registry."""
    _selector().flush_cache()
    return jsonify({"status": "flushed"})

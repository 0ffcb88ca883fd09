"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask, jsonify

from .ask import bp as ask_bp
from .files import bp as files_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(ask_bp)
    app.register_blueprint(files_bp)

    @app.get("/")
    def index():
        return jsonify(message="askdoc API is running"), 200

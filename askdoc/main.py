"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from askdoc.routes import register_routes
from askdoc.services.context_service import RESOLVER_EXTENSION, FileContextResolver

UPLOAD_LIMIT_BYTES = int(os.getenv("UPLOAD_LIMIT_MB", "10")) * 1024 * 1024


def create_app(resolver: Optional[FileContextResolver] = None) -> Flask:
    """Configure and return the Flask application instance.

    A single resolver is shared by every request served by the app; pass one
    in to start from a known document set.
    """
    app = Flask(__name__)
    CORS(app)

    app.config["MAX_CONTENT_LENGTH"] = UPLOAD_LIMIT_BYTES
    app.extensions[RESOLVER_EXTENSION] = resolver if resolver is not None else FileContextResolver()

    register_routes(app)
    return app


app = create_app()

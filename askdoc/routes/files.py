"""/files route listing the documents uploaded so far."""

from __future__ import annotations

from flask import Blueprint, jsonify

from askdoc.services.context_service import get_resolver

bp = Blueprint("files", __name__)


@bp.get("/files")
def list_files():
    """Return the stored documents in upload order with the current selection state."""
    resolver = get_resolver()
    return jsonify(files=resolver.describe_documents(), compareMode=resolver.compare_mode), 200

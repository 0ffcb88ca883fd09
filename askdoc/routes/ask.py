"""/upload endpoint answering questions about uploaded files."""

from __future__ import annotations

from typing import Optional

from flask import Blueprint, current_app, jsonify, request
from openai import APIError

from askdoc.services import openai_service
from askdoc.services.context_service import ComparisonUnavailable, get_resolver
from askdoc.storage import Document
from askdoc.utils.text import extract_text_from_upload

bp = Blueprint("ask", __name__)

PROCESSING_ERROR_MESSAGE = "Error processing the request"


def _read_question() -> str:
    """Return the question from the multipart form or a JSON body."""
    question = request.form.get("question")
    if question is None:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        question = payload.get("question")
    return question if isinstance(question, str) else ""


def _build_document(client) -> Optional[Document]:
    """Turn the uploaded file, if any, into a topic-tagged document."""
    storage = request.files.get("file")
    if storage is None or not storage.filename:
        return None

    raw_bytes = storage.read()
    content = extract_text_from_upload(raw_bytes, storage.filename, storage.mimetype)
    topic = openai_service.infer_topic(client, content)
    current_app.logger.debug(f"Inferred topic for {storage.filename}: {topic}")

    return Document(
        topic=topic,
        content=content,
        name=storage.filename,
        mime_type=storage.mimetype or "",
    )


@bp.post("/upload")
def ask():
    """Answer a question, optionally about a newly uploaded file."""
    try:
        question = _read_question()
        client = openai_service.get_openai_client()
        document = _build_document(client)
        context = get_resolver().prepare_context(question, document)
        answer = openai_service.answer_question(client, context, question)
    except ComparisonUnavailable as exc:
        return jsonify(error=str(exc)), 400
    except APIError:
        current_app.logger.exception("OpenAI API error while answering question")
        return jsonify(error=PROCESSING_ERROR_MESSAGE), 500
    except Exception:
        current_app.logger.exception("Unexpected error while answering question")
        return jsonify(error=PROCESSING_ERROR_MESSAGE), 500

    return jsonify(answer=answer), 200

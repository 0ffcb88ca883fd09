"""Text extraction helpers for uploaded files."""

from __future__ import annotations

from io import BytesIO
from typing import List

from flask import current_app
from pypdf import PdfReader

PDF_MIME_TYPE = "application/pdf"


def make_text_excerpt(text: str, limit: int = 200) -> str:
    """Normalize raw text and clamp it to a preview-friendly length."""
    if not text:
        return ""
    cleaned = " ".join(text.split())
    return cleaned[:limit]


def is_pdf_upload(filename: str, mimetype: str) -> bool:
    lowered = (filename or "").lower()
    mime = (mimetype or "").lower()
    return mime == PDF_MIME_TYPE or lowered.endswith(".pdf")


def extract_pdf_text(raw_bytes: bytes) -> str:
    """Extract the text of every readable page of a PDF.

    A document pypdf cannot open raises; individual pages that fail to
    extract are logged and skipped.
    """
    reader = PdfReader(BytesIO(raw_bytes))

    collected: List[str] = []
    for page in reader.pages:
        try:
            page_text = page.extract_text() or ""
        except Exception:
            current_app.logger.warning("Failed to extract text from a PDF page", exc_info=True)
            page_text = ""

        if page_text:
            collected.append(page_text)

    return "\n".join(collected).strip()


def extract_text_from_upload(raw_bytes: bytes, filename: str, mimetype: str) -> str:
    """Return the full text of an upload: parsed PDF text or the decoded plain text."""
    if is_pdf_upload(filename, mimetype):
        return extract_pdf_text(raw_bytes)

    return raw_bytes.decode("utf-8", errors="replace")

"""Tests for upload text extraction."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pypdf.errors import PdfReadError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from askdoc.utils.text import (  # noqa: E402
    extract_text_from_upload,
    is_pdf_upload,
    make_text_excerpt,
)


def test_plain_text_is_decoded_in_full():
    raw = ("line one\n" * 5000).encode("utf-8")
    assert extract_text_from_upload(raw, "notes.txt", "text/plain") == raw.decode("utf-8")


def test_invalid_utf8_is_replaced():
    text = extract_text_from_upload(b"caf\xe9", "notes.txt", "text/plain")
    assert text.startswith("caf")


def test_pdf_text_is_extracted(app, make_pdf):
    raw = make_pdf("Blockchain ledgers record transactions.", "Each block links to the last.")

    with app.app_context():
        text = extract_text_from_upload(raw, "ledger.pdf", "application/pdf")

    assert "Blockchain" in text
    assert "block links" in text


def test_pdf_detected_by_extension():
    assert is_pdf_upload("REPORT.PDF", "application/octet-stream")
    assert is_pdf_upload("report", "application/pdf")
    assert not is_pdf_upload("report.txt", "text/plain")


def test_unreadable_pdf_raises(app):
    with app.app_context(), pytest.raises(PdfReadError):
        extract_text_from_upload(b"not really a pdf", "broken.pdf", "application/pdf")


def test_excerpt_collapses_whitespace():
    assert make_text_excerpt("  a\n\n b\tc  ", limit=3) == "a b"
    assert make_text_excerpt("") == ""

"""Shared pytest fixtures for the askdoc API."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from askdoc.main import create_app  # noqa: E402
from askdoc.services import openai_service  # noqa: E402
from askdoc.services.context_service import FileContextResolver  # noqa: E402


class FakeResponses:
    """Stand-in for ``client.responses`` that records every request."""

    def __init__(self, topics: Dict[str, str], answer: str) -> None:
        self.topics = topics
        self.answer = answer
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        messages = kwargs["input"]
        if isinstance(messages, list) and messages[0]["content"] == openai_service.TOPIC_SYSTEM_PROMPT:
            excerpt = messages[1]["content"]
            for keyword, topic in self.topics.items():
                if keyword in excerpt:
                    return SimpleNamespace(output_text=f"  {topic}  ", model=kwargs["model"])
            return SimpleNamespace(output_text="General Content", model=kwargs["model"])
        return SimpleNamespace(output_text=self.answer, model=kwargs["model"])

    @property
    def answer_calls(self) -> List[Dict[str, Any]]:
        return [
            call for call in self.calls
            if call["input"][0]["content"] == openai_service.ANSWER_SYSTEM_PROMPT
        ]


class FakeOpenAI:
    def __init__(self, topics: Dict[str, str], answer: str = "Stub answer") -> None:
        self.responses = FakeResponses(topics, answer)


@pytest.fixture
def fake_openai(monkeypatch: pytest.MonkeyPatch) -> FakeOpenAI:
    """Route every OpenAI call to an in-process fake keyed on document keywords."""
    client = FakeOpenAI(
        topics={
            "Blockchain": "Introduction to Blockchain Technology",
            "neural": "Artificial Intelligence and Neural Networks",
            "Photosynthesis": "Plant Biology",
        }
    )
    monkeypatch.setattr(openai_service, "get_openai_client", lambda: client)
    return client


@pytest.fixture
def resolver() -> FileContextResolver:
    return FileContextResolver()


@pytest.fixture
def app(resolver: FileContextResolver):
    flask_app = create_app(resolver=resolver)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_pdf():
    """Return a helper rendering text lines into real PDF bytes."""
    from fpdf import FPDF

    def _render(*lines: str) -> bytes:
        pdf = FPDF()
        pdf.add_page()
        pdf.set_font("Helvetica", size=12)
        for line in lines:
            pdf.cell(0, 10, line, new_x="LMARGIN", new_y="NEXT")
        return bytes(pdf.output())

    return _render

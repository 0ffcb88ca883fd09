"""Wrapper utilities around the OpenAI client."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Union

from openai import OpenAI

DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4")

# Unset means the model decides how long an answer may be.
MAX_OUTPUT_TOKENS = int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "0")) or None

TOPIC_EXCERPT_LENGTH = 1000

TOPIC_SYSTEM_PROMPT = "You are a helpful assistant who categorizes files based on their content."
ANSWER_SYSTEM_PROMPT = (
    "You are a helpful assistant that answers questions based on one or more files or general queries."
)

Prompt = Union[str, List[Dict[str, Any]]]


def get_openai_client() -> OpenAI:
    """Instantiate an OpenAI client using the configured API key."""
    api_key = os.getenv("OPENAI_API_KEY") or os.getenv("OPEN_AI_API")
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY environment variable is not set")
    return OpenAI(api_key=api_key)


def create_response(
    client: OpenAI,
    prompt: Prompt,
    *,
    model: Optional[str] = None,
    max_output_tokens: Optional[int] = MAX_OUTPUT_TOKENS,
):
    """Invoke the Responses API with shared defaults."""
    options: Dict[str, Any] = {}
    if max_output_tokens:
        options["max_output_tokens"] = max_output_tokens
    return client.responses.create(
        model=model or DEFAULT_MODEL,
        input=prompt,
        **options,
    )


def _output_text(completion) -> str:
    return (getattr(completion, "output_text", None) or "").strip()


def infer_topic(client: OpenAI, content: str) -> str:
    """Ask the model for a short, lowercased description of what ``content`` is about."""
    messages = [
        {"role": "system", "content": TOPIC_SYSTEM_PROMPT},
        {
            "role": "user",
            "content": f"Can you briefly describe the topic of this content: {content[:TOPIC_EXCERPT_LENGTH]}",
        },
    ]
    completion = create_response(client, messages)
    return _output_text(completion).lower()


def answer_question(client: OpenAI, context: str, question: str) -> str:
    """Answer ``question`` using the resolved file context."""
    messages = [
        {"role": "system", "content": ANSWER_SYSTEM_PROMPT},
        {"role": "user", "content": f"File Content: {context}"},
        {"role": "user", "content": f"Question: {question}"},
    ]
    completion = create_response(client, messages)
    return _output_text(completion)

"""Service layer modules for the askdoc API."""

from . import context_service, openai_service

__all__ = [
    "context_service",
    "openai_service",
]

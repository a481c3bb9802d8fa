"""API routes for the proxy."""

from .chat import CHAT_COMPLETIONS_PATHS, chat_completions
from .models import list_models

__all__ = [
    "CHAT_COMPLETIONS_PATHS",
    "chat_completions",
    "list_models",
]

"""API module for the proxy."""

from .handler import ProxyHandler
from .routes import CHAT_COMPLETIONS_PATHS, chat_completions, list_models

__all__ = [
    "CHAT_COMPLETIONS_PATHS",
    "ProxyHandler",
    "chat_completions",
    "list_models",
]

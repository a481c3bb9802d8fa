"""diproxy - OpenAI-compatible proxy for the DeepInfra chat API.

A small FastAPI service that accepts OpenAI-style chat completion requests,
checks them against a bearer token and a model policy, and relays them to
DeepInfra with browser-like headers. Responses are streamed back unchanged.

This module provides:
- create_app: FastAPI application factory
- ProxyHandler: routing, validation and forwarding for one request
- ProxySettings / load_settings: immutable runtime configuration

Example:
    >>> from diproxy import create_app
    >>> import uvicorn
    >>> uvicorn.run(create_app(), host="127.0.0.1", port=8000)
"""

from .api import ProxyHandler
from .config import ModelPolicy, ProxySettings, load_settings
from .config_loader import load_config
from .core import ALLOWED_MODELS
from .logging import setup_logging
from .main import create_app

__all__ = [
    "ALLOWED_MODELS",
    "ModelPolicy",
    "ProxyHandler",
    "ProxySettings",
    "create_app",
    "load_config",
    "load_settings",
    "setup_logging",
]

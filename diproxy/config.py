"""Runtime settings for the proxy.

Settings are resolved once at startup from (highest priority first) the
process environment, the config file's ``.env`` sibling, the YAML
``proxy_settings`` section and built-in defaults. The resulting
``ProxySettings`` value is immutable and handed to the handler explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .core.models import ALLOWED_MODELS, FALLBACK_DEFAULT_MODEL
from .core.policy import ModelPolicy
from .core.upstream import UPSTREAM_URL

logger = logging.getLogger("diproxy")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ProxySettings:
    token: Optional[str] = None
    model_policy: ModelPolicy = ModelPolicy.ALLOWLIST
    default_model: str = FALLBACK_DEFAULT_MODEL
    allowed_models: frozenset[str] = field(default=ALLOWED_MODELS)
    upstream_url: str = UPSTREAM_URL
    timeout_seconds: Optional[float] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def auth_enabled(self) -> bool:
        return bool(self.token)

    @property
    def models_route_enabled(self) -> bool:
        return self.model_policy is ModelPolicy.ALLOWLIST


def _get(cfg: Mapping[str, Any], *keys: str):
    cur: Any = cfg
    for key in keys:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur


def _to_int(value) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid integer setting: %r", value)
        return None


def _to_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _to_float(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid number setting: %r", value)
        return None


def _to_bool(value) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    value_str = str(value).strip().lower()
    if value_str in {"1", "true", "yes", "on"}:
        return True
    if value_str in {"0", "false", "no", "off"}:
        return False
    logger.warning("Ignoring invalid boolean setting: %r", value)
    return None


def _first(*values):
    for value in values:
        if value is not None and value != "":
            return value
    return None


def load_settings(
    config: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProxySettings:
    """Resolve ``ProxySettings`` from config and environment.

    Args:
        config: Parsed YAML config. Loaded from disk when omitted.
        environ: Environment mapping. Defaults to ``os.environ`` layered
            over the values of the config's ``.env`` file.

    Returns:
        The immutable settings for this process.
    """
    if config is None or environ is None:
        from .config_loader import load_config, load_runtime_env

        if config is None:
            config = load_config()
        if environ is None:
            environ = load_runtime_env()

    proxy_cfg = config.get("proxy_settings") or {}

    # A present but empty TOKEN keeps the proxy open even if the file sets one.
    if "TOKEN" in environ:
        token = _to_str(environ["TOKEN"])
    else:
        token = _to_str(proxy_cfg.get("token"))

    enforce = _to_bool(environ.get("ENFORCE_ALLOWLIST"))
    if enforce is None:
        enforce = _to_bool(proxy_cfg.get("enforce_allowlist"))
    if enforce is None:
        enforce = True
    policy = ModelPolicy.ALLOWLIST if enforce else ModelPolicy.DEFAULT_MODEL

    configured_default = _to_str(
        _first(environ.get("DEFAULT_MODEL"), proxy_cfg.get("default_model"))
    )
    if configured_default and policy is ModelPolicy.ALLOWLIST:
        logger.warning(
            "DEFAULT_MODEL=%s is ignored while ENFORCE_ALLOWLIST is enabled",
            configured_default,
        )
    default_model = configured_default or FALLBACK_DEFAULT_MODEL

    raw_models = proxy_cfg.get("allowed_models")
    if isinstance(raw_models, str):
        raw_models = [raw_models]
    if raw_models:
        allowed_models = frozenset(str(model) for model in raw_models)
    else:
        allowed_models = ALLOWED_MODELS

    timeout_seconds = _to_float(
        _first(environ.get("DIPROXY_TIMEOUT"), proxy_cfg.get("timeout_seconds"))
    )
    if timeout_seconds is not None and timeout_seconds <= 0:
        timeout_seconds = None

    host = (
        _to_str(_first(environ.get("DIPROXY_HOST"), _get(proxy_cfg, "server", "host")))
        or DEFAULT_HOST
    )
    port = (
        _to_int(environ.get("DIPROXY_PORT"))
        or _to_int(_get(proxy_cfg, "server", "port"))
        or DEFAULT_PORT
    )
    log_level = (
        _to_str(_first(environ.get("DIPROXY_LOG_LEVEL"), _get(proxy_cfg, "logging", "level")))
        or DEFAULT_LOG_LEVEL
    ).upper()

    return ProxySettings(
        token=token or None,
        model_policy=policy,
        default_model=default_model,
        allowed_models=allowed_models,
        timeout_seconds=timeout_seconds,
        host=host,
        port=port,
        log_level=log_level,
    )


__all__ = ["ModelPolicy", "ProxySettings", "load_settings"]

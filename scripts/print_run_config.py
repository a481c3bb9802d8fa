#!/usr/bin/env python3
"""Print run-time config values as KEY=VALUE pairs for shell scripts."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from diproxy.config import load_settings  # noqa: E402
from diproxy.config_loader import load_config, load_runtime_env  # noqa: E402

logging.basicConfig(level=logging.WARNING)


def _mask(secret: str | None) -> str:
    if not secret:
        return ""
    if len(secret) <= 4:
        return "****"
    return f"{secret[:2]}****{secret[-2:]}"


def main() -> int:
    parser = argparse.ArgumentParser(description="Print config values for run scripts")
    parser.add_argument(
        "--config",
        help="Path to config.yaml (default: DIPROXY_CONFIG or configs/config.yaml)",
    )
    args = parser.parse_args()

    cfg: dict = {}
    try:
        cfg = load_config(args.config)
    except Exception as exc:
        print(f"[WARN] Failed to load config: {exc}", file=sys.stderr)

    settings = load_settings(cfg, load_runtime_env(args.config))

    lines = [
        f"CFG_PROXY_HOST={settings.host}",
        f"CFG_PROXY_PORT={settings.port}",
        f"CFG_MODEL_POLICY={settings.model_policy.value}",
        f"CFG_DEFAULT_MODEL={settings.default_model}",
        f"CFG_ALLOWED_MODELS={len(settings.allowed_models)}",
        f"CFG_AUTH_ENABLED={'true' if settings.auth_enabled else 'false'}",
        f"CFG_TOKEN={_mask(settings.token)}",
        f"CFG_TIMEOUT={settings.timeout_seconds if settings.timeout_seconds is not None else ''}",
        f"CFG_LOG_LEVEL={settings.log_level}",
    ]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

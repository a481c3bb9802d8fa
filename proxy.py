"""Launch the DeepInfra proxy with uvicorn.

Usage:
    python proxy.py [--config PATH] [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import dataclasses

import uvicorn

from diproxy import create_app, load_config, load_settings, setup_logging
from diproxy.config_loader import load_runtime_env


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the DeepInfra chat completions proxy")
    parser.add_argument(
        "--config",
        help="Path to config.yaml (default: DIPROXY_CONFIG or configs/config.yaml)",
    )
    parser.add_argument("--host", help="Bind address (overrides DIPROXY_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (overrides DIPROXY_PORT)")
    args = parser.parse_args()

    setup_logging()
    config = load_config(args.config)
    settings = load_settings(config, load_runtime_env(args.config))
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    logger = setup_logging(settings.log_level)
    logger.info("Binding to %s:%s", settings.host, settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

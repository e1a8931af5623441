"""
Command-line entry point for the User API service.

Usage:
    user-api [--host HOST] [--port PORT] [--env-name NAME] [--log-level LEVEL]

Options override the PORT, HOST, ENV_NAME and LOG_LEVEL environment variables.
"""
import argparse
import dataclasses
import sys
from typing import List, Optional

import uvicorn

from user_api.config import Settings, configure_logging, load_settings
from user_api.errors import ConfigError
from user_api.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="user-api",
        description="Run the in-memory User API service",
    )
    parser.add_argument("--host", help="Interface to bind (env: HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (env: PORT)")
    parser.add_argument("--env-name", help="Environment label echoed in responses (env: ENV_NAME)")
    parser.add_argument("--log-level", help="Logging level (env: LOG_LEVEL)")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings) -> Settings:
    """
    Apply command-line overrides on top of environment settings.

    Raises:
        ConfigError: If the combined settings are invalid
    """
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.env_name:
        overrides["env_name"] = args.env_name
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()

    settings = dataclasses.replace(base, **overrides)
    errors = settings.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and serve the app until interrupted."""
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args, load_settings())
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_level)
    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == '__main__':
    main()

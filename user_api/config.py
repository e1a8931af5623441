"""
Configuration for the User API service.
Settings are read once from the process environment at startup.
"""
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

from user_api.errors import ConfigError


DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENV_NAME = "local"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the service."""
    env_name: str = DEFAULT_ENV_NAME
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> List[str]:
        """
        Validate settings.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.env_name:
            errors.append("ENV_NAME must not be empty")

        if not isinstance(self.port, int) or not 1 <= self.port <= 65535:
            errors.append(f"Invalid port: {self.port}")

        if not self.host:
            errors.append("HOST must not be empty")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors


def _parse_port(raw: str) -> Any:
    try:
        return int(raw)
    except ValueError:
        return raw


def load_settings(environ: Optional[Dict[str, str]] = None, use_dotenv: bool = True) -> Settings:
    """
    Build settings from environment variables.

    Reads PORT, HOST, ENV_NAME and LOG_LEVEL. When ``environ`` is not given,
    an optional ``.env`` file in the working directory is loaded first and ``os.environ`` is used.

    Args:
        environ: Mapping to read instead of the process environment
        use_dotenv: Whether to load a ``.env`` file before reading

    Returns:
        Validated Settings

    Raises:
        ConfigError: If any setting is invalid
    """
    if environ is None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    settings = Settings(
        env_name=environ.get("ENV_NAME") or DEFAULT_ENV_NAME,
        port=_parse_port(environ.get("PORT") or str(DEFAULT_PORT)),
        host=environ.get("HOST") or DEFAULT_HOST,
        log_level=(environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

    errors = settings.validate()
    if errors:
        raise ConfigError("; ".join(errors))

    return settings


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install a single stream handler on the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())

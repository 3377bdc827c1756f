"""Logging setup for the mancala-agent CLI."""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

SERVICE_NAME = "mancala-agent"
ENV_PREFIX = "AGENT_"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# HTTP clients under the Anthropic SDK and starknet-py log every request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "anthropic", "aiohttp", "starknet_py")


def _setting(name: str, env_prefix: str) -> Optional[str]:
    value = os.getenv(f"{env_prefix}{name}")
    if value is None:
        value = os.getenv(name)
    return value


def _level(value: Optional[str]) -> int:
    level = getattr(logging, (value or "").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _rotating_file(log_dir: str, service_name: str) -> RotatingFileHandler:
    directory = Path(log_dir).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        directory / f"{service_name}.log",
        maxBytes=int(os.getenv("LOG_MAX_BYTES", 1_048_576)),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", 5)),
        encoding="utf-8",
    )


def configure_root_logger(
    *, service_name: str = SERVICE_NAME, env_prefix: str = ENV_PREFIX
) -> Optional[Path]:
    """Send records to stdout and, when ``LOG_DIR`` is set, to a rotating file.

    ``{env_prefix}LOG_LEVEL`` and ``{env_prefix}LOG_DIR`` win over the
    unprefixed variables. Returns the log file path, or None when only stdout
    is used.
    """

    formatter = logging.Formatter(_FORMAT)
    stdout = logging.StreamHandler(sys.stdout)
    stdout.setFormatter(formatter)
    handlers: list[logging.Handler] = [stdout]

    log_path: Optional[Path] = None
    log_dir = _setting("LOG_DIR", env_prefix)
    if log_dir:
        file_handler = _rotating_file(log_dir, service_name)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)
        log_path = Path(file_handler.baseFilename)

    logging.basicConfig(
        handlers=handlers,
        level=_level(_setting("LOG_LEVEL", env_prefix)),
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_path

"""Process logging setup shared by the API entrypoint."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_log_level(level: str) -> int:
    """Map a level name such as `debug` to its logging constant, defaulting to INFO."""

    normalized = level.strip().upper()
    resolved = logging.getLevelName(normalized) if normalized else logging.INFO
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Configure root logging and align uvicorn loggers to the same level."""

    resolved_level = resolve_log_level(level)
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(resolved_level)

from __future__ import annotations

import logging
import os
from typing import Any

import structlog

SERVICE_NAME = "calles"

# The request-id middleware emits one http_request event per request.
_QUIET_LOGGERS = ("uvicorn.access",)


def _level_from_env() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def _format_from_env() -> str:
    if "LOG_FORMAT" not in os.environ and os.getenv("APP_ENV") == "dev":
        return "console"
    return os.getenv("LOG_FORMAT", "json").lower()


def _add_service(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,
        structlog.processors.format_exc_info,
    ]


def _handlers(log_file: str | os.PathLike | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(str(log_file))
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))
    return handlers


def setup_logging(log_file: str | os.PathLike | None = None) -> None:
    """Route structlog and stdlib records through one formatter.

    JSON lines unless ``LOG_FORMAT=console`` (the default under ``APP_ENV=dev``).
    Every record carries timestamp, level, event, ``service`` and whatever the
    request middleware bound to contextvars.
    """

    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: Any
    if _format_from_env() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handlers = _handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=_level_from_env(), handlers=handlers, force=True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(*args, **kwargs)

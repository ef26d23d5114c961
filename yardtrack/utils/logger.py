import logging
import sys

import structlog
from fastapi import Request
from structlog.stdlib import ProcessorFormatter

# Context keys copied from contextvars onto every event
REQUEST_CONTEXT_KEYS = ("request_id", "ip_address", "user_id")

# Loggers that would otherwise print their own lines or echo SQL
QUIET_LOGGERS = {
    "uvicorn": None,
    "uvicorn.access": None,
    "sqlalchemy.engine": logging.WARNING,
}


def get_client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


def add_request_context(
    logger: structlog.BoundLogger, method_name: str, event_dict: dict
) -> dict:
    bound = structlog.contextvars.get_contextvars()
    for key in REQUEST_CONTEXT_KEYS:
        if bound.get(key) is not None:
            event_dict.setdefault(key, bound[key])
    return event_dict


def _renderer(is_production: bool):
    if is_production:
        return structlog.processors.JSONRenderer(sort_keys=False)
    return structlog.dev.ConsoleRenderer(colors=True, pad_event=8)


def setup_logging(is_production: bool = False, level: str = "INFO"):
    """Route stdlib and structlog output through one stdout handler.

    Development gets the coloured console renderer, PROD gets JSON lines.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_context,
            structlog.processors.UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProcessorFormatter(processor=_renderer(is_production)))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    for name, quiet_level in QUIET_LOGGERS.items():
        quiet = logging.getLogger(name)
        if quiet_level is None:
            quiet.handlers = []
        else:
            quiet.setLevel(quiet_level)

    return structlog.get_logger("yardtrack")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)

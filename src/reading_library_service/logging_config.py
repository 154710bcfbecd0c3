"""Structured logging configuration using structlog.

The package only emits events through `get_logger`; the embedding
application (or the preview CLI) calls `configure_logging` once at startup.

Usage:
    from reading_library_service.logging_config import configure_logging, get_logger

    configure_logging(log_level="DEBUG")

    logger = get_logger(__name__)
    logger.info("ingestion_started", source="https://example.com/post")
"""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, TextIO

import structlog

# Extraction events can carry error messages quoting page bodies
MAX_LOG_VALUE_LENGTH = 300

# Chatty at INFO during fetches and trafilatura extraction
NOISY_LOGGERS = ("httpx", "httpcore", "trafilatura", "htmldate", "charset_normalizer")


def clip_long_values(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Shorten string values longer than MAX_LOG_VALUE_LENGTH."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_LOG_VALUE_LENGTH:
            event_dict[key] = f"{value[:MAX_LOG_VALUE_LENGTH]}... ({len(value)} chars)"
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structured logging for the library.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: If True, output JSON lines. If False, use human-readable
                   console output.
        stream: Where log lines go (default stderr, so the preview CLI can
                print results on stdout)

    Processor Pipeline:
    1. Add log level and logger name
    2. Add timestamp (ISO8601 UTC)
    3. Add callsite info (file, function, line)
    4. Clip long string values
    5. Format as console or JSON

    HTTP and trafilatura loggers stay at WARNING unless log_level is DEBUG.
    """
    stream = stream or sys.stderr
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=stream, level=level)

    library_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        clip_long_values,
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=stream.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        structlog logger; Any to avoid complex structlog type annotations
    """
    return structlog.get_logger(name)

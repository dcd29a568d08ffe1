"""
Structured logging configuration using structlog.

Request log lines go through an injectable sink so handlers never write
to the console directly.
"""
import logging
import sys
from pathlib import Path
from typing import Callable

import structlog

# (method, path, delay_ms, status) -> None
RequestLogSink = Callable[[str, str, int, int], None]


def setup_logging(
    level: str = "INFO",
    json_logs: bool = False,
    log_dir: Path | None = None
) -> None:
    """
    Configure structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, use console format
        log_dir: Optional directory for file logging
    """
    # Shared processors for all handlers
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from uvicorn and other stdlib loggers pass through the same chain
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(getattr(logging, level))

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "mock-http-server.log")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def structlog_request_sink(logger=None) -> RequestLogSink:
    """
    Build the default request log sink.

    Each served request becomes a single ``request_served`` event carrying
    method, path, delay and status; the timestamp comes from the processor
    chain.

    Args:
        logger: Logger to emit on (default: a logger named ``mock_http.requests``)

    Returns:
        Sink callable accepted by the route registration functions
    """
    log = logger if logger is not None else get_logger("mock_http.requests")

    def sink(method: str, path: str, delay_ms: int, status: int) -> None:
        fields = {"method": method, "path": path, "status": status}
        if delay_ms:
            fields["delay_ms"] = delay_ms
        log.info("request_served", **fields)

    return sink

"""
Shared logging setup for the Phone Agent Creator.

All modules log through structlog with key/value events; ``setup_logging``
wires structlog on top of the standard library so uvicorn and application
records end up in the same stream.
"""

import logging
import sys

import structlog


def setup_logging(service_name: str, log_level: str = "INFO") -> structlog.stdlib.BoundLogger:
    """
    Configure structured logging for the service.

    Args:
        service_name: Name of the service, used as the root logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A logger bound to the service name
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger(service_name)
    logger.info("Logging initialized", service=service_name, log_level=log_level)
    return logger


def get_logger(name: str):
    """
    Get a structlog logger for a module or service.

    Args:
        name: Logger name, e.g. ``"agent-creator.controller"``
    """
    return structlog.get_logger(name)

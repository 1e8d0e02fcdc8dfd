"""
Structured logging setup shared by all readmission services.

structlog renders on top of the stdlib logging module so that host
applications keep control of handlers; we only pick the renderer and set the
level of the ``readmission`` logger.
"""

import logging

import structlog

from readmission.config import LoggingConfig, get_config


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for JSON (production) or console (development) output.

    Without an explicit config the environment-derived ``get_config().logging``
    is used, so ``LOG_LEVEL`` and ``ENVIRONMENT`` apply on package import.
    """
    config = config if config is not None else get_config().logging

    renderer: structlog.typing.Processor
    if config.format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    logging.getLogger("readmission").setLevel(config.level)

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
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)

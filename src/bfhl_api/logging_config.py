"""Structured logging configuration using structlog.

Provides JSON output for production (parseable by ELK, Loki, CloudWatch)
and pretty console output for development. uvicorn's own loggers are routed
through the same handler so server and application lines share one format.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

APP_LOG_NAME = "bfhl-api"

# Loggers whose own handlers are replaced by propagation to the root logger
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def app_context_processor(
    app_name: str = APP_LOG_NAME, app_version: Optional[str] = None
) -> Processor:
    """Build a processor stamping every event with the service name and version.
    
    Args:
        app_name: Value of the ``app`` field
        app_version: Value of the ``app_version`` field (omitted when None)
    """
    def add_app_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["app"] = app_name
        if app_version:
            event_dict["app_version"] = app_version
        return event_dict
    
    return add_app_context


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    app_version: Optional[str] = None,
) -> None:
    """Configure structlog for structured logging.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment name (development, production)
        app_version: Service version added to every event
    
    In production mode:
        - JSON output for machine parsing
        - ISO timestamps
        - Exception info included
        
    In development mode:
        - Pretty colored console output
        - Human-readable formatting
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)
    
    # Shared processors for structlog and stdlib (uvicorn, fastapi) records
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        app_context_processor(APP_LOG_NAME, app_version),
    ]
    
    is_production = environment.lower() == "production"
    
    if is_production:
        # JSON output for production (parseable by log aggregators)
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        # Pretty console output for development
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    
    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    # Configure standard library logging to work with structlog
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)
    
    root_logger = logging.getLogger()
    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)
    
    # uvicorn installs its own handlers; let records propagate to root instead
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    
    # RequestTracingMiddleware already logs every request with its request_id
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    
    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )

"""Structlog configuration for applications embedding the service clients.

The clients only emit events; configuring output is left to the host
application, which calls `configure_logging()` once at startup.

Usage:
    from awsruntime.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("vault_inventory_requested", vault="logs")

Dependencies:
    - awsruntime.configuration.settings
"""

import logging
import sys
import inspect
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from awsruntime.configuration import settings
from awsruntime.logging.formatters import mask_sensitive_data, truncate_large_values

# Third-party loggers that log every connection and signature at DEBUG.
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Any]:
    """Processor chain: context, level, time, call site, redaction, render."""
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        # request headers and credentials never reach the renderer
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        is_production: JSON output when True, console output when False.
            Defaults to settings.is_production.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return structlog.stdlib.get_logger()


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger, optionally bound to `logger_name`."""
    logger = structlog.stdlib.get_logger()
    if name:
        return logger.bind(logger_name=name)
    return logger


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Returns:
        Logger bound with `component` (last dotted part of the module name)
        and `module_path`

    Example:
        # In awsservices/facade.py
        logger = get_module_logger()
        # context: {"component": "facade", "module_path": "awsservices.facade"}
    """
    logger = structlog.stdlib.get_logger()
    current_frame = inspect.currentframe()
    if current_frame is None or current_frame.f_back is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module:
        return logger.bind(
            component=module.__name__.rsplit(".", 1)[-1], module_path=module.__name__
        )

    return logger.bind(component="unknown")

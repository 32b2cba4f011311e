"""
Logging Setup
=============
Structured logging for services embedding otpauth-core.

Usage:
    from otpauth_core.logging_config import setup_logging

    # Setup at startup
    setup_logging(service_name="otpauth-demo")

    # Anywhere else
    logger = structlog.get_logger(__name__)
    logger.info("otp.sent", identity="u**r@example.com")

Identities must be masked before they are logged; OTP codes are never
logged.
"""

import logging
import sys
from typing import Optional

import structlog

from otpauth_core.config import AuthConfig


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> structlog.typing.FilteringBoundLogger:
    """
    Configure structlog and the stdlib root logger.

    Args:
        service_name: Name bound to every log line
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to output JSON (for production)

    Returns:
        Logger bound to the service name
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    structlog.contextvars.bind_contextvars(service=service_name)

    logger = structlog.get_logger("otpauth_core")
    logger.info("logging.configured", service=service_name, log_level=logging.getLevelName(log_level))
    return logger


def setup_logging_from_config(config: Optional[AuthConfig] = None) -> structlog.typing.FilteringBoundLogger:
    """Configure logging from an AuthConfig (defaults to the environment)."""
    config = config or AuthConfig.from_env()
    return setup_logging(
        service_name=config.service_name,
        level=config.log_level,
        json_output=config.log_json,
    )

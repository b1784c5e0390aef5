"""
gateway/log_config.py

structlog setup shared by the relay process. Called once from the app lifespan.
"""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with a console renderer and a minimum level."""
    min_level = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )

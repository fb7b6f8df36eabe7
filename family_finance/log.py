"""
Logging Setup

structlog on top of the stdlib logging module. Logs are structured
key/value events so the UI developer can grep for what the provider
served.
"""

import logging
from typing import Optional

import structlog

from family_finance.config import FamilyFinanceSettings, get_settings


def configure_logging(settings: Optional[FamilyFinanceSettings] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Safe to call more than once; the last call wins, including for
    loggers that have already been used.
    """
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        level=settings.log_level_number,
        force=True,
    )

    if settings.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

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
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

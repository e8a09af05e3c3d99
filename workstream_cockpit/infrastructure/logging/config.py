"""
Logging Config - Configuration structlog.

Responsabilite unique:
----------------------
Configurer structlog pour JSON logging en production.

Modes:
------
- Development: Pretty print, couleurs
- Production: JSON, timestamp ISO

Usage:
------
    from workstream_cockpit.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True)
    logger = get_logger("workstream_cockpit")
    logger.info("started", version="1.0")
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour pretty.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    # merge_contextvars: run_id lie par le use case de backup
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True: la CLI peut reconfigurer apres un premier appel
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    # APScheduler est bavard en INFO
    logging.getLogger("apscheduler").setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Args:
        name: Nom du logger (module name).

    Returns:
        Logger structlog.

    Example:
        logger = get_logger(__name__)
        logger.info("event", key="value")
    """
    return structlog.get_logger(name)

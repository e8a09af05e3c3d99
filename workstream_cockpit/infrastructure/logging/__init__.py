"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure pour production.

Usage:
------
    from workstream_cockpit.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("backup_started", attempt=1, max_attempts=3)
"""

from workstream_cockpit.infrastructure.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

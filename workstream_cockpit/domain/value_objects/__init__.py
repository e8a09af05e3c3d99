"""
Value Objects du domaine de sauvegarde.

Objets immuables, compares par valeur.
"""

from workstream_cockpit.domain.value_objects.retention_policy import (
    DEFAULT_RETENTION_DAYS,
    RetentionPolicy,
)
from workstream_cockpit.domain.value_objects.backup_config import (
    DEFAULT_DATABASE_NAME,
    BackupConfig,
    DatabaseConnection,
)

__all__ = [
    "DEFAULT_RETENTION_DAYS",
    "DEFAULT_DATABASE_NAME",
    "RetentionPolicy",
    "BackupConfig",
    "DatabaseConnection",
]

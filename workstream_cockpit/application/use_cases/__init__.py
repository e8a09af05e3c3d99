"""
Use Cases de l'application.

Les Use Cases orchestrent les entites du domaine et les ports
(dump, compression, stockage objet) sans connaitre leurs implementations.
"""

from workstream_cockpit.application.use_cases.execute_backup import (
    DEFAULT_MAX_ATTEMPTS,
    BackupReport,
    ExecuteBackupUseCase,
)

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "BackupReport",
    "ExecuteBackupUseCase",
]

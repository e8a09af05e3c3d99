"""
Entites du domaine de sauvegarde.
"""

from workstream_cockpit.domain.entities.snapshot import (
    BACKUP_CONTENT_TYPE,
    BACKUP_PREFIX,
    BACKUP_SOURCE_TAG,
    Snapshot,
)
from workstream_cockpit.domain.entities.remote_object import RemoteObject, parse_created_at

__all__ = [
    "BACKUP_CONTENT_TYPE",
    "BACKUP_PREFIX",
    "BACKUP_SOURCE_TAG",
    "Snapshot",
    "RemoteObject",
    "parse_created_at",
]

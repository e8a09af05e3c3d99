"""
Backup Infrastructure - Sauvegarde automatisee.

Responsabilite:
---------------
Gerer les sauvegardes PostgreSQL automatisees vers Google Cloud Storage.

Features:
---------
- Backup quotidien automatique (cron UTC)
- Retry avec attente lineaire (2s, 4s, 6s...)
- Retention configurable (30 jours par defaut)
- Nettoyage systematique des fichiers temporaires
"""

from workstream_cockpit.infrastructure.backup.config import BackupSettings, get_backup_settings
from workstream_cockpit.infrastructure.backup.service import create_backup_service, execute_backup
from workstream_cockpit.infrastructure.backup.scheduler import BackupScheduler

__all__ = [
    "BackupSettings",
    "get_backup_settings",
    "create_backup_service",
    "execute_backup",
    "BackupScheduler",
]

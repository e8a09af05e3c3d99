"""
Workstream Cockpit - Sauvegarde automatisee de la base PostgreSQL.

Architecture hexagonale:
------------------------
- domain: regles metier (snapshot, retention, backoff)
- application: ports et ExecuteBackupUseCase (orchestration)
- infrastructure: pg_dump, gzip, Google Cloud Storage, APScheduler
- presentation: ligne de commande
"""

__version__ = "1.0.0"

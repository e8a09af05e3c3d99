"""
Backup Config - Configuration des sauvegardes.

Responsabilite unique:
----------------------
Lire les parametres de backup depuis l'environnement, une seule fois,
et les convertir en BackupConfig pour l'orchestrateur.

Variables:
----------
- BACKUP_ENABLED: Active le systeme de backup ("true")
- GCP_PROJECT_ID / GCP_BUCKET_NAME / GCP_SERVICE_ACCOUNT_KEY_PATH
- POSTGRES_HOST / POSTGRES_PORT / POSTGRES_USER / POSTGRES_PASSWORD / POSTGRES_DB
- BACKUP_RETENTION_DAYS: Nombre de jours de retention (30)
- BACKUP_SCHEDULE: Expression cron UTC ("0 2 * * *")
- BACKUP_STAGING_DIR: Repertoire des fichiers temporaires
"""

import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from workstream_cockpit.domain.value_objects.backup_config import (
    DEFAULT_DATABASE_NAME,
    BackupConfig,
    DatabaseConnection,
)
from workstream_cockpit.domain.value_objects.retention_policy import DEFAULT_RETENTION_DAYS

DEFAULT_BACKUP_SCHEDULE = "0 2 * * *"


class BackupSettings(BaseSettings):
    """
    Configuration des sauvegardes.

    Chargee depuis les variables d'environnement.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backup_enabled: bool = False

    # Google Cloud Storage
    gcp_project_id: str = ""
    gcp_bucket_name: str = ""
    gcp_service_account_key_path: str = ""

    # Base de donnees
    postgres_host: str = ""
    postgres_port: str = ""
    postgres_user: str = ""
    postgres_password: str = ""
    postgres_db: str = DEFAULT_DATABASE_NAME

    # Retention et planification
    backup_retention_days: int = DEFAULT_RETENTION_DAYS
    backup_schedule: str = DEFAULT_BACKUP_SCHEDULE  # 2h UTC
    backup_staging_dir: str = tempfile.gettempdir()

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def staging_path(self) -> Path:
        """Retourne le repertoire des fichiers temporaires."""
        return Path(self.backup_staging_dir)

    def to_backup_config(self) -> BackupConfig:
        """Convertit les settings en configuration du domaine."""
        return BackupConfig(
            gcp_project_id=self.gcp_project_id,
            gcp_bucket_name=self.gcp_bucket_name,
            gcp_key_file_path=self.gcp_service_account_key_path,
            database=DatabaseConnection(
                host=self.postgres_host,
                port=self.postgres_port,
                user=self.postgres_user,
                password=self.postgres_password,
                name=self.postgres_db or DEFAULT_DATABASE_NAME,
            ),
            retention_days=self.backup_retention_days,
            staging_dir=self.staging_path,
        )

    @property
    def missing_storage_keys(self) -> list[str]:
        """Cles GCP absentes (le backup est alors desactive)."""
        return self.to_backup_config().missing_storage_keys()

    @property
    def is_configured(self) -> bool:
        """Retourne True si le backup est active et GCP configure."""
        return self.backup_enabled and not self.missing_storage_keys

    def describe(self) -> dict[str, object]:
        """
        Etat de la configuration, sans secrets.

        Returns:
            Dict cle -> valeur affichable (les secrets sont reduits a set/missing).
        """
        def flag(value: str) -> str:
            return "set" if value else "missing"

        return {
            "BACKUP_ENABLED": self.backup_enabled,
            "GCP_PROJECT_ID": flag(self.gcp_project_id),
            "GCP_BUCKET_NAME": self.gcp_bucket_name or "missing",
            "GCP_SERVICE_ACCOUNT_KEY_PATH": flag(self.gcp_service_account_key_path),
            "POSTGRES_HOST": self.postgres_host or "default",
            "POSTGRES_DB": self.postgres_db,
            "POSTGRES_PASSWORD": flag(self.postgres_password),
            "BACKUP_RETENTION_DAYS": self.backup_retention_days,
            "BACKUP_SCHEDULE": self.backup_schedule,
        }


@lru_cache
def get_backup_settings() -> BackupSettings:
    """Retourne la configuration backup (cached)."""
    return BackupSettings()

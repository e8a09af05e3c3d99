"""
Value Objects pour la configuration d'un cycle de backup.

Construits une seule fois au demarrage (depuis BackupSettings) puis
passes a l'orchestrateur. Le coeur ne lit jamais l'environnement.
"""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from workstream_cockpit.domain.value_objects.retention_policy import (
    DEFAULT_RETENTION_DAYS,
    RetentionPolicy,
)

DEFAULT_DATABASE_NAME = "workstream_cockpit"


@dataclass(frozen=True, slots=True)
class DatabaseConnection:
    """
    Parametres de connexion passes a l'outil de dump.

    Les valeurs vides sont omises de la ligne de commande: pg_dump
    retombe alors sur ses propres defauts (libpq).
    """

    host: str = ""
    port: str = ""
    user: str = ""
    password: str = ""
    name: str = DEFAULT_DATABASE_NAME

    def __repr__(self) -> str:
        # Le mot de passe ne doit jamais apparaitre dans les logs
        return (
            f"DatabaseConnection(host={self.host!r}, port={self.port!r}, "
            f"user={self.user!r}, name={self.name!r})"
        )


@dataclass(frozen=True)
class BackupConfig:
    """
    Configuration complete d'un backup.

    Attributes:
        gcp_project_id: Projet GCP proprietaire du bucket.
        gcp_bucket_name: Bucket de destination.
        gcp_key_file_path: Chemin du fichier de compte de service.
        database: Connexion a la base a sauvegarder.
        retention_days: Fenetre de retention en jours.
        staging_dir: Repertoire des fichiers temporaires.
    """

    gcp_project_id: str = ""
    gcp_bucket_name: str = ""
    gcp_key_file_path: str = ""
    database: DatabaseConnection = field(default_factory=DatabaseConnection)
    retention_days: int = DEFAULT_RETENTION_DAYS
    staging_dir: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))

    def missing_storage_keys(self) -> list[str]:
        """Retourne les cles de stockage absentes."""
        missing = []
        if not self.gcp_project_id:
            missing.append("GCP_PROJECT_ID")
        if not self.gcp_bucket_name:
            missing.append("GCP_BUCKET_NAME")
        if not self.gcp_key_file_path:
            missing.append("GCP_SERVICE_ACCOUNT_KEY_PATH")
        return missing

    @property
    def is_complete(self) -> bool:
        """True si toutes les cles de stockage sont presentes."""
        return not self.missing_storage_keys()

    @property
    def retention(self) -> RetentionPolicy:
        """Politique de retention (valide le nombre de jours)."""
        return RetentionPolicy(self.retention_days)

"""
Snapshot Entity - Export ponctuel de la base.

Responsabilite unique:
----------------------
Deriver les noms et chemins (locaux et distants) d'un backup
a partir de sa date de creation.

Nommage:
--------
    logical_name: workstream-backup-2024-03-15-02-00-00
    remote_path:  2024/03/workstream-backup-2024-03-15-02-00-00.sql.gz
    dump_path:    <staging>/workstream-backup-2024-03-15-02-00-00-<run_id>.sql

Le run_id n'apparait que dans les chemins locaux: deux executions
simultanees ne partagent jamais les memes fichiers temporaires.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

BACKUP_PREFIX = "workstream-backup"
BACKUP_SOURCE_TAG = "automated-backup"
BACKUP_CONTENT_TYPE = "application/gzip"


def _new_run_id() -> str:
    return uuid4().hex[:8]


@dataclass
class Snapshot:
    """
    Entite Snapshot.

    Cree au debut d'une tentative, n'existe localement que pendant
    celle-ci. La copie compressee persiste dans le bucket jusqu'au
    passage de la retention.

    Attributes:
        created_at: Date de creation du backup (UTC).
        staging_dir: Repertoire des fichiers temporaires.
        run_id: Identifiant unique de l'execution.
    """

    created_at: datetime
    staging_dir: Path
    run_id: str = field(default_factory=_new_run_id)

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)
        else:
            self.created_at = self.created_at.astimezone(timezone.utc)
        self.staging_dir = Path(self.staging_dir)

    @property
    def logical_name(self) -> str:
        """Nom logique derive de la date de creation."""
        return f"{BACKUP_PREFIX}-{self.created_at.strftime('%Y-%m-%d-%H-%M-%S')}"

    @property
    def dump_path(self) -> Path:
        """Fichier SQL brut."""
        return self.staging_dir / f"{self.logical_name}-{self.run_id}.sql"

    @property
    def archive_path(self) -> Path:
        """Fichier SQL compresse."""
        return self.staging_dir / f"{self.logical_name}-{self.run_id}.sql.gz"

    @property
    def local_paths(self) -> list[Path]:
        return [self.dump_path, self.archive_path]

    @property
    def remote_path(self) -> str:
        """Chemin distant <annee>/<mois>/<nom>.sql.gz."""
        return f"{self.created_at:%Y}/{self.created_at:%m}/{self.logical_name}.sql.gz"

    @property
    def metadata(self) -> dict[str, str]:
        """Metadonnees personnalisees attachees a l'objet distant."""
        return {
            "createdAt": self.created_at.isoformat(),
            "source": BACKUP_SOURCE_TAG,
        }

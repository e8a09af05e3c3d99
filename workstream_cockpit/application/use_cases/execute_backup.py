"""
Use Case: Sauvegarde de la base PostgreSQL.

Responsabilite unique:
----------------------
Executer un cycle complet de backup avec retry:
dump -> compression -> upload -> nettoyage local -> retention.

Usage:
------
    use_case = ExecuteBackupUseCase(config, dumper, compressor, storage)
    report = use_case.execute(max_attempts=3)

Garanties:
----------
- Les fichiers locaux sont supprimes a chaque tentative (succes ou echec).
- Chaque tentative repart du dump.
- Un echec de la retention fait echouer la tentative (retry complet).
- Apres max_attempts echecs, BackupExhaustedError est levee.
"""

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog

from workstream_cockpit.application.ports.database_dumper import DatabaseDumper
from workstream_cockpit.application.ports.file_compressor import FileCompressor
from workstream_cockpit.application.ports.object_storage import ObjectStorage
from workstream_cockpit.domain.entities.remote_object import RemoteObject
from workstream_cockpit.domain.entities.snapshot import BACKUP_CONTENT_TYPE, Snapshot
from workstream_cockpit.domain.exceptions import (
    BackupError,
    BackupExhaustedError,
    CompressionError,
    DumpError,
    InvalidAttemptsError,
    RetentionError,
    UploadError,
)
from workstream_cockpit.domain.services.backoff import BackoffPolicy, linear_backoff
from workstream_cockpit.domain.value_objects.backup_config import BackupConfig

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class BackupReport:
    """
    Rapport d'un backup reussi.

    Attributes:
        remote_uri: URI complete de l'objet uploade (gs://bucket/path).
        snapshot: Snapshot produit par la tentative gagnante.
        size_bytes: Taille du fichier compresse.
        deleted_count: Nombre d'anciens backups supprimes.
        attempts: Nombre de tentatives utilisees.
        duration_seconds: Duree totale de l'operation.
    """

    remote_uri: str
    snapshot: Snapshot
    size_bytes: int = 0
    deleted_count: int = 0
    attempts: int = 1
    duration_seconds: float = 0.0


class ExecuteBackupUseCase:
    """
    Use Case: Sauvegarde avec retry.

    Toutes les dependances sont injectees: outil de dump, compresseur,
    stockage objet, politique d'attente, sommeil et horloge.

    Example:
        >>> use_case = ExecuteBackupUseCase(config, dumper, compressor, storage)
        >>> report = use_case.execute(max_attempts=3)
        >>> print(report.remote_uri)
    """

    def __init__(
        self,
        config: BackupConfig,
        dumper: DatabaseDumper,
        compressor: FileCompressor,
        storage: ObjectStorage,
        backoff: Optional[BackoffPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        Initialise le use case.

        Args:
            config: Configuration du backup.
            dumper: Export de la base.
            compressor: Compression du dump.
            storage: Stockage distant.
            backoff: Delai (s) apres la tentative k (defaut: 2s * k).
            sleep: Fonction d'attente.
            clock: Horloge UTC.

        Raises:
            InvalidRetentionError: Si la retention est invalide.
        """
        self._config = config
        self._retention = config.retention
        self._dumper = dumper
        self._compressor = compressor
        self._storage = storage
        self._backoff = backoff or linear_backoff()
        self._sleep = sleep
        self._clock = clock

    @property
    def config(self) -> BackupConfig:
        return self._config

    def execute(self, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> BackupReport:
        """
        Execute le backup complet avec retry.

        Args:
            max_attempts: Nombre maximum de tentatives (>= 1).

        Returns:
            BackupReport de la premiere tentative reussie.

        Raises:
            InvalidAttemptsError: Si max_attempts < 1.
            BackupExhaustedError: Si toutes les tentatives echouent.
        """
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
            raise InvalidAttemptsError(max_attempts)

        start_time = time.monotonic()
        last_error: Optional[BackupError] = None

        for attempt in range(1, max_attempts + 1):
            logger.info("backup_attempt_started", attempt=attempt, max_attempts=max_attempts)

            try:
                report = self.create_backup()
                report.deleted_count = self.cleanup_old_backups()
            except BackupError as e:
                last_error = e
                logger.error(
                    "backup_attempt_failed",
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=str(e),
                    error_code=e.code,
                )

                if attempt < max_attempts:
                    delay = self._backoff(attempt)
                    logger.info("backup_retry_scheduled", attempt=attempt, delay_seconds=delay)
                    self._sleep(delay)
                continue

            report.attempts = attempt
            report.duration_seconds = time.monotonic() - start_time
            logger.info(
                "backup_process_completed",
                remote_uri=report.remote_uri,
                size_bytes=report.size_bytes,
                deleted_count=report.deleted_count,
                attempts=attempt,
                duration_seconds=round(report.duration_seconds, 2),
            )
            return report

        logger.error(
            "backup_all_attempts_failed",
            attempts=max_attempts,
            last_error=str(last_error),
        )
        raise BackupExhaustedError(max_attempts, last_error) from last_error

    def create_backup(self) -> BackupReport:
        """
        Cree un backup et l'envoie dans le bucket.

        Les fichiers locaux sont supprimes dans tous les cas.

        Returns:
            BackupReport (remote_uri, snapshot, size_bytes).

        Raises:
            DumpError, CompressionError, UploadError: Selon l'etape en echec.
        """
        snapshot = Snapshot(created_at=self._clock(), staging_dir=self._config.staging_dir)

        with structlog.contextvars.bound_contextvars(run_id=snapshot.run_id):
            logger.info("backup_started", name=snapshot.logical_name)

            step = "dump"
            try:
                self._dump(snapshot)

                step = "compress"
                size = self._compress(snapshot)

                step = "upload"
                remote_uri = self._upload(snapshot)
            except BackupError as e:
                logger.error("backup_step_failed", step=step, name=snapshot.logical_name, error=str(e))
                raise
            finally:
                self._cleanup_local_files(snapshot.local_paths)

            logger.info("backup_completed", remote_uri=remote_uri, size_bytes=size)

        return BackupReport(remote_uri=remote_uri, snapshot=snapshot, size_bytes=size)

    def cleanup_old_backups(self) -> int:
        """
        Supprime les backups plus vieux que la retention.

        Parcourt tout le bucket (sans prefixe).

        Returns:
            Nombre d'objets supprimes.

        Raises:
            RetentionError: Si le listing ou une suppression echoue.
        """
        now = self._clock()
        cutoff = self._retention.cutoff(now)
        logger.info("backup_cleanup_started", cutoff=cutoff.isoformat(), retention_days=self._retention.days)

        deleted = 0
        try:
            for remote in self._storage.list_objects():
                if not self._retention.is_expired(remote.created_at, now):
                    continue
                logger.info(
                    "backup_deleted",
                    name=remote.name,
                    created_at=remote.created_at.isoformat(),
                )
                self._storage.delete(remote.name)
                deleted += 1
        except Exception as e:
            logger.error("backup_step_failed", step="retention", error=str(e))
            raise RetentionError(str(e)) from e

        logger.info("backup_cleanup_completed", deleted_count=deleted)
        return deleted

    def list_backups(self) -> list[RemoteObject]:
        """
        Liste les backups distants.

        Returns:
            Objets du bucket, du plus recent au plus ancien.
        """
        return sorted(
            self._storage.list_objects(),
            key=lambda remote: remote.created_at,
            reverse=True,
        )

    def _dump(self, snapshot: Snapshot) -> None:
        try:
            snapshot.staging_dir.mkdir(parents=True, exist_ok=True)
            self._dumper.dump(self._config.database, snapshot.dump_path)
        except DumpError:
            raise
        except Exception as e:
            raise DumpError(str(e)) from e

    def _compress(self, snapshot: Snapshot) -> int:
        try:
            self._compressor.compress(snapshot.dump_path, snapshot.archive_path)
            return snapshot.archive_path.stat().st_size
        except CompressionError:
            raise
        except Exception as e:
            raise CompressionError(str(e)) from e

    def _upload(self, snapshot: Snapshot) -> str:
        destination = snapshot.remote_path
        logger.info("upload_started", bucket=self._storage.bucket_name, destination=destination)

        try:
            self._storage.upload(
                snapshot.archive_path,
                destination,
                content_type=BACKUP_CONTENT_TYPE,
                metadata=snapshot.metadata,
            )
        except UploadError:
            raise
        except Exception as e:
            raise UploadError(str(e), destination=destination) from e

        return self._storage.uri_for(destination)

    def _cleanup_local_files(self, paths: Iterable[Path]) -> None:
        """Supprime les fichiers temporaires. Un echec est journalise, jamais propage."""
        for path in paths:
            try:
                if path.exists():
                    path.unlink()
                    logger.debug("local_file_deleted", path=str(path))
            except OSError as e:
                logger.warning("local_file_cleanup_failed", path=str(path), error=str(e))

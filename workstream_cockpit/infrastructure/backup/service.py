"""
Backup Service - Assemblage du use case de sauvegarde.

Responsabilite unique:
----------------------
Construire ExecuteBackupUseCase depuis BackupSettings avec les
adapters concrets (pg_dump, gzip, Google Cloud Storage).

Usage:
------
    report = execute_backup(max_attempts=3)   # None si desactive
    # ou
    use_case = create_backup_service(settings)
    if use_case:
        use_case.execute(max_attempts=3)
"""

import time
from collections.abc import Callable
from datetime import datetime
from typing import Optional

from workstream_cockpit.application.ports.database_dumper import DatabaseDumper
from workstream_cockpit.application.ports.file_compressor import FileCompressor
from workstream_cockpit.application.ports.object_storage import ObjectStorage
from workstream_cockpit.application.use_cases.execute_backup import (
    DEFAULT_MAX_ATTEMPTS,
    BackupReport,
    ExecuteBackupUseCase,
    utcnow,
)
from workstream_cockpit.domain.services.backoff import BackoffPolicy
from workstream_cockpit.infrastructure.backup.compression import GzipCompressor
from workstream_cockpit.infrastructure.backup.config import BackupSettings, get_backup_settings
from workstream_cockpit.infrastructure.backup.pg_dumper import PgDumpDumper
from workstream_cockpit.infrastructure.logging import get_logger

logger = get_logger(__name__)


def create_backup_service(
    settings: Optional[BackupSettings] = None,
    dumper: Optional[DatabaseDumper] = None,
    compressor: Optional[FileCompressor] = None,
    storage: Optional[ObjectStorage] = None,
    backoff: Optional[BackoffPolicy] = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], datetime] = utcnow,
) -> Optional[ExecuteBackupUseCase]:
    """
    Cree le use case de backup depuis la configuration.

    Args:
        settings: Configuration (defaut: get_backup_settings()).
        dumper, compressor, storage: Adapters (defaut: pg_dump, gzip, GCS).
        backoff, sleep, clock: Voir ExecuteBackupUseCase.

    Returns:
        ExecuteBackupUseCase, ou None si le backup est desactive ou
        si la configuration GCP est incomplete.
    """
    settings = settings or get_backup_settings()

    if not settings.backup_enabled:
        logger.info("backup_disabled", reason="BACKUP_ENABLED is not true")
        return None

    config = settings.to_backup_config()
    missing = config.missing_storage_keys()
    if missing:
        logger.warning("backup_disabled_missing_gcp_config", missing=missing)
        return None

    if storage is None:
        from workstream_cockpit.infrastructure.backup.gcs_storage import GcsObjectStorage

        storage = GcsObjectStorage.from_service_account(
            config.gcp_project_id,
            config.gcp_bucket_name,
            config.gcp_key_file_path,
        )

    logger.info(
        "backup_service_initialized",
        project=config.gcp_project_id,
        bucket=config.gcp_bucket_name,
        retention_days=config.retention_days,
    )

    return ExecuteBackupUseCase(
        config,
        dumper=dumper or PgDumpDumper(),
        compressor=compressor or GzipCompressor(),
        storage=storage,
        backoff=backoff,
        sleep=sleep,
        clock=clock,
    )


def execute_backup(
    settings: Optional[BackupSettings] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    **dependencies,
) -> Optional[BackupReport]:
    """
    Point d'entree unique (manuel et planifie).

    Args:
        settings: Configuration (defaut: get_backup_settings()).
        max_attempts: Nombre maximum de tentatives.
        **dependencies: Transmis a create_backup_service.

    Returns:
        BackupReport, ou None si le backup est desactive.

    Raises:
        BackupExhaustedError: Si toutes les tentatives echouent.
    """
    use_case = create_backup_service(settings, **dependencies)

    if use_case is None:
        logger.info("backup_service_not_available")
        return None

    return use_case.execute(max_attempts)

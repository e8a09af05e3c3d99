"""
BackupScheduler - Planificateur de sauvegardes.

Responsabilite unique:
----------------------
Declencher execute_backup selon l'expression cron configuree
(BACKUP_SCHEDULE, UTC, defaut "0 2 * * *").

Usage:
------
    scheduler = BackupScheduler(settings)
    scheduler.start()  # Demarre en arriere-plan
    scheduler.stop()   # Arrete le scheduler

    # Worker dedie (bloquant):
    BackupScheduler(settings, blocking=True).start()

Un echec de backup planifie est journalise: il ne fait jamais
tomber le processus hote.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from workstream_cockpit.application.use_cases.execute_backup import DEFAULT_MAX_ATTEMPTS, BackupReport
from workstream_cockpit.infrastructure.backup.config import BackupSettings
from workstream_cockpit.infrastructure.backup.service import execute_backup
from workstream_cockpit.infrastructure.logging import get_logger

logger = get_logger(__name__)

JOB_ID = "workstream_backup"


class BackupScheduler:
    """
    Planificateur de sauvegardes automatiques.

    Execute les backups selon le schedule configure.
    """

    def __init__(
        self,
        settings: BackupSettings,
        runner: Optional[Callable[[], Optional[BackupReport]]] = None,
        scheduler: Optional[Any] = None,
        blocking: bool = False,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """
        Initialise le scheduler.

        Args:
            settings: Configuration des sauvegardes.
            runner: Fonction de backup (defaut: execute_backup(settings)).
            scheduler: Scheduler APScheduler (defaut selon blocking).
            blocking: True pour un worker dedie (start() bloque).
            max_attempts: Tentatives par backup planifie.
        """
        self._settings = settings
        self._runner = runner or (
            lambda: execute_backup(settings, max_attempts=max_attempts)
        )
        if scheduler is None:
            scheduler_cls = BlockingScheduler if blocking else BackgroundScheduler
            scheduler = scheduler_cls(timezone="UTC")
        self._scheduler = scheduler
        self._running = False

    def build_trigger(self) -> CronTrigger:
        """Construit le trigger cron (UTC)."""
        return CronTrigger.from_crontab(self._settings.backup_schedule, timezone="UTC")

    def start(self) -> bool:
        """
        Demarre le scheduler.

        Returns:
            False si le backup est desactive (rien n'est planifie).

        Raises:
            ValueError: Si l'expression cron est invalide.
        """
        if not self._settings.backup_enabled:
            logger.info("backup_scheduler_disabled")
            return False

        if self._running:
            logger.warning("scheduler_already_running")
            return True

        self._scheduler.add_job(
            self._run_backup,
            trigger=self.build_trigger(),
            id=JOB_ID,
            name="Backup quotidien",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        logger.info("scheduler_started", schedule=self._settings.backup_schedule, timezone="UTC")

        # BlockingScheduler.start() ne rend la main qu'a l'arret
        self._running = True
        self._scheduler.start()
        return True

    def stop(self) -> None:
        """Arrete le scheduler."""
        if not self._running:
            return

        self._scheduler.shutdown(wait=True)
        self._running = False

        logger.info("scheduler_stopped")

    def run_now(self) -> Optional[BackupReport]:
        """
        Execute un backup immediatement.

        Returns:
            Resultat du backup (None si desactive).

        Raises:
            BackupExhaustedError: Si toutes les tentatives echouent.
        """
        logger.info("manual_backup_triggered")
        return self._runner()

    def _run_backup(self) -> None:
        """Execute le backup planifie."""
        logger.info("scheduled_backup_started")

        try:
            result = self._runner()
        except Exception as e:
            logger.error("scheduled_backup_failed", error=str(e), error_type=type(e).__name__)
            return

        if result is not None:
            logger.info(
                "scheduled_backup_completed",
                remote_uri=result.remote_uri,
                deleted_count=result.deleted_count,
            )

    @property
    def is_running(self) -> bool:
        """Retourne True si le scheduler est actif."""
        return self._running

    @property
    def next_run(self) -> Optional[datetime]:
        """Retourne la prochaine execution planifiee."""
        if not self._running:
            return None

        job = self._scheduler.get_job(JOB_ID)
        if job:
            return job.next_run_time
        return None

#!/usr/bin/env python3
"""
Ligne de commande des sauvegardes Workstream Cockpit.

Usage:
------
    workstream-backup run [--max-attempts 3]   # backup manuel
    workstream-backup schedule                  # worker cron (bloquant)
    workstream-backup list                      # backups distants
    workstream-backup status                    # etat de la configuration

Options globales:
-----------------
    --env-file PATH   Fichier .env a charger (defaut: .env)
    --json-logs       Logs JSON (production)

Codes de sortie:
----------------
- 0: succes (ou backup desactive)
- 1: echec du backup
"""

import argparse
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from workstream_cockpit.application.use_cases.execute_backup import DEFAULT_MAX_ATTEMPTS
from workstream_cockpit.domain.exceptions import BackupError
from workstream_cockpit.infrastructure.backup.config import BackupSettings
from workstream_cockpit.infrastructure.backup.scheduler import BackupScheduler
from workstream_cockpit.infrastructure.backup.service import create_backup_service, execute_backup
from workstream_cockpit.infrastructure.logging import configure_logging, get_logger

logger = get_logger("workstream_cockpit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workstream-backup",
        description="Sauvegardes PostgreSQL de Workstream Cockpit vers Google Cloud Storage.",
    )
    parser.add_argument("--env-file", default=".env", help="Fichier .env a charger")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Logs JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Execute un backup maintenant")
    run_parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help=f"Nombre maximum de tentatives (defaut: {DEFAULT_MAX_ATTEMPTS})",
    )

    schedule_parser = subparsers.add_parser("schedule", help="Lance le worker planifie")
    schedule_parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Tentatives par backup planifie",
    )

    subparsers.add_parser("list", help="Liste les backups distants")
    subparsers.add_parser("status", help="Affiche l'etat de la configuration")

    return parser


def cmd_run(settings: BackupSettings, args: argparse.Namespace) -> int:
    """Backup manuel: 0 si succes ou desactive, 1 si echec."""
    logger.info("manual_backup_started", **settings.describe())

    try:
        result = execute_backup(settings, max_attempts=args.max_attempts)
    except BackupError as e:
        logger.error("manual_backup_failed", error=str(e), error_code=e.code)
        return 1
    except Exception as e:
        # Client GCS (fichier de cle illisible, credentials invalides...)
        logger.error(
            "manual_backup_failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        return 1

    if result is None:
        logger.info("manual_backup_skipped")
    else:
        logger.info(
            "manual_backup_completed",
            remote_uri=result.remote_uri,
            attempts=result.attempts,
            deleted_count=result.deleted_count,
        )
    return 0


def cmd_schedule(settings: BackupSettings, args: argparse.Namespace) -> int:
    """Worker planifie: bloque jusqu'a Ctrl+C."""
    scheduler = BackupScheduler(settings, blocking=True, max_attempts=args.max_attempts)

    try:
        started = scheduler.start()
    except ValueError as e:
        logger.error("invalid_backup_schedule", schedule=settings.backup_schedule, error=str(e))
        return 1
    except (KeyboardInterrupt, SystemExit):
        logger.info("scheduler_interrupted")
        return 0

    if not started:
        logger.info("backup_system_disabled")
    return 0


def cmd_list(settings: BackupSettings, args: argparse.Namespace) -> int:
    """Affiche les backups distants, du plus recent au plus ancien."""
    use_case = create_backup_service(settings)
    if use_case is None:
        return 0

    try:
        backups = use_case.list_backups()
    except Exception as e:
        logger.error("list_backups_failed", error=str(e))
        return 1

    for remote in backups:
        print(f"{remote.created_at.isoformat()}  {remote.size_bytes:>12}  {remote.name}")
    logger.info("backups_listed", count=len(backups))
    return 0


def cmd_status(settings: BackupSettings, args: argparse.Namespace) -> int:
    """Affiche la configuration (sans secrets)."""
    for key, value in settings.describe().items():
        print(f"{key}: {value}")
    print(f"CONFIGURED: {settings.is_configured}")
    return 0


COMMANDS = {
    "run": cmd_run,
    "schedule": cmd_schedule,
    "list": cmd_list,
    "status": cmd_status,
}


def main(argv: Optional[Sequence[str]] = None, settings: Optional[BackupSettings] = None) -> int:
    """
    Point d'entree de la CLI.

    Args:
        argv: Arguments (defaut: sys.argv[1:]).
        settings: Configuration (defaut: lue depuis l'environnement).

    Returns:
        Code de sortie.
    """
    args = build_parser().parse_args(argv)

    if settings is None:
        load_dotenv(args.env_file)
        settings = BackupSettings()

    json_logs = settings.log_json if args.json_logs is None else args.json_logs
    configure_logging(json_logs=json_logs, log_level=settings.log_level)

    return COMMANDS[args.command](settings, args)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

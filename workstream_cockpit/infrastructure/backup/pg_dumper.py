"""
PgDumpDumper - Export PostgreSQL via pg_dump.

Responsabilite unique:
----------------------
Executer pg_dump vers un fichier SQL local.

Le mot de passe passe par PGPASSWORD dans l'environnement du
processus enfant uniquement; la commande est une liste d'arguments
(aucun shell).
"""

import os
import subprocess
from pathlib import Path
from typing import Optional

from workstream_cockpit.application.ports.database_dumper import DatabaseDumper
from workstream_cockpit.domain.exceptions import DumpError
from workstream_cockpit.domain.value_objects.backup_config import DatabaseConnection
from workstream_cockpit.infrastructure.logging import get_logger

logger = get_logger(__name__)


class PgDumpDumper(DatabaseDumper):
    """
    Dumper base sur le binaire pg_dump.

    Example:
        >>> dumper = PgDumpDumper()
        >>> dumper.dump(connection, Path("/tmp/backup.sql"))
    """

    def __init__(self, executable: str = "pg_dump", timeout: Optional[float] = None):
        """
        Initialise le dumper.

        Args:
            executable: Binaire pg_dump (nom ou chemin).
            timeout: Duree maximale du dump en secondes (None = illimite).
        """
        self._executable = executable
        self._timeout = timeout

    def build_command(self, connection: DatabaseConnection, output_path: Path) -> list[str]:
        """Construit la commande pg_dump (les valeurs vides sont omises)."""
        cmd = [self._executable]
        if connection.host:
            cmd += ["-h", connection.host]
        if connection.port:
            cmd += ["-p", str(connection.port)]
        if connection.user:
            cmd += ["-U", connection.user]
        cmd += [
            "-d", connection.name,
            "-f", str(output_path),
            "--format=plain",
            "--no-owner",
            "--no-acl",
        ]
        return cmd

    def dump(self, connection: DatabaseConnection, output_path: Path) -> None:
        env = os.environ.copy()
        if connection.password:
            env["PGPASSWORD"] = connection.password

        cmd = self.build_command(connection, output_path)
        logger.info("dump_started", output=str(output_path), database=connection.name)

        try:
            process = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=env,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise DumpError(f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise DumpError(str(e)) from e

        if process.returncode != 0:
            error = process.stderr.decode(errors="replace").strip()
            raise DumpError(
                error or f"exit code {process.returncode}",
                returncode=process.returncode,
            )

        logger.info("dump_completed", output=str(output_path))

"""
Tests unitaires pour PgDumpDumper.

subprocess.run est remplace: aucun pg_dump reel n'est lance.
"""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from workstream_cockpit.domain.exceptions import DumpError
from workstream_cockpit.domain.value_objects import DatabaseConnection
from workstream_cockpit.infrastructure.backup import pg_dumper
from workstream_cockpit.infrastructure.backup.pg_dumper import PgDumpDumper


@pytest.fixture
def connection() -> DatabaseConnection:
    return DatabaseConnection(
        host="db",
        port="5432",
        user="cockpit",
        password="s3cret",
        name="workstream_cockpit",
    )


@pytest.fixture
def fake_run(monkeypatch) -> MagicMock:
    """Remplace subprocess.run (succes par defaut)."""
    run = MagicMock(return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout=b"", stderr=b""))
    monkeypatch.setattr(pg_dumper.subprocess, "run", run)
    return run


class TestPgDumpDumper:
    """Tests pour PgDumpDumper."""

    def test_build_command_full(self, connection):
        """La commande contient tous les parametres."""
        cmd = PgDumpDumper().build_command(connection, Path("/tmp/out.sql"))

        assert cmd[0] == "pg_dump"
        assert cmd[cmd.index("-h") + 1] == "db"
        assert cmd[cmd.index("-p") + 1] == "5432"
        assert cmd[cmd.index("-U") + 1] == "cockpit"
        assert cmd[cmd.index("-d") + 1] == "workstream_cockpit"
        assert cmd[cmd.index("-f") + 1] == "/tmp/out.sql"

    def test_build_command_omits_empty_values(self):
        """Les valeurs vides ne sont pas passees."""
        cmd = PgDumpDumper().build_command(DatabaseConnection(), Path("/tmp/out.sql"))

        assert "-h" not in cmd
        assert "-p" not in cmd
        assert "-U" not in cmd
        assert cmd[cmd.index("-d") + 1] == "workstream_cockpit"

    def test_password_only_in_environment(self, connection, fake_run):
        """Le mot de passe passe par PGPASSWORD, jamais en argument."""
        PgDumpDumper().dump(connection, Path("/tmp/out.sql"))

        args, kwargs = fake_run.call_args
        assert "s3cret" not in args[0]
        assert kwargs["env"]["PGPASSWORD"] == "s3cret"

    def test_custom_executable(self, connection, fake_run):
        """Le binaire est configurable."""
        PgDumpDumper(executable="/usr/lib/postgresql/16/bin/pg_dump").dump(
            connection, Path("/tmp/out.sql")
        )

        assert fake_run.call_args[0][0][0] == "/usr/lib/postgresql/16/bin/pg_dump"

    def test_non_zero_exit_raises(self, connection, fake_run):
        """Un code de sortie non nul leve DumpError avec stderr."""
        fake_run.return_value = subprocess.CompletedProcess(
            args=[],
            returncode=1,
            stdout=b"",
            stderr=b"pg_dump: error: connection to server failed\n",
        )

        with pytest.raises(DumpError) as exc_info:
            PgDumpDumper().dump(connection, Path("/tmp/out.sql"))

        assert "connection to server failed" in str(exc_info.value)
        assert exc_info.value.returncode == 1

    def test_missing_binary_raises(self, connection, fake_run):
        """pg_dump introuvable leve DumpError."""
        fake_run.side_effect = FileNotFoundError(2, "No such file or directory", "pg_dump")

        with pytest.raises(DumpError):
            PgDumpDumper().dump(connection, Path("/tmp/out.sql"))

    def test_timeout_raises(self, connection, fake_run):
        """Un depassement du delai leve DumpError."""
        fake_run.side_effect = subprocess.TimeoutExpired(cmd="pg_dump", timeout=60)

        with pytest.raises(DumpError) as exc_info:
            PgDumpDumper(timeout=60).dump(connection, Path("/tmp/out.sql"))

        assert "timed out" in str(exc_info.value)

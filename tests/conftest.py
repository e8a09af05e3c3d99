"""
Configuration et fixtures pytest.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import structlog

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from workstream_cockpit.application.ports.database_dumper import DatabaseDumper
from workstream_cockpit.domain.exceptions import DumpError
from workstream_cockpit.infrastructure.adapters.memory_object_storage import MemoryObjectStorage
from workstream_cockpit.infrastructure.backup.config import BackupSettings

BACKUP_ENV_VARS = (
    "BACKUP_ENABLED",
    "GCP_PROJECT_ID",
    "GCP_BUCKET_NAME",
    "GCP_SERVICE_ACCOUNT_KEY_PATH",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_DB",
    "BACKUP_RETENTION_DAYS",
    "BACKUP_SCHEDULE",
    "BACKUP_STAGING_DIR",
    "LOG_LEVEL",
    "LOG_JSON",
)

DUMP_CONTENT = "-- PostgreSQL database dump\nCREATE TABLE workstreams (id serial);\n"


# ═══════════════════════════════════════════════════════════════════════════════
# DOUBLES DE TEST
# ═══════════════════════════════════════════════════════════════════════════════

class ScriptedDumper(DatabaseDumper):
    """
    Dumper de test: ecrit un fichier SQL connu.

    Echoue sur les `failures` premiers appels, apres avoir ecrit un
    fichier partiel (pour verifier le nettoyage).
    """

    def __init__(self, failures: int = 0, content: str = DUMP_CONTENT):
        self.failures = failures
        self.content = content
        self.calls: list[Path] = []
        self.connections = []

    def dump(self, connection, output_path: Path) -> None:
        self.calls.append(output_path)
        self.connections.append(connection)
        output_path.write_text(self.content)
        if len(self.calls) <= self.failures:
            raise DumpError("connection refused")


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENVIRONNEMENT
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Isole les tests des variables d'environnement et du .env local."""
    for name in BACKUP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restaure structlog et les handlers racine apres configure_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        # handler installe par logging.basicConfig
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fixed_now() -> datetime:
    """Horloge figee: 2024-03-15T02:00:00Z."""
    return datetime(2024, 3, 15, 2, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def staging_dir(tmp_path) -> Path:
    """Repertoire des fichiers temporaires."""
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def backup_settings(staging_dir: Path) -> BackupSettings:
    """Settings actives et completes."""
    return BackupSettings(
        _env_file=None,
        backup_enabled=True,
        gcp_project_id="workstream-project",
        gcp_bucket_name="workstream-backups",
        gcp_service_account_key_path="/app/config/gcp-service-account.json",
        postgres_host="db",
        postgres_port="5432",
        postgres_user="cockpit",
        postgres_password="s3cret",
        backup_staging_dir=str(staging_dir),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - PORTS
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def dumper() -> ScriptedDumper:
    """Dumper qui reussit toujours."""
    return ScriptedDumper()


@pytest.fixture
def make_dumper():
    """Fabrique de dumpers qui echouent N fois."""
    return ScriptedDumper


@pytest.fixture
def memory_storage() -> MemoryObjectStorage:
    """Bucket en memoire."""
    return MemoryObjectStorage("workstream-backups")


@pytest.fixture
def sleeps() -> list:
    """Enregistre les attentes demandees."""
    return []


# ═══════════════════════════════════════════════════════════════════════════════
# MARKERS
# ═══════════════════════════════════════════════════════════════════════════════

def pytest_configure(config):
    """Configure les markers personnalises."""
    config.addinivalue_line("markers", "unit: Tests unitaires rapides")
    config.addinivalue_line("markers", "integration: Tests d'integration")
    config.addinivalue_line("markers", "slow: Tests lents (>1s)")

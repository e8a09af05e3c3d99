"""
Tests unitaires pour RetentionPolicy et BackupConfig.
"""

from datetime import timedelta

import pytest

from workstream_cockpit.domain.exceptions import InvalidRetentionError
from workstream_cockpit.domain.value_objects import (
    DEFAULT_DATABASE_NAME,
    BackupConfig,
    DatabaseConnection,
    RetentionPolicy,
)


class TestRetentionPolicy:
    """Tests pour RetentionPolicy."""

    def test_default_is_thirty_days(self):
        """La retention par defaut est 30 jours."""
        assert RetentionPolicy().days == 30

    def test_cutoff(self, fixed_now):
        """cutoff retourne now - days."""
        policy = RetentionPolicy(30)

        assert policy.cutoff(fixed_now) == fixed_now - timedelta(days=30)

    def test_boundary(self, fixed_now):
        """10j et 29j sont conserves, 31j est expire."""
        policy = RetentionPolicy(30)

        assert policy.is_expired(fixed_now - timedelta(days=10), fixed_now) is False
        assert policy.is_expired(fixed_now - timedelta(days=29), fixed_now) is False
        assert policy.is_expired(fixed_now - timedelta(days=31), fixed_now) is True

    def test_exactly_at_cutoff_is_kept(self, fixed_now):
        """Un objet exactement a la limite n'est pas expire."""
        policy = RetentionPolicy(30)

        assert policy.is_expired(fixed_now - timedelta(days=30), fixed_now) is False

    @pytest.mark.parametrize("value", [0, -5, "30", 1.5, True])
    def test_invalid_values_raise(self, value):
        """Une retention invalide leve InvalidRetentionError."""
        with pytest.raises(InvalidRetentionError):
            RetentionPolicy(value)


class TestBackupConfig:
    """Tests pour BackupConfig."""

    def test_missing_storage_keys(self):
        """missing_storage_keys liste les cles GCP absentes."""
        config = BackupConfig(gcp_bucket_name="bucket")

        assert config.missing_storage_keys() == [
            "GCP_PROJECT_ID",
            "GCP_SERVICE_ACCOUNT_KEY_PATH",
        ]
        assert config.is_complete is False

    def test_complete_config(self):
        """is_complete est True avec les trois cles."""
        config = BackupConfig(
            gcp_project_id="p",
            gcp_bucket_name="b",
            gcp_key_file_path="/k.json",
        )

        assert config.is_complete is True

    def test_database_defaults(self):
        """Le nom de base par defaut est celui du projet."""
        assert BackupConfig().database.name == DEFAULT_DATABASE_NAME == "workstream_cockpit"

    def test_password_not_in_repr(self):
        """Le mot de passe n'apparait pas dans repr()."""
        connection = DatabaseConnection(user="cockpit", password="s3cret")

        assert "s3cret" not in repr(connection)

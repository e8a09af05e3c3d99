"""
Tests unitaires pour les Exceptions de sauvegarde.
"""

from workstream_cockpit.domain.exceptions import (
    BackupError,
    BackupExhaustedError,
    CompressionError,
    DumpError,
    InvalidAttemptsError,
    RetentionError,
    UploadError,
)


class TestBackupError:
    """Tests pour BackupError."""

    def test_create_with_message_only(self):
        """Test creation avec message seul."""
        exc = BackupError("Test error")
        assert exc.message == "Test error"
        assert exc.code == "BackupError"

    def test_str_representation(self):
        """Test representation string."""
        exc = BackupError("Test error", code="TEST")
        assert str(exc) == "[TEST] Test error"


class TestStepErrors:
    """Tests pour les erreurs d'etape."""

    def test_dump_error_keeps_tool_message(self):
        """DumpError conserve le message de pg_dump."""
        exc = DumpError("FATAL: password authentication failed", returncode=1)
        assert "password authentication failed" in exc.message
        assert exc.code == "DUMP_FAILED"
        assert exc.returncode == 1

    def test_compression_error(self):
        """Test CompressionError."""
        exc = CompressionError("No space left on device")
        assert exc.code == "COMPRESSION_FAILED"
        assert "No space left" in str(exc)

    def test_upload_error_with_destination(self):
        """UploadError inclut la destination."""
        exc = UploadError("403 Forbidden", destination="2024/03/x.sql.gz")
        assert exc.destination == "2024/03/x.sql.gz"
        assert "2024/03/x.sql.gz" in exc.message

    def test_retention_error(self):
        """Test RetentionError."""
        exc = RetentionError("list failed")
        assert exc.code == "RETENTION_FAILED"

    def test_all_inherit_backup_error(self):
        """Toutes les erreurs heritent de BackupError."""
        for exc in (
            DumpError("x"),
            CompressionError("x"),
            UploadError("x"),
            RetentionError("x"),
            InvalidAttemptsError(0),
        ):
            assert isinstance(exc, BackupError)


class TestBackupExhaustedError:
    """Tests pour BackupExhaustedError."""

    def test_message_derives_from_last_error(self):
        """Le message reprend la derniere erreur."""
        last = DumpError("connection refused")
        exc = BackupExhaustedError(2, last)

        assert exc.attempts == 2
        assert exc.last_error is last
        assert "connection refused" in str(exc)

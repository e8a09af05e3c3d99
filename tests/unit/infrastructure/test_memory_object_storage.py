"""
Tests unitaires pour MemoryObjectStorage.
"""

from datetime import datetime, timezone

from workstream_cockpit.infrastructure.adapters import MemoryObjectStorage


class TestMemoryObjectStorage:
    """Tests pour MemoryObjectStorage."""

    def test_upload_and_get(self, tmp_path):
        """upload() stocke et get() recupere."""
        local = tmp_path / "a.sql.gz"
        local.write_bytes(b"data")
        storage = MemoryObjectStorage("bucket")

        storage.upload(local, "2024/03/a.sql.gz", "application/gzip", {"source": "automated-backup"})

        assert storage.get("2024/03/a.sql.gz") == (
            b"data",
            "application/gzip",
            {"source": "automated-backup"},
        )

    def test_get_returns_none_for_missing(self):
        """get() retourne None si absent."""
        assert MemoryObjectStorage().get("missing") is None

    def test_put_sets_created_at(self):
        """put() ecrit createdAt en metadonnee."""
        storage = MemoryObjectStorage()
        storage.put("old.sql.gz", datetime(2024, 1, 1))

        (remote,) = storage.list_objects()

        assert remote.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_delete_missing_is_noop(self):
        """delete() d'un objet absent ne leve pas."""
        storage = MemoryObjectStorage()

        storage.delete("missing")

        assert storage.names() == []

    def test_uri(self):
        """uri_for utilise le schema memory://."""
        assert MemoryObjectStorage("b").uri_for("x") == "memory://b/x"

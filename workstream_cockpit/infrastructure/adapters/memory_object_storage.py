"""
MemoryObjectStorage - Implementation en memoire de l'ObjectStorage.

Responsabilite unique:
----------------------
Simuler un bucket (pour dev/tests).

Note:
-----
En production, utiliser GcsObjectStorage.
"""

from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Optional

from workstream_cockpit.application.ports.object_storage import ObjectStorage
from workstream_cockpit.domain.entities.remote_object import RemoteObject


class MemoryObjectStorage(ObjectStorage):
    """
    ObjectStorage en memoire.

    Thread-safe via Lock. Le contenu uploade est conserve pour
    permettre les verifications.

    Example:
        >>> storage = MemoryObjectStorage("test-bucket")
        >>> storage.put("2024/01/old.sql.gz", created_at=datetime(2024, 1, 1))
        >>> [o.name for o in storage.list_objects()]
        ['2024/01/old.sql.gz']
    """

    def __init__(self, bucket_name: str = "memory-bucket"):
        """Initialise le storage."""
        self._bucket_name = bucket_name
        self._objects: dict[str, tuple[bytes, str, dict[str, str], datetime]] = {}
        self._lock = Lock()

    @property
    def scheme(self) -> str:
        return "memory"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def upload(
        self,
        local_path: Path,
        destination: str,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        data = Path(local_path).read_bytes()
        with self._lock:
            self._objects[destination] = (
                data,
                content_type,
                dict(metadata),
                datetime.now(timezone.utc),
            )

    def put(
        self,
        name: str,
        created_at: datetime,
        data: bytes = b"",
        content_type: str = "application/gzip",
    ) -> None:
        """
        Ajoute directement un objet avec une date de creation donnee.

        Args:
            name: Chemin de l'objet.
            created_at: Date ecrite dans la metadonnee createdAt.
            data: Contenu de l'objet.
            content_type: Type MIME.
        """
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        with self._lock:
            self._objects[name] = (
                data,
                content_type,
                {"createdAt": created_at.isoformat()},
                created_at,
            )

    def list_objects(self) -> list[RemoteObject]:
        with self._lock:
            items = list(self._objects.items())

        objects = []
        for name, (data, _, metadata, stored_at) in items:
            remote = RemoteObject.from_metadata(
                name=name,
                metadata=metadata,
                fallback_created_at=stored_at,
                size_bytes=len(data),
            )
            if remote is not None:
                objects.append(remote)
        return objects

    def delete(self, name: str) -> None:
        with self._lock:
            self._objects.pop(name, None)

    def get(self, name: str) -> Optional[tuple[bytes, str, dict[str, str]]]:
        """
        Recupere un objet.

        Returns:
            (data, content_type, metadata) si existe, None sinon.
        """
        with self._lock:
            entry = self._objects.get(name)
        if entry is None:
            return None
        data, content_type, metadata, _ = entry
        return data, content_type, dict(metadata)

    def names(self) -> list[str]:
        """Noms des objets presents, tries."""
        with self._lock:
            return sorted(self._objects)

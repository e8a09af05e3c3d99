"""
GcsObjectStorage - Stockage des backups sur Google Cloud Storage.

Responsabilite unique:
----------------------
Uploader, lister et supprimer les objets du bucket de backup.

Authentification:
-----------------
Fichier JSON de compte de service (GCP_SERVICE_ACCOUNT_KEY_PATH).
"""

from pathlib import Path
from typing import Any

from google.api_core.exceptions import NotFound
from google.cloud import storage

from workstream_cockpit.application.ports.object_storage import ObjectStorage
from workstream_cockpit.domain.entities.remote_object import RemoteObject
from workstream_cockpit.infrastructure.logging import get_logger

logger = get_logger(__name__)


class GcsObjectStorage(ObjectStorage):
    """
    ObjectStorage adosse a un bucket GCS.

    Example:
        >>> storage = GcsObjectStorage.from_service_account(
        ...     "my-project", "my-bucket", "/app/config/gcp-key.json"
        ... )
        >>> storage.uri_for("2024/03/backup.sql.gz")
        'gs://my-bucket/2024/03/backup.sql.gz'
    """

    def __init__(self, client: Any, bucket_name: str):
        """
        Initialise le stockage.

        Args:
            client: Client google.cloud.storage (ou double de test).
            bucket_name: Bucket de destination.
        """
        self._client = client
        self._bucket_name = bucket_name
        self._bucket = client.bucket(bucket_name)

    @classmethod
    def from_service_account(
        cls,
        project_id: str,
        bucket_name: str,
        key_file_path: str,
    ) -> "GcsObjectStorage":
        """Cree le client GCS depuis un fichier de compte de service."""
        client = storage.Client.from_service_account_json(
            key_file_path,
            project=project_id,
        )
        return cls(client, bucket_name)

    @property
    def scheme(self) -> str:
        return "gs"

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
        blob = self._bucket.blob(destination)
        blob.metadata = dict(metadata)
        blob.upload_from_filename(str(local_path), content_type=content_type)

        logger.info("gcs_upload_completed", bucket=self._bucket_name, destination=destination)

    def list_objects(self) -> list[RemoteObject]:
        objects = []

        for blob in self._client.list_blobs(self._bucket_name):
            remote = RemoteObject.from_metadata(
                name=blob.name,
                metadata=blob.metadata,
                fallback_created_at=blob.time_created,
                size_bytes=blob.size or 0,
            )
            if remote is None:
                logger.warning("gcs_object_without_timestamp", name=blob.name)
                continue
            objects.append(remote)

        return objects

    def delete(self, name: str) -> None:
        try:
            self._bucket.blob(name).delete()
        except NotFound:
            # Deja supprime (retention concurrente)
            logger.debug("gcs_object_already_deleted", name=name)


"""
ObjectStorage Port - Interface du stockage objet.

Responsabilite unique:
----------------------
Definir le contrat pour stocker, lister et supprimer les backups.

Les implementations possibles:
- GcsObjectStorage: Google Cloud Storage (production)
- MemoryObjectStorage: En memoire (dev/tests)
"""

from abc import ABC, abstractmethod
from pathlib import Path

from workstream_cockpit.domain.entities.remote_object import RemoteObject


class ObjectStorage(ABC):
    """Interface pour le stockage distant des backups."""

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Schema d'URI du stockage (ex: "gs")."""
        pass

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """Nom du bucket cible."""
        pass

    @abstractmethod
    def upload(
        self,
        local_path: Path,
        destination: str,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """
        Envoie un fichier local dans le bucket.

        Args:
            local_path: Fichier a envoyer.
            destination: Chemin de l'objet dans le bucket.
            content_type: Type MIME de l'objet.
            metadata: Metadonnees personnalisees.
        """
        pass

    @abstractmethod
    def list_objects(self) -> list[RemoteObject]:
        """
        Liste tous les objets du bucket (sans prefixe).

        Returns:
            Liste des objets avec leur date de creation.
        """
        pass

    @abstractmethod
    def delete(self, name: str) -> None:
        """
        Supprime un objet.

        Idempotent: supprimer un objet absent n'est pas une erreur.
        """
        pass

    def uri_for(self, destination: str) -> str:
        """URI complete: <scheme>://<bucket>/<destination>."""
        return f"{self.scheme}://{self.bucket_name}/{destination}"

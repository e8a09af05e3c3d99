"""
RemoteObject Entity - Backup stocke dans le bucket.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def parse_created_at(value: Optional[str]) -> Optional[datetime]:
    """
    Parse un timestamp ISO-8601 stocke en metadonnee.

    Args:
        value: Chaine ISO-8601 (le suffixe "Z" est accepte).

    Returns:
        datetime UTC, ou None si absente ou illisible.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class RemoteObject:
    """
    Objet present dans le stockage distant.

    Attributes:
        name: Chemin de l'objet dans le bucket.
        created_at: Date de creation du backup (UTC).
        size_bytes: Taille de l'objet.
        metadata: Metadonnees personnalisees.
    """

    name: str
    created_at: datetime
    size_bytes: int = 0
    metadata: dict[str, str] = field(default_factory=dict)

    def is_older_than(self, cutoff: datetime) -> bool:
        """True si l'objet est strictement anterieur a cutoff."""
        return self.created_at < cutoff

    @classmethod
    def from_metadata(
        cls,
        name: str,
        metadata: Optional[dict[str, str]],
        fallback_created_at: Optional[datetime] = None,
        size_bytes: int = 0,
    ) -> Optional["RemoteObject"]:
        """
        Construit un RemoteObject depuis les metadonnees stockees.

        La date "createdAt" ecrite a l'upload est prioritaire; a defaut
        on utilise la date de creation du systeme de stockage.

        Returns:
            RemoteObject, ou None si aucune date n'est exploitable.
        """
        metadata = dict(metadata or {})
        created_at = parse_created_at(metadata.get("createdAt"))
        if created_at is None:
            created_at = fallback_created_at
        if created_at is None:
            return None
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            name=name,
            created_at=created_at,
            size_bytes=size_bytes or 0,
            metadata=metadata,
        )

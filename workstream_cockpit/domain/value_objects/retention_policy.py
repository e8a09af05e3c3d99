"""
Value Object pour la politique de retention des backups.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from workstream_cockpit.domain.exceptions import InvalidRetentionError

DEFAULT_RETENTION_DAYS = 30


@dataclass(frozen=True, slots=True)
class RetentionPolicy:
    """
    Fenetre de retention des backups distants.

    Tout objet dont la date de creation est strictement anterieure
    a (now - days) est eligible a la suppression.

    Attributes:
        days: Nombre de jours de conservation.

    Example:
        >>> policy = RetentionPolicy(30)
        >>> policy.cutoff(datetime(2024, 3, 31, tzinfo=timezone.utc))
        datetime.datetime(2024, 3, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """

    days: int = DEFAULT_RETENTION_DAYS

    def __post_init__(self) -> None:
        """Valide la retention apres initialisation."""
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            raise InvalidRetentionError(self.days)
        if self.days < 1:
            raise InvalidRetentionError(self.days)

    def cutoff(self, now: datetime) -> datetime:
        """Date limite: tout ce qui est plus ancien est expire."""
        return now - timedelta(days=self.days)

    def is_expired(self, created_at: datetime, now: datetime) -> bool:
        """True si created_at est strictement anterieur a la date limite."""
        return created_at < self.cutoff(now)

"""
Politiques d'attente entre deux tentatives de backup.

Une politique est une simple fonction: numero de la tentative
echouee (1, 2, ...) -> delai en secondes.

Usage:
------
    policy = linear_backoff(2.0)
    policy(1)  # 2.0
    policy(2)  # 4.0
"""

from collections.abc import Callable

BackoffPolicy = Callable[[int], float]

DEFAULT_BACKOFF_STEP_SECONDS = 2.0


def linear_backoff(step_seconds: float = DEFAULT_BACKOFF_STEP_SECONDS) -> BackoffPolicy:
    """
    Attente lineaire: k * step_seconds apres la tentative k.

    Args:
        step_seconds: Increment par tentative (defaut 2s -> 2s, 4s, 6s).
    """

    def policy(attempt: int) -> float:
        return attempt * step_seconds

    return policy


def exponential_backoff(
    base_seconds: float = DEFAULT_BACKOFF_STEP_SECONDS,
    factor: float = 2.0,
    max_seconds: float = 300.0,
) -> BackoffPolicy:
    """
    Attente exponentielle plafonnee: base * factor^(k-1).

    Args:
        base_seconds: Delai apres la premiere tentative.
        factor: Multiplicateur entre deux tentatives.
        max_seconds: Plafond du delai.
    """

    def policy(attempt: int) -> float:
        return min(base_seconds * factor ** (attempt - 1), max_seconds)

    return policy

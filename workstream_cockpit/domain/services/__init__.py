"""
Services du domaine.
"""

from workstream_cockpit.domain.services.backoff import (
    BackoffPolicy,
    exponential_backoff,
    linear_backoff,
)

__all__ = ["BackoffPolicy", "exponential_backoff", "linear_backoff"]

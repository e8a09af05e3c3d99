"""
Adapters d'infrastructure.

Implementations des ports pour dev/tests.

Adapters disponibles:
---------------------
- MemoryObjectStorage: Bucket en memoire
"""

from workstream_cockpit.infrastructure.adapters.memory_object_storage import (
    MemoryObjectStorage,
)

__all__ = ["MemoryObjectStorage"]

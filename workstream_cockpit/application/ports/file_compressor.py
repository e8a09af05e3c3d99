"""
FileCompressor Port - Interface de compression.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FileCompressor(ABC):
    """Interface pour la compression d'un fichier vers un autre."""

    @abstractmethod
    def compress(self, source: Path, destination: Path) -> None:
        """
        Compresse source dans destination.

        Raises:
            CompressionError: Si la compression echoue.
        """
        pass

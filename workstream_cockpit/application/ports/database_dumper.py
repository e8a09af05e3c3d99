"""
DatabaseDumper Port - Interface de l'outil de dump.

Responsabilite unique:
----------------------
Produire un fichier SQL a partir des parametres de connexion.

Implementations:
----------------
- PgDumpDumper: Execute le binaire pg_dump
"""

from abc import ABC, abstractmethod
from pathlib import Path

from workstream_cockpit.domain.value_objects.backup_config import DatabaseConnection


class DatabaseDumper(ABC):
    """Interface pour l'export de la base de donnees."""

    @abstractmethod
    def dump(self, connection: DatabaseConnection, output_path: Path) -> None:
        """
        Exporte la base dans output_path.

        Args:
            connection: Parametres de connexion.
            output_path: Fichier SQL a produire.

        Raises:
            DumpError: Si l'export echoue.
        """
        pass

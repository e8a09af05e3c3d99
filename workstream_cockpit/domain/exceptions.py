"""
Exceptions metier du domaine de sauvegarde.

Chaque etape d'un cycle de backup leve sa propre exception afin que
l'orchestrateur puisse journaliser l'etape en echec. L'absence de
configuration n'est PAS une erreur: c'est l'etat "desactive".
"""

from typing import Any


class BackupError(Exception):
    """Exception de base pour toutes les erreurs de sauvegarde."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class DumpError(BackupError):
    """Leve quand l'outil de dump de la base echoue."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(f"pg_dump failed: {message}", code="DUMP_FAILED")
        self.returncode = returncode


class CompressionError(BackupError):
    """Leve quand la compression du dump echoue."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Compression failed: {message}", code="COMPRESSION_FAILED")


class UploadError(BackupError):
    """Leve quand l'upload vers le stockage objet echoue."""

    def __init__(self, message: str, destination: str | None = None) -> None:
        full_message = f"Upload failed: {message}"
        if destination:
            full_message = f"Upload failed ({destination}): {message}"
        super().__init__(full_message, code="UPLOAD_FAILED")
        self.destination = destination


class RetentionError(BackupError):
    """Leve quand le nettoyage des anciens backups echoue."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Cleanup failed: {message}", code="RETENTION_FAILED")


class BackupExhaustedError(BackupError):
    """Leve quand toutes les tentatives de backup ont echoue."""

    def __init__(self, attempts: int, last_error: Exception) -> None:
        super().__init__(
            f"All {attempts} backup attempt(s) failed. Last error: {last_error}",
            code="BACKUP_EXHAUSTED"
        )
        self.attempts = attempts
        self.last_error = last_error


class InvalidRetentionError(BackupError):
    """Leve quand la fenetre de retention est invalide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Retention invalide: '{value}'. "
            "La retention doit etre un nombre de jours >= 1.",
            code="INVALID_RETENTION"
        )
        self.invalid_value = value


class InvalidAttemptsError(BackupError):
    """Leve quand le nombre de tentatives est invalide."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Nombre de tentatives invalide: '{value}'. "
            "Au moins une tentative est requise.",
            code="INVALID_ATTEMPTS"
        )
        self.invalid_value = value

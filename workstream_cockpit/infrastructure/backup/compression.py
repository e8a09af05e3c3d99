"""
GzipCompressor - Compression gzip en streaming.
"""

import gzip
import shutil
from pathlib import Path

from workstream_cockpit.application.ports.file_compressor import FileCompressor
from workstream_cockpit.domain.exceptions import CompressionError
from workstream_cockpit.infrastructure.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 8192


class GzipCompressor(FileCompressor):
    """Compresse un fichier par blocs, sans le charger en memoire."""

    def __init__(self, compresslevel: int = 9):
        self._compresslevel = compresslevel

    def compress(self, source: Path, destination: Path) -> None:
        logger.info("compress_started", source=str(source), destination=str(destination))

        try:
            with open(source, "rb") as src, gzip.open(
                destination, "wb", compresslevel=self._compresslevel
            ) as dst:
                shutil.copyfileobj(src, dst, CHUNK_SIZE)
        except OSError as e:
            raise CompressionError(str(e)) from e

        logger.info("compress_completed", size_bytes=Path(destination).stat().st_size)

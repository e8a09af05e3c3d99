"""
Ports (interfaces) de la couche application.

Les adapters concrets vivent dans workstream_cockpit.infrastructure.
"""

from workstream_cockpit.application.ports.database_dumper import DatabaseDumper
from workstream_cockpit.application.ports.file_compressor import FileCompressor
from workstream_cockpit.application.ports.object_storage import ObjectStorage

__all__ = ["DatabaseDumper", "FileCompressor", "ObjectStorage"]

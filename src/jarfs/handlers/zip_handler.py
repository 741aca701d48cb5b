"""
ZIP archive handler for the JAR File System.
Provides read-only access to ZIP format archives (.jar, .zip, .war, ...).

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import os
import time
import zipfile
import zlib
from datetime import datetime
from typing import List, Optional

from jarfs.core.base_handler import ArchiveHandler, ArchiveEntry
from jarfs.core.errors import ArchiveNotFoundError, CorruptArchiveError, EntryNotFoundError
from jarfs.core.global_config import GlobalConfig
from jarfs.core.manifest import Manifest, parse_manifest

# What zipfile raises for unreadable entry data: bad CRC or headers, broken
# deflate stream, encrypted entry, unsupported compression, truncated data
_ENTRY_READ_ERRORS = (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, EOFError)


def _dos_timestamp(date_time) -> float:
    """Convert a ZIP DOS date/time tuple to a Unix timestamp."""
    try:
        return time.mktime(datetime(*date_time).timetuple())
    except (ValueError, OverflowError):
        # Out-of-range fields written by some tools
        return 0.0


class ZipHandler(ArchiveHandler):
    """
    Handler for ZIP format archives.
    """

    def __init__(self, path: str):
        """
        Open a ZIP archive for reading.

        Args:
            path: Path to the ZIP file

        Raises:
            ArchiveNotFoundError: If the path does not name an existing file
            CorruptArchiveError: If the file is not a readable ZIP archive
        """
        self.zip_file = None
        super().__init__(os.fspath(path))

    def _open(self) -> None:
        if not os.path.exists(self.path):
            raise ArchiveNotFoundError(f"Archive not found: {self.path}", archive_path=self.path)
        if not os.path.isfile(self.path):
            raise ArchiveNotFoundError(f"Archive is not a regular file: {self.path}", archive_path=self.path)
        try:
            self.zip_file = zipfile.ZipFile(self.path, 'r')
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            self._log(f"cannot read {self.path}: {e}", level=1, exc=e)
            raise CorruptArchiveError(f"Not a readable ZIP archive: {self.path}: {e}",
                                      archive_path=self.path) from e

    def _close(self) -> None:
        zip_file, self.zip_file = self.zip_file, None
        if zip_file is not None:
            zip_file.close()

    @staticmethod
    def _to_entry(info: zipfile.ZipInfo) -> ArchiveEntry:
        return ArchiveEntry(
            path=info.filename,
            size=info.file_size,
            modified=_dos_timestamp(info.date_time),
            is_dir=info.is_dir(),
        )

    def _list_entries(self) -> List[ArchiveEntry]:
        return [self._to_entry(info) for info in self.zip_file.infolist()]

    def _get_entry_info(self, path: str) -> Optional[ArchiveEntry]:
        try:
            return self._to_entry(self.zip_file.getinfo(path))
        except KeyError:
            return None

    def _read_entry(self, path: str) -> bytes:
        try:
            return self.zip_file.read(path)
        except KeyError as e:
            raise EntryNotFoundError(f"No entry '{path}' in {self.path}",
                                     archive_path=self.path, entry_path=path) from e
        except _ENTRY_READ_ERRORS as e:
            self._log(f"corrupt entry {path}: {e}", level=1, exc=e)
            raise CorruptArchiveError(f"Cannot read entry '{path}' in {self.path}: {e}",
                                      archive_path=self.path, entry_path=path) from e

    def _read_manifest(self) -> Manifest:
        manifest_path = GlobalConfig.get_manifest_path()
        try:
            data = self.zip_file.read(manifest_path)
        except KeyError:
            return Manifest(main={}, sections={})
        except _ENTRY_READ_ERRORS as e:
            raise CorruptArchiveError(f"Cannot read {manifest_path} in {self.path}: {e}",
                                      archive_path=self.path, entry_path=manifest_path) from e
        return parse_manifest(data, archive_path=self.path)

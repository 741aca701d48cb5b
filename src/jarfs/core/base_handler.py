"""
Base handler for archive types.
Defines the read-only interface that all archive handlers implement and the
open/closed lifecycle they share.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from typing import Dict, Optional, List, NamedTuple
from abc import ABC, abstractmethod

from .errors import ClosedResourceError
from .global_config import GlobalConfig
from .manifest import Manifest


class ArchiveEntry(NamedTuple):
    """Information about an entry in an archive."""
    path: str
    size: int
    modified: float
    is_dir: bool


class ArchiveHandler(ABC):
    """
    Base class for archive format handlers.
    Provides the closed-state guard, context management and logging.
    Concrete handlers implement the low-level listing and reading only.

    A handler owns its open archive. Once closed, every operation raises
    ClosedResourceError; a closed handler is never reopened. Closing twice
    is a no-op.
    """

    def __init__(self, path: str):
        """
        Initialize the archive handler.

        Args:
            path: Path to the archive
        """
        self.path = path
        self._closed = True
        self._open()
        self._closed = False
        self._log(f"opened {path}", level=2)

    # --- Context management ---
    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, closing the archive."""
        self.close()

    def __repr__(self):
        state = 'closed' if self._closed else 'open'
        return f"<{type(self).__name__} {self.path!r} ({state})>"

    # --- Logging ---
    def _log(self, msg, level=1, exc=None):
        from jarfs.core.logging import debug_print
        debug_print(f"{type(self).__name__}: {msg}", level=level, exc=exc)

    # --- Lifecycle ---
    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ClosedResourceError(
                f"Archive handle is closed: {self.path}", archive_path=self.path)

    def close(self) -> None:
        """Close the archive, releasing any resources."""
        if self._closed:
            return
        self._closed = True
        self._close()
        self._log(f"closed {self.path}", level=2)

    # --- Public read operations ---
    def list_entries(self) -> List[ArchiveEntry]:
        """
        List all entries in the archive, in the archive's native order.
        The manifest entry is metadata and is left out unless the
        'include_manifest_entry' option is set; read it with manifest().

        Returns:
            List of ArchiveEntry objects
        """
        self._check_open()
        entries = self._list_entries()
        if GlobalConfig.get("include_manifest_entry"):
            return entries
        manifest_path = GlobalConfig.get_manifest_path()
        return [entry for entry in entries if entry.path != manifest_path]

    def read_entry(self, path: str) -> bytes:
        """
        Read the full content of an entry.

        Args:
            path: Entry path within the archive

        Returns:
            Raw entry bytes

        Raises:
            EntryNotFoundError: If no entry has this path
        """
        self._check_open()
        self._log(f"reading {path}", level=3)
        return self._read_entry(path)

    def get_entry_info(self, path: str) -> Optional[ArchiveEntry]:
        """
        Get information about an entry.

        Args:
            path: Entry path within the archive

        Returns:
            ArchiveEntry, or None if entry doesn't exist
        """
        self._check_open()
        return self._get_entry_info(path)

    def entry_exists(self, path: str) -> bool:
        """Check if an entry exists in the archive."""
        return self.get_entry_info(path) is not None

    def manifest(self) -> Dict[str, str]:
        """
        Main attributes of the archive manifest.
        An archive without a manifest yields an empty dictionary.
        """
        self._check_open()
        return self._read_manifest().main

    def manifest_sections(self) -> Dict[str, Dict[str, str]]:
        """Per-entry manifest sections, keyed by their 'Name' attribute."""
        self._check_open()
        return self._read_manifest().sections

    # --- Abstract methods ---
    @abstractmethod
    def _open(self) -> None:
        """Open the archive for access."""
        pass

    @abstractmethod
    def _close(self) -> None:
        """Release the underlying archive resource."""
        pass

    @abstractmethod
    def _list_entries(self) -> List[ArchiveEntry]:
        pass

    @abstractmethod
    def _read_entry(self, path: str) -> bytes:
        pass

    @abstractmethod
    def _get_entry_info(self, path: str) -> Optional[ArchiveEntry]:
        pass

    @abstractmethod
    def _read_manifest(self) -> Manifest:
        pass

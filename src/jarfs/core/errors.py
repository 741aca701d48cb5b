"""
Exceptions raised by the JAR File System.
Every error derives from JarFSError and from the closest builtin exception,
so callers can branch on the failure kind or catch it generically.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from typing import Optional


class JarFSError(Exception):
    """Base class for jarfs errors."""

    def __init__(self, message: str, archive_path: Optional[str] = None, entry_path: Optional[str] = None):
        super().__init__(message)
        self.archive_path = archive_path
        self.entry_path = entry_path


class ArchiveNotFoundError(JarFSError, FileNotFoundError):
    """The archive does not exist at open time."""


class CorruptArchiveError(JarFSError, IOError):
    """The archive, or its manifest, cannot be parsed."""


class ClosedResourceError(JarFSError, ValueError):
    """An operation was attempted on a closed archive handle."""


class EntryNotFoundError(JarFSError, LookupError):
    """The requested entry is not present in the archive."""


class DecodeError(JarFSError, ValueError):
    """An entry could not be decoded as text."""

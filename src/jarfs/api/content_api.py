"""
Content reading operations for the JAR File System.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from typing import Union

from jarfs.core.base_handler import ArchiveHandler
from jarfs.core.errors import DecodeError
from jarfs.core.global_config import GlobalConfig


def read_file(handle: ArchiveHandler, path: str, binary: bool = False) -> Union[str, bytes]:
    """
    Read an entry's full content in one call.

    Args:
        handle: Open archive handle
        path: Entry path within the archive
        binary: If True, return the raw bytes instead of decoded text

    Returns:
        Entry contents as string or bytes

    Raises:
        EntryNotFoundError: If no entry has this path
        DecodeError: If text was requested and the entry is not valid in the
            configured encoding (UTF-8 by default)
    """
    data = handle.read_entry(path)
    if binary:
        return data

    encoding = GlobalConfig.get_encoding()
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(f"Entry '{path}' in {handle.path} is not valid {encoding}: {e}",
                          archive_path=handle.path, entry_path=path) from e

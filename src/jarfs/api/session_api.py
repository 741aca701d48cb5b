"""
Scoped archive sessions for the JAR File System.
Opening, scoped use and bulk reading of archives with guaranteed release.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import contextlib
from typing import Callable, Dict, Iterator, TypeVar, Union

from jarfs.core.base_handler import ArchiveHandler
from jarfs.core.logging import debug_print
from jarfs.core.utils import PathPredicate
from jarfs.handlers.zip_handler import ZipHandler
from .content_api import read_file
from .entries_api import paths_matching

R = TypeVar('R')


def open_archive(path: str) -> ArchiveHandler:
    """
    Open an archive for reading.
    The caller owns the handle and must close it; prefer open_jar().

    Raises:
        ArchiveNotFoundError: If the archive does not exist
        CorruptArchiveError: If the archive cannot be read
    """
    return ZipHandler(path)


@contextlib.contextmanager
def open_jar(path: str) -> Iterator[ArchiveHandler]:
    """
    Open an archive for the duration of a 'with' block.

    The handle is closed exactly once on every exit path. An error raised
    inside the block propagates unchanged; if closing then fails as well,
    that failure is logged and attached to the original error as a note.

    Example:
        with open_jar('lib.jar') as jar:
            print(classes_in_jar(jar))
    """
    handle = open_archive(path)
    try:
        yield handle
    except BaseException as e:
        try:
            handle.close()
        except Exception as close_exc:
            debug_print(f"Error closing {path} after failure: {close_exc}", level=1, exc=close_exc)
            if hasattr(e, 'add_note'):
                e.add_note(f"while handling this error, closing {path} failed: {close_exc!r}")
        raise
    else:
        handle.close()


def with_archive(path: str, body: Callable[[ArchiveHandler], R]) -> R:
    """
    Call 'body' with an open handle on the archive at 'path' and return its
    result. The handle is closed before this function returns or raises.
    """
    with open_jar(path) as handle:
        return body(handle)


def slurp_matching(path: str, predicate: PathPredicate,
                   binary: bool = False) -> Dict[str, Union[str, bytes]]:
    """
    Read every entry whose path satisfies 'predicate'.

    Entries are read in sorted path order. The first failing read aborts the
    whole operation; no partial result is returned.

    Args:
        path: Archive path
        predicate: Called with each raw entry path
        binary: If True, values are raw bytes instead of decoded text

    Returns:
        Mapping of entry path to content
    """
    def slurp(handle: ArchiveHandler) -> Dict[str, Union[str, bytes]]:
        return {name: read_file(handle, name, binary=binary)
                for name in paths_matching(handle, predicate)}

    return with_archive(path, slurp)

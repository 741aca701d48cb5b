"""
Utility functions for the JAR File System.
Extension matching and path predicates shared by the entry pipeline and the
path normalizer.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from typing import Iterable

try:
    from typing import Protocol
except ImportError:  # Python 3.7
    from typing_extensions import Protocol


class PathPredicate(Protocol):
    """Any callable taking a raw entry path and returning a truth value."""

    def __call__(self, path: str) -> bool:
        ...


def match_extension(path: str, extensions: Iterable[str]) -> str:
    """
    Get the longest extension from 'extensions' that 'path' ends with.

    Args:
        path: Entry path to check
        extensions: Candidate extensions (including leading dot)

    Returns:
        The matching extension, or empty string if none matches
    """
    if not path:
        return ""

    # Check longer extensions first so '.cljs' wins over a hypothetical '.js'
    for ext in sorted(extensions, key=len, reverse=True):
        if ext and path.endswith(ext):
            return ext

    return ""


def has_extension(*extensions: str) -> PathPredicate:
    """
    Build a path predicate matching entries ending in any of 'extensions'.
    Matching is case-sensitive, as entry paths are.

    Example:
        paths_matching(handle, has_extension('.clj', '.cljc'))
    """
    if not extensions:
        raise ValueError("At least one extension is required")
    exts = tuple(extensions)

    def predicate(path: str) -> bool:
        return bool(match_extension(path, exts))

    predicate.__name__ = f"has_extension{exts!r}"
    return predicate


def strip_extension(path: str, extensions: Iterable[str]) -> str:
    """Remove the longest matching extension from 'path', if any."""
    ext = match_extension(path, extensions)
    if ext:
        return path[:-len(ext)]
    return path

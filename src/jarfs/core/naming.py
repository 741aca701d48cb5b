"""
Name normalization for the JAR File System.
Turns slash-delimited archive paths into dotted class and namespace names.

Both transforms strip their suffix only when present: a path without the
expected extension is normalized as given, with separators replaced.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from .global_config import GlobalConfig
from .utils import strip_extension


def _dotted(path: str) -> str:
    return path.replace('/', '.')


def class_name(path: str) -> str:
    """
    Convert a class entry path to a dotted class name.

    Args:
        path: Entry path such as 'a/b/C.class'

    Returns:
        Dotted name such as 'a.b.C'
    """
    return _dotted(strip_extension(path, (GlobalConfig.get_class_extension(),)))


def namespace_name(path: str) -> str:
    """
    Convert a source entry path to a dotted namespace name.

    Args:
        path: Entry path such as 'a/b/c.clj'

    Returns:
        Dotted name such as 'a.b.c'
    """
    return _dotted(strip_extension(path, GlobalConfig.get_source_extensions()))


def entry_path_for_class(name: str) -> str:
    """Inverse of class_name: 'a.b.C' -> 'a/b/C.class'."""
    return name.replace('.', '/') + GlobalConfig.get_class_extension()

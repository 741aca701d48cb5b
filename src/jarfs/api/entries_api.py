"""
Entry listing and filtering operations for the JAR File System.

Every collection of paths returned here is sorted lexicographically and free
of duplicates, independent of the physical entry order in the archive, so
results are reproducible for identical archive content.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

from typing import Callable, Iterable, List, TypeVar

from jarfs.core.base_handler import ArchiveEntry, ArchiveHandler
from jarfs.core.global_config import GlobalConfig
from jarfs.core.naming import class_name, namespace_name
from jarfs.core.utils import PathPredicate, has_extension

T = TypeVar('T')


def _sorted_set(items: Iterable[T]) -> List[T]:
    unique = set(items)
    try:
        return sorted(unique)
    except TypeError:
        # Mixed types (e.g. None alongside str) have no natural ordering
        return sorted(unique, key=lambda value: (type(value).__name__, str(value)))


def list_entries(handle: ArchiveHandler) -> List[ArchiveEntry]:
    """
    List all entries of an open archive in the archive's native order.

    Args:
        handle: Open archive handle

    Returns:
        List of ArchiveEntry snapshots
    """
    return handle.list_entries()


def transform_entries(handle: ArchiveHandler, transform: Callable[[ArchiveEntry], T]) -> List[T]:
    """
    Apply 'transform' to every entry and collect the distinct results.

    Args:
        handle: Open archive handle
        transform: Function applied to each ArchiveEntry

    Returns:
        Distinct results, sorted by their natural ordering, or by type name
        and string form when the results are not mutually comparable
    """
    return _sorted_set(transform(entry) for entry in handle.list_entries())


def paths(handle: ArchiveHandler) -> List[str]:
    """All entry paths, files and directories, sorted."""
    return transform_entries(handle, lambda entry: entry.path)


def files(handle: ArchiveHandler) -> List[str]:
    """Paths of the non-directory entries, sorted."""
    return _sorted_set(entry.path for entry in handle.list_entries() if not entry.is_dir)


def paths_matching(handle: ArchiveHandler, predicate: PathPredicate) -> List[str]:
    """
    Paths satisfying 'predicate', sorted.

    Args:
        handle: Open archive handle
        predicate: Called with each raw entry path, including the trailing
            slash of directory entries

    Returns:
        Sorted subset of paths(handle)
    """
    return [path for path in paths(handle) if predicate(path)]


def classes_in_jar(handle: ArchiveHandler) -> List[str]:
    """Paths of compiled class entries, sorted."""
    return paths_matching(handle, has_extension(GlobalConfig.get_class_extension()))


def clojure_in_jar(handle: ArchiveHandler) -> List[str]:
    """Paths of Clojure source entries (.clj, .cljs, .cljc), sorted."""
    return paths_matching(handle, has_extension(*GlobalConfig.get_source_extensions()))


def class_names(handle: ArchiveHandler) -> List[str]:
    """Dotted names of the classes in the archive, sorted."""
    return _sorted_set(class_name(path) for path in classes_in_jar(handle))


def namespaces(handle: ArchiveHandler) -> List[str]:
    """Dotted names of the Clojure namespaces in the archive, sorted."""
    return _sorted_set(namespace_name(path) for path in clojure_in_jar(handle))

"""
JarFS: Read-only JAR archive inspection

A Python library for listing, filtering and reading the entries of JAR (ZIP)
archives, reading their manifests, and turning entry paths into dotted
class and namespace names.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT

Public API:
    - open_jar / with_archive / open_archive: archive handles and scoped sessions
    - paths, files, paths_matching, classes_in_jar, clojure_in_jar, transform_entries
    - read_file, slurp_matching
    - class_name, namespace_name
    - ConfigAPI: global configuration

Example usage:
    from jarfs import open_jar, classes_in_jar, read_file
    with open_jar('lib.jar') as jar:
        print(jar.manifest().get('Main-Class'))
        for path in classes_in_jar(jar):
            print(path)
        readme = read_file(jar, 'README.md')
"""

from .core.base_handler import ArchiveEntry, ArchiveHandler
from .core.errors import (
    JarFSError,
    ArchiveNotFoundError,
    CorruptArchiveError,
    ClosedResourceError,
    EntryNotFoundError,
    DecodeError,
)
from .core.naming import class_name, namespace_name, entry_path_for_class
from .core.utils import has_extension
from .api.entries_api import (
    list_entries,
    paths,
    files,
    paths_matching,
    classes_in_jar,
    clojure_in_jar,
    transform_entries,
    class_names,
    namespaces,
)
from .api.content_api import read_file
from .api.session_api import open_archive, open_jar, with_archive, slurp_matching
from .api.config_api import ConfigAPI

__version__ = '0.1.0'
__all__ = [
    "ArchiveEntry", "ArchiveHandler",
    "JarFSError", "ArchiveNotFoundError", "CorruptArchiveError",
    "ClosedResourceError", "EntryNotFoundError", "DecodeError",
    "class_name", "namespace_name", "entry_path_for_class", "has_extension",
    "list_entries", "paths", "files", "paths_matching", "classes_in_jar",
    "clojure_in_jar", "transform_entries", "class_names", "namespaces",
    "read_file", "open_archive", "open_jar", "with_archive", "slurp_matching",
    "ConfigAPI",
]

#!/usr/bin/env python3
"""
JarFS Example Script

This script demonstrates the basic usage of the JarFS library.

Author: Tim Hosking
GitHub: https://github.com/Munger
"""

import sys
import argparse

from jarfs import (
    JarFSError,
    ConfigAPI,
    open_jar,
    paths,
    files,
    classes_in_jar,
    class_names,
    namespaces,
    read_file,
)


def list_paths(jar, args):
    """List every entry path, or only files with --files-only."""
    listing = files(jar) if args.files_only else paths(jar)
    for path in listing:
        print(path)


def list_files(jar, args):
    """List the non-directory entries."""
    for path in files(jar):
        print(path)


def list_classes(jar, args):
    """List class entries, as dotted names with --names."""
    listing = class_names(jar) if args.names else classes_in_jar(jar)
    for item in listing:
        print(item)


def list_namespaces(jar, args):
    """List the Clojure namespaces found in the archive."""
    for ns in namespaces(jar):
        print(ns)


def show_manifest(jar, args):
    """Print the main manifest attributes."""
    for key, value in jar.manifest().items():
        print(f"{key}: {value}")


def cat_entry(jar, args):
    """Write an entry's content to stdout."""
    if args.binary:
        sys.stdout.buffer.write(read_file(jar, args.entry, binary=True))
        sys.stdout.flush()
    else:
        print(read_file(jar, args.entry), end='')


def build_parser():
    parser = argparse.ArgumentParser(description="JarFS Example Script")
    parser.add_argument("--debug", type=int, default=0, metavar="LEVEL", help="Debug output level")
    sub = parser.add_subparsers(dest="command")
    sub.required = True

    p = sub.add_parser("paths", help="List entry paths")
    p.add_argument("jar")
    p.add_argument("--files-only", action="store_true", help="Skip directory entries")
    p.set_defaults(func=list_paths)

    p = sub.add_parser("files", help="List file entries")
    p.add_argument("jar")
    p.set_defaults(func=list_files)

    p = sub.add_parser("classes", help="List class entries")
    p.add_argument("jar")
    p.add_argument("--names", action="store_true", help="Print dotted class names")
    p.set_defaults(func=list_classes)

    p = sub.add_parser("namespaces", help="List Clojure namespaces")
    p.add_argument("jar")
    p.set_defaults(func=list_namespaces)

    p = sub.add_parser("manifest", help="Show manifest attributes")
    p.add_argument("jar")
    p.set_defaults(func=show_manifest)

    p = sub.add_parser("cat", help="Print an entry")
    p.add_argument("jar")
    p.add_argument("entry")
    p.add_argument("--binary", action="store_true", help="Write raw bytes")
    p.set_defaults(func=cat_entry)
    return parser


def main(argv=None):
    """Main function demonstrating JarFS features."""
    args = build_parser().parse_args(argv)
    if args.debug:
        ConfigAPI().debug_level = args.debug

    try:
        with open_jar(args.jar) as jar:
            args.func(jar, args)
    except JarFSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

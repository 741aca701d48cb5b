"""
Manifest parsing for the JAR File System.
Reads the line-oriented 'Key: Value' format of META-INF/MANIFEST.MF into
ordered dictionaries: the main section, plus one dictionary per named
entry section.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import re
from typing import Dict, List, NamedTuple, Optional

from .errors import CorruptArchiveError

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


class Manifest(NamedTuple):
    """Parsed manifest: main attributes and per-entry sections."""
    main: Dict[str, str]
    sections: Dict[str, Dict[str, str]]


def _split_sections(text: str) -> List[List[str]]:
    # Blank lines separate sections; continuation lines stay attached
    sections = []
    current = []
    for line in _LINE_BREAK.split(text):
        if line == '':
            if current:
                sections.append(current)
                current = []
            continue
        current.append(line)
    if current:
        sections.append(current)
    return sections


def _parse_section(lines: List[str], archive_path: Optional[str]) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    key = None
    for line in lines:
        if line.startswith(' '):
            if key is None:
                raise CorruptArchiveError(
                    f"Manifest continuation line without a header: {line!r}",
                    archive_path=archive_path)
            attrs[key] += line[1:]
            continue

        name, sep, value = line.partition(':')
        if not sep or not name.strip():
            raise CorruptArchiveError(
                f"Malformed manifest line: {line!r}",
                archive_path=archive_path)
        key = name
        attrs[key] = value[1:] if value.startswith(' ') else value
    return attrs


def parse_manifest(data: bytes, archive_path: Optional[str] = None) -> Manifest:
    """
    Parse raw manifest bytes.

    Args:
        data: Content of META-INF/MANIFEST.MF
        archive_path: Archive the manifest came from, for error reporting

    Returns:
        Manifest with the main attributes and the named entry sections

    Raises:
        CorruptArchiveError: If the data is not UTF-8 or a line is malformed
    """
    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CorruptArchiveError(
            f"Manifest is not valid UTF-8: {e}", archive_path=archive_path) from e

    # A UTF-8 BOM is tolerated by the JDK reader
    if text.startswith('\ufeff'):
        text = text[1:]

    sections = _split_sections(text)
    if not sections:
        return Manifest(main={}, sections={})

    main = _parse_section(sections[0], archive_path)
    named: Dict[str, Dict[str, str]] = {}
    for lines in sections[1:]:
        attrs = _parse_section(lines, archive_path)
        name = attrs.pop('Name', None)
        if name is None:
            raise CorruptArchiveError(
                "Manifest entry section is missing its 'Name' attribute",
                archive_path=archive_path)
        named[name] = attrs
    return Manifest(main=main, sections=named)

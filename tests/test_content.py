"""
Unit tests for JARFS content reading.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import os

import pytest

from conftest import make_jar
from jarfs import (
    ClosedResourceError,
    DecodeError,
    EntryNotFoundError,
    JarFSError,
    open_archive,
    open_jar,
    read_file,
)
from jarfs.core.global_config import GlobalConfig


@pytest.mark.parametrize("content", [
    b"",
    b"x",
    b"A" * 4096,
    bytes(range(256)),
    os.urandom(1024 * 1024),
])
def test_binary_read_returns_exact_bytes(temp_dir, content):
    path = make_jar(os.path.join(temp_dir, "bin.jar"), {"data.bin": content})
    with open_jar(path) as h:
        assert read_file(h, "data.bin", binary=True) == content


def test_text_read_returns_exact_string(sample_jar):
    with open_jar(sample_jar) as h:
        assert read_file(h, "x/y.clj") == "(ns x.y)\n(defn hello [] \"héllo\")\n"
        assert read_file(h, "x/y.clj", binary=True) == "(ns x.y)\n(defn hello [] \"héllo\")\n".encode('utf-8')


def test_unicode_entry_name(temp_dir):
    filename = "ùÑû_music.clj"
    path = make_jar(os.path.join(temp_dir, "unicode.jar"), {filename: "music"})
    with open_jar(path) as h:
        assert read_file(h, filename) == "music"


def test_missing_entry(sample_jar):
    with open_jar(sample_jar) as h:
        with pytest.raises(EntryNotFoundError) as info:
            read_file(h, "missing/path", False)
    assert isinstance(info.value, LookupError)
    assert info.value.entry_path == "missing/path"


def test_invalid_utf8_text_read(sample_jar):
    with open_jar(sample_jar) as h:
        with pytest.raises(DecodeError) as info:
            read_file(h, "x/Foo.class")
        # Binary reads never decode
        assert read_file(h, "x/Foo.class", binary=True).startswith(b"\xca\xfe")
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
    assert isinstance(info.value, JarFSError)


def test_manifest_entry_readable_by_path(sample_jar):
    with open_jar(sample_jar) as h:
        assert read_file(h, "META-INF/MANIFEST.MF").startswith("Manifest-Version: 1.0")


def test_configured_encoding(temp_dir):
    path = make_jar(os.path.join(temp_dir, "latin.jar"), {"l.txt": "café".encode('latin-1')})
    with open_jar(path) as h:
        with pytest.raises(DecodeError):
            read_file(h, "l.txt")
        GlobalConfig.set("encoding", "latin-1")
        assert read_file(h, "l.txt") == "café"


def test_read_after_close(sample_jar):
    handle = open_archive(sample_jar)
    handle.close()
    with pytest.raises(ClosedResourceError):
        read_file(handle, "x/y.clj")

"""
Shared fixtures for the JARFS tests.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import os
import sys
import shutil
import tempfile
import zipfile

# Add the src directory to the path if needed
src_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../src"))
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

import pytest

from jarfs.core.global_config import GlobalConfig

MANIFEST = "Manifest-Version: 1.0\r\nCreated-By: jarfs tests\r\n\r\n"


def make_jar(path, entries):
    """
    Create a JAR archive at 'path'.
    'entries' maps entry names to str/bytes content; names ending in '/'
    become directory entries.
    """
    with zipfile.ZipFile(path, 'w') as zip_file:
        for name, content in entries.items():
            if name.endswith('/'):
                zip_file.writestr(zipfile.ZipInfo(name), b"")
            else:
                zip_file.writestr(name, content)
    return path


@pytest.fixture(autouse=True)
def reset_config():
    # Allow debug level to be set via environment variable for tests
    debug_level = os.environ.get('JARFS_DEBUG_LEVEL')
    if debug_level is not None:
        GlobalConfig.set_debug_level(int(debug_level))
    yield
    GlobalConfig.reset()


@pytest.fixture(scope="function")
def temp_dir():
    d = tempfile.mkdtemp()
    yield d
    shutil.rmtree(d)


@pytest.fixture
def sample_jar(temp_dir):
    """a.jar: a manifest, one class, one Clojure source and a directory entry."""
    return make_jar(os.path.join(temp_dir, "a.jar"), {
        "META-INF/MANIFEST.MF": MANIFEST,
        "x/": b"",
        "x/y.clj": "(ns x.y)\n(defn hello [] \"héllo\")\n",
        "x/Foo.class": b"\xca\xfe\xba\xbe\x00\x00\x00\x34",
    })

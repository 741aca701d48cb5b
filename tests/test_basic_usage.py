"""
Tests for the JarFS example script.

Author: Tim Hosking
Contact: https://github.com/Munger
License: MIT
"""

import importlib.util
import os

import pytest

from conftest import make_jar

EXAMPLE = os.path.abspath(os.path.join(os.path.dirname(__file__), "../examples/basic_usage.py"))


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("basic_usage", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_paths(cli, sample_jar, capsys):
    assert cli.main(["paths", sample_jar]) == 0
    assert capsys.readouterr().out.splitlines() == ["x/", "x/Foo.class", "x/y.clj"]
    assert cli.main(["paths", "--files-only", sample_jar]) == 0
    assert capsys.readouterr().out.splitlines() == ["x/Foo.class", "x/y.clj"]


def test_files(cli, sample_jar, capsys):
    assert cli.main(["files", sample_jar]) == 0
    assert capsys.readouterr().out.splitlines() == ["x/Foo.class", "x/y.clj"]


def test_classes_and_namespaces(cli, sample_jar, capsys):
    cli.main(["classes", sample_jar])
    assert capsys.readouterr().out.splitlines() == ["x/Foo.class"]
    cli.main(["classes", "--names", sample_jar])
    assert capsys.readouterr().out.splitlines() == ["x.Foo"]
    cli.main(["namespaces", sample_jar])
    assert capsys.readouterr().out.splitlines() == ["x.y"]


def test_manifest(cli, sample_jar, capsys):
    cli.main(["manifest", sample_jar])
    assert capsys.readouterr().out.splitlines() == [
        "Manifest-Version: 1.0",
        "Created-By: jarfs tests",
    ]


def test_cat(cli, temp_dir, capsys):
    path = make_jar(os.path.join(temp_dir, "c.jar"), {"hello.txt": "hi there\n"})
    assert cli.main(["cat", path, "hello.txt"]) == 0
    assert capsys.readouterr().out == "hi there\n"


def test_errors_exit_nonzero(cli, sample_jar, temp_dir, capsys):
    assert cli.main(["cat", sample_jar, "missing/path"]) == 1
    assert "missing/path" in capsys.readouterr().err
    assert cli.main(["paths", os.path.join(temp_dir, "nope.jar")]) == 1
    assert "Archive not found" in capsys.readouterr().err

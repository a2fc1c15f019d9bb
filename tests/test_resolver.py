import os
import stat

import pytest

from askpw.exceptions import ResolutionError
from askpw.resolver import resolve_executable


@pytest.fixture
def fake_bin(tmp_path, monkeypatch):
    program = tmp_path / "pwsafe"
    program.write_text("#!/bin/sh\nexit 0\n")
    program.chmod(program.stat().st_mode | stat.S_IXUSR)
    monkeypatch.setenv("PATH", str(tmp_path))
    return program


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_resolve_from_path(fake_bin):
    assert resolve_executable("pwsafe") == str(fake_bin)


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_resolve_absolute_path(fake_bin):
    assert resolve_executable(str(fake_bin)) == str(fake_bin)


def test_resolve_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(ResolutionError, match="Unable to resolve pwsafe"):
        resolve_executable("pwsafe")


def test_resolve_nonexistent_path():
    with pytest.raises(ResolutionError, match="Unable to resolve /nonexistent/prog"):
        resolve_executable("/nonexistent/prog")


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
def test_resolve_not_executable(tmp_path):
    program = tmp_path / "plain"
    program.write_text("data")
    program.chmod(0o644)
    with pytest.raises(ResolutionError):
        resolve_executable(str(program))


def test_resolve_returns_absolute_path(monkeypatch):
    monkeypatch.setattr("askpw.resolver.shutil.which", lambda name: "bin/pwsafe")
    assert resolve_executable("pwsafe") == os.path.abspath("bin/pwsafe")

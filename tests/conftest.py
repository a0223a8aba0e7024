"""Pytest configuration and shared fixtures."""

import pytest

from file_refactor.core import Session
from file_refactor.wizard import Router


@pytest.fixture
def session(tmp_path):
    """Fresh session rooted in a temporary directory."""
    return Session(root_path=tmp_path)


@pytest.fixture
def router(session):
    """Router bound to the session fixture."""
    return Router(session)


@pytest.fixture
def drive(router):
    """Dispatch several input lines in order, as the console loop would."""
    def _drive(*lines):
        for line in lines:
            router.dispatch(line)
        return router.session
    return _drive


@pytest.fixture
def make_files():
    """Create empty files in a directory and return their paths."""
    def _make_files(directory, *names):
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        for name in names:
            path = directory / name
            path.write_text("")
            paths.append(path)
        return paths
    return _make_files

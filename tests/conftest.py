"""Test configuration and fixtures for dircombine."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def proj(tmp_path, monkeypatch):
    """Create ``proj/a.txt`` and ``proj/sub/b.txt`` and return the relative root.

    The working directory is moved to ``tmp_path`` so that substring patterns are
    only matched against ``proj/...`` and never against the temporary directory name.
    """
    monkeypatch.chdir(tmp_path)
    (tmp_path / "proj" / "sub").mkdir(parents=True)
    (tmp_path / "proj" / "a.txt").write_text("hi", encoding="utf-8")
    (tmp_path / "proj" / "sub" / "b.txt").write_text("bye", encoding="utf-8")
    return Path("proj")


@pytest.fixture
def can_symlink(tmp_path):
    """Skip the test on platforms where creating symlinks is not permitted."""
    try:
        (tmp_path / ".symlink-check").symlink_to(tmp_path)
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported on this platform")
    (tmp_path / ".symlink-check").unlink()

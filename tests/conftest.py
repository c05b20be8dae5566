"""Test configuration and fixtures for dirtree."""

import os
import sys

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference layout R/{a.txt, b.txt, sub/c.txt}."""
    root = tmp_path / "R"
    root.mkdir()
    (root / "a.txt").touch()
    (root / "b.txt").touch()
    (root / "sub").mkdir()
    (root / "sub" / "c.txt").touch()
    return root


@pytest.fixture
def project_tree(tmp_path):
    """Create a small project with noise directories and files."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("def main(): pass\n")
    (root / "src" / "__pycache__").mkdir()
    (root / "src" / "__pycache__" / "main.cpython-312.pyc").touch()
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "left-pad.js").touch()
    (root / "docs").mkdir()
    (root / "docs" / "index.md").touch()
    (root / ".DS_Store").touch()
    (root / ".gitignore").write_text("*.log\n")
    (root / ".editorconfig").touch()
    (root / "README.md").touch()
    return root


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip the test when the platform refuses to create symlinks."""
    sample = tmp_path / "symlink_sample"
    try:
        os.symlink(tmp_path, sample)
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    sample.unlink()
    return True


@pytest.fixture
def undecodable_names_supported(tmp_path):
    """Skip the test unless file names may hold bytes that are not valid UTF-8."""
    if sys.platform == "win32":
        pytest.skip("Windows file names are not byte strings")
    sample = os.path.join(os.fsencode(tmp_path), b"\xff_sample")
    try:
        open(sample, "wb").close()
    except OSError:
        pytest.skip("File system rejects names that are not valid UTF-8")
    os.remove(sample)
    return True

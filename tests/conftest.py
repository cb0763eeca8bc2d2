"""Test configuration and fixtures for gtree."""

import pytest

from gtree.config import BASE_PATH_ENV_VAR


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def clear_base_path(monkeypatch):
    """Make sure a GTREE_BASE_PATH from the developer's shell never leaks into tests."""
    monkeypatch.delenv(BASE_PATH_ENV_VAR, raising=False)


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project tree.

    project/
    ├── .env
    ├── .git/config
    ├── node_modules/react/index.js
    ├── src/
    │   ├── utils/helpers.py
    │   └── main.py
    ├── docs/readme.md
    ├── README.md
    └── setup.py
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / ".env").write_text("SECRET=1\n")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]\n")
    (root / "node_modules" / "react").mkdir(parents=True)
    (root / "node_modules" / "react" / "index.js").touch()
    (root / "src" / "utils").mkdir(parents=True)
    (root / "src" / "utils" / "helpers.py").touch()
    (root / "src" / "main.py").touch()
    (root / "docs").mkdir()
    (root / "docs" / "readme.md").touch()
    (root / "README.md").touch()
    (root / "setup.py").touch()
    return root

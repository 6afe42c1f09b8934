import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'loaddir'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from loaddir.core.stdlib_logging import reset_stdlib_logging_for_tests


@pytest.fixture(autouse=True)
def _isolate_loaddir_env(monkeypatch):
    """Tests must be deterministic regardless of LOADDIR_* vars in the developer shell."""
    for key in list(os.environ):
        if key.startswith("LOADDIR_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """Isolated project root with an empty .loaddir/config directory."""
    monkeypatch.setenv("LOADDIR_PROJECT_ROOT", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".loaddir" / "config").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture
def content_root(tmp_path):
    """A listing root with a ``posts`` folder and a ``notes`` folder."""
    from helpers.content import build_content_tree

    return build_content_tree(tmp_path / "content")

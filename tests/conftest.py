import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from respondkit.config.env_loader import ENV_BREAKPOINTS_JSON, ENV_INDENT, ENV_UNIT  # noqa: E402


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no respondkit environment overrides, from an empty directory."""
    for key in (ENV_BREAKPOINTS_JSON, ENV_UNIT, ENV_INDENT):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

# Ensure project root is on sys.path so 'consolation' is importable when running
# pytest from environments that don't automatically include it.
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    """Keep log message formatting independent of the caller's DEBUG variable."""
    monkeypatch.delenv("DEBUG", raising=False)
    yield

# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import sc2pathlib`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _fresh_pathing_config():
    """Each test starts and ends without a cached PathingConfig."""
    from sc2pathlib.config import reset_pathing_config_cache

    reset_pathing_config_cache()
    yield
    reset_pathing_config_cache()

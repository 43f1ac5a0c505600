# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the top-level modules import without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from generator import make_rng  # noqa: E402
from model import create_board  # noqa: E402


@pytest.fixture
def board():
    return create_board()


@pytest.fixture
def rng():
    return make_rng(1234)

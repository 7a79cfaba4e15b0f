"""Ensure the twister package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from twister import MersenneTwister64


@pytest.fixture
def reference_rand():
    """Generator seeded with the classic 5489 default."""
    return MersenneTwister64(5489)

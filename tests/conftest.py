"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Minefield, FieldConfig


# ============================================================================
# Minefield Fixtures
# ============================================================================

@pytest.fixture
def center_field() -> Minefield:
    """3x3 field with a single mine in the middle."""
    return Minefield.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def wall_field() -> Minefield:
    """
    5x5 field with a vertical wall of mines in column 2.

    Layout:
         2X2
         3X3
         3X3
         3X3
         2X2
    """
    return Minefield.from_mines(5, 5, [(2, y) for y in range(5)])


@pytest.fixture
def strip_field() -> Minefield:
    """2x1 field: a safe square next to a mine."""
    return Minefield.from_mines(2, 1, [(1, 0)])


@pytest.fixture
def empty_field() -> Minefield:
    """Mine-free field, one reveal clears it."""
    return Minefield.create(5, 5, 0)


@pytest.fixture
def seeded_field() -> Minefield:
    """9x9 field with 10 mines from a fixed random source."""
    return Minefield.create(9, 9, 10, rng=random.Random(1234))


@pytest.fixture
def valid_config() -> FieldConfig:
    return FieldConfig(9, 9, 10)

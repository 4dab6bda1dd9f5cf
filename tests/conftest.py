"""Shared fixtures: a small six-driver / three-constructor game."""

import pytest

from f1_team_picker.domain.services.optimization_service import OptimizationService


@pytest.fixture
def drivers():
    """Six drivers keyed by code; pool order is VER, HAM, PER, SAI, LEC, NOR."""
    return {
        "VER": {"DR": "VER", "price": 30, "expectedPoints": 25, "expectedPriceChange": 0.2},
        "HAM": {"DR": "HAM", "price": 28, "expectedPoints": 20, "expectedPriceChange": 0.1},
        "PER": {"DR": "PER", "price": 25, "expectedPoints": 15, "expectedPriceChange": -0.1},
        "SAI": {"DR": "SAI", "price": 23, "expectedPoints": 18, "expectedPriceChange": 0.3},
        "LEC": {"DR": "LEC", "price": 24, "expectedPoints": 19, "expectedPriceChange": 0.1},
        "NOR": {"DR": "NOR", "price": 20, "expectedPoints": 12, "expectedPriceChange": 0},
    }


@pytest.fixture
def constructors():
    """Three constructors keyed by code; pool order is RED, MER, FER."""
    return {
        "RED": {"CN": "RED", "price": 35, "expectedPoints": 30, "expectedPriceChange": 0.5},
        "MER": {"CN": "MER", "price": 32, "expectedPoints": 25, "expectedPriceChange": 0.2},
        "FER": {"CN": "FER", "price": 30, "expectedPoints": 20, "expectedPriceChange": -0.1},
    }


@pytest.fixture
def current_team():
    """Current team as extracted: team value 197, cap 10, overall budget 207."""
    return {
        "drivers": ["VER", "HAM", "PER", "SAI", "LEC"],
        "constructors": ["RED", "MER"],
        "drsBoost": "VER",
        "freeTransfers": 2,
        "costCapRemaining": 10,
    }


@pytest.fixture
def service():
    """Create OptimizationService instance."""
    return OptimizationService()

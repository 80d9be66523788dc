"""
Pytest Configuration and Fixtures

Shared fixtures for plasma rule engine tests.
"""
import pytest
from pathlib import Path
import sys

# Add app to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.plasma import BiomarkerId, Measurement, PlasmaEngine, RangeClassification


@pytest.fixture
def engine() -> PlasmaEngine:
    """Engine over the standard 19-rule table."""
    return PlasmaEngine()


@pytest.fixture
def healthy_panel():
    """Every registered biomarker in the normal zone."""
    return [
        Measurement(biomarker_id=int(b), value=1.0, range=RangeClassification.NORMAL_ZONE)
        for b in BiomarkerId
    ]

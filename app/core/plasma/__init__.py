"""
Plasma Rule Engine

Turns classified laboratory biomarker values into advisory messages.

Usage:
    from app.core.plasma import get_engine, Measurement

    outputs = get_engine().process(measurements)   # List[Output]
"""
from .base import (
    Measurement,
    Output,
    RangeClassification,
    Rule,
    measurements_from_dicts,
    parse_range,
)
from .biomarkers import BiomarkerId, biomarker_label, is_known_biomarker, list_biomarkers
from .engine import PlasmaEngine, get_engine
from .rules import STANDARD_RULES

__all__ = [
    "Measurement",
    "Output",
    "RangeClassification",
    "Rule",
    "measurements_from_dicts",
    "parse_range",
    "BiomarkerId",
    "biomarker_label",
    "is_known_biomarker",
    "list_biomarkers",
    "PlasmaEngine",
    "get_engine",
    "STANDARD_RULES",
]

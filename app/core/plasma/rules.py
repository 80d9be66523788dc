"""
Plasma Advisory Rules — Standard Table

Each rule names the biomarkers it needs and the pattern that triggers its
advisory. Rules are evaluated in table order and that order is kept in the
engine output.

Importance:
    3: needs medical attention
    2: concerning pattern, follow up
    1: worth a further diagnostic
"""
from __future__ import annotations

from typing import Tuple

from .base import Rule
from .biomarkers import BiomarkerId as B
from .predicates import (
    all_of,
    any_critical,
    both,
    by_id,
    count_at_least,
    critical_or_flagged_count,
    either,
    is_elevated,
    is_flagged,
    is_high,
    is_low,
)


def _all_flagged(*ids: int) -> dict:
    return {"biomarker_ids": frozenset(ids), "predicate": all_of(ids, is_flagged)}


STANDARD_RULES: Tuple[Rule, ...] = (
    Rule(
        id=1,
        name="Liver Function",
        **_all_flagged(B.ALT, B.AST),
        message=(
            "Your liver enzyme levels require attention. Consider lifestyle "
            "modifications and consult your healthcare provider."
        ),
        importance=3,
    ),
    Rule(
        id=2,
        name="Diabetes",
        biomarker_ids=frozenset({B.GLUCOSE, B.HBA1C}),
        predicate=any_critical,
        message=(
            "Your glucose levels indicate possible diabetes. Please consider "
            "lifestyle modifications and consult your healthcare provider for evaluation"
        ),
        importance=3,
    ),
    Rule(
        id=3,
        name="Cardiovascular Risk",
        biomarker_ids=frozenset({B.LDL_CHOLESTEROL, B.APO_B, B.CRP}),
        # borderline pattern only; critical values do not count here
        predicate=count_at_least(is_elevated, 2),
        message=(
            "Consider coronary calcium scoring and carotid ultrasound for early "
            "atherosclerosis detection, even though values are only borderline elevated."
        ),
        importance=1,
    ),
    Rule(
        id=4,
        name="Metabolic Health",
        biomarker_ids=frozenset({B.INSULIN, B.GLUCOSE, B.HBA1C}),
        predicate=critical_or_flagged_count(2),
        message="Consider DEXA scan for detailed body composition analysis and visceral fat assessment.",
        importance=1,
    ),
    Rule(
        id=5,
        name="Bone Health",
        **_all_flagged(B.CALCIUM, B.VITAMIN_D),
        message="Consider DEXA scan for detailed body composition analysis and bone density.",
        importance=1,
    ),
    Rule(
        id=6,
        name="Hormone Panel",
        biomarker_ids=frozenset({B.CORTISOL, B.DHEAS, B.TESTOSTERONE}),
        predicate=either(
            any_critical,
            both(by_id(B.CORTISOL, is_flagged), by_id(B.DHEAS, is_flagged)),
        ),
        message="Consider 4-point salivary cortisol testing and comprehensive hormone panel.",
        importance=1,
    ),
    Rule(
        id=7,
        name="Micronutrients",
        **_all_flagged(B.VITAMIN_D, B.MAGNESIUM, B.ZINC),
        message="Consider comprehensive micronutrient testing including intracellular mineral analysis.",
        importance=1,
    ),
    Rule(
        id=8,
        name="Extended Liver Health",
        biomarker_ids=frozenset({B.ALKALINE_PHOSPHATASE, B.ALT, B.GGT, B.INSULIN}),
        predicate=critical_or_flagged_count(2),
        message="Consider liver elastography and abdominal ultrasound.",
        importance=1,
    ),
    Rule(
        id=9,
        name="Anemia",
        biomarker_ids=frozenset({B.HEMOGLOBIN, B.RBC, B.MCV}),
        predicate=critical_or_flagged_count(2),
        message=(
            "Your blood cell measurements indicate possible anemia. "
            "Please consult your healthcare provider."
        ),
        importance=3,
    ),
    Rule(
        id=10,
        name="Lipid Profile",
        biomarker_ids=frozenset({B.CHOLESTEROL, B.LDL_CHOLESTEROL, B.TRIGLYCERIDES}),
        predicate=critical_or_flagged_count(2),
        message="Multiple components of your lipid profile show concerning values.",
        importance=2,
    ),
    Rule(
        id=11,
        name="Thyroid Function",
        **_all_flagged(B.TSH, B.T4),
        message="Your thyroid hormone levels require medical attention.",
        importance=3,
    ),
    Rule(
        id=12,
        name="D-Dimer",
        **_all_flagged(B.D_DIMER),
        message=(
            "Your coagulation markers require medical attention! "
            "This may indicate a risk of thrombosis!"
        ),
        importance=3,
    ),
    Rule(
        id=13,
        name="Bilirubin",
        **_all_flagged(B.BILIRUBIN_TOTAL, B.BILIRUBIN_DIRECT, B.BILIRUBIN_INDIRECT, B.GGT),
        message="Your liver enzyme levels require attention. Consider liver elastography.",
        importance=3,
    ),
    Rule(
        id=14,
        name="Protein",
        **_all_flagged(B.ALBUMIN, B.PROTEIN),
        message="Your liver function markers require medical attention!",
        importance=3,
    ),
    Rule(
        id=15,
        name="Coagulation High",
        biomarker_ids=frozenset({B.PT, B.APTT}),
        predicate=all_of((B.PT, B.APTT), is_high),
        message=(
            "Your coagulation markers require medical attention! "
            "This may indicate a risk of bleeding!"
        ),
        importance=3,
    ),
    Rule(
        id=16,
        name="Coagulation Low",
        biomarker_ids=frozenset({B.PT, B.APTT}),
        predicate=all_of((B.PT, B.APTT), is_low),
        message=(
            "Your coagulation markers require medical attention! "
            "This may indicate a risk of thrombosis!"
        ),
        importance=3,
    ),
    Rule(
        id=17,
        name="Kidney Function",
        **_all_flagged(B.CREATININE, B.EGFR),
        message="Your kidney function markers require medical attention.",
        importance=3,
    ),
    Rule(
        id=18,
        name="Hormone Interaction",
        biomarker_ids=frozenset({B.TESTOSTERONE, B.PROLACTIN}),
        predicate=both(by_id(B.TESTOSTERONE, is_low), by_id(B.PROLACTIN, is_high)),
        message="Your hormone levels show an important interaction that requires medical evaluation.",
        importance=3,
    ),
    Rule(
        id=19,
        name="SHBG",
        biomarker_ids=frozenset({B.TESTOSTERONE, B.SHBG}),
        predicate=critical_or_flagged_count(1),
        message="Your hormone and binding protein levels require attention.",
        importance=2,
    ),
)

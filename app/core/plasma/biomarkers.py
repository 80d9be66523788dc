"""
Biomarker Registry

Closed lookup table of the laboratory biomarkers the rule table refers to.
Ids are stable and assigned upstream; they are not user-extensible.
Ids outside the registry are accepted everywhere and simply match no rule.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional


class BiomarkerId(IntEnum):
    GLUCOSE              = 1
    LDL_CHOLESTEROL      = 2
    APO_B                = 3
    CRP                  = 4
    INSULIN              = 5
    CALCIUM              = 6
    VITAMIN_D            = 7
    CORTISOL             = 8
    DHEAS                = 9
    TESTOSTERONE         = 10
    MAGNESIUM            = 11
    ZINC                 = 12
    ALKALINE_PHOSPHATASE = 13
    GGT                  = 14
    HEMOGLOBIN           = 15
    RBC                  = 16
    MCV                  = 17
    CHOLESTEROL          = 18
    TRIGLYCERIDES        = 19
    TSH                  = 20
    T4                   = 21
    D_DIMER              = 22
    BILIRUBIN_TOTAL      = 23
    BILIRUBIN_DIRECT     = 24
    BILIRUBIN_INDIRECT   = 25
    ALBUMIN              = 26
    PROTEIN              = 27
    ALT                  = 28   # alanine aminotransferase
    AST                  = 29   # aspartate aminotransferase
    PT                   = 30   # prothrombin time
    APTT                 = 31   # activated partial thromboplastin time
    CREATININE           = 32
    HBA1C                = 33   # glycated hemoglobin
    EGFR                 = 34
    PROLACTIN            = 35
    SHBG                 = 36   # sex hormone-binding globulin


_LABELS: Dict[BiomarkerId, str] = {
    BiomarkerId.GLUCOSE:              "Glucose",
    BiomarkerId.LDL_CHOLESTEROL:      "LDL Cholesterol",
    BiomarkerId.APO_B:                "Apolipoprotein B",
    BiomarkerId.CRP:                  "C-Reactive Protein",
    BiomarkerId.INSULIN:              "Insulin",
    BiomarkerId.CALCIUM:              "Calcium",
    BiomarkerId.VITAMIN_D:            "Vitamin D",
    BiomarkerId.CORTISOL:             "Cortisol",
    BiomarkerId.DHEAS:                "DHEA-S",
    BiomarkerId.TESTOSTERONE:         "Testosterone",
    BiomarkerId.MAGNESIUM:            "Magnesium",
    BiomarkerId.ZINC:                 "Zinc",
    BiomarkerId.ALKALINE_PHOSPHATASE: "Alkaline Phosphatase",
    BiomarkerId.GGT:                  "Gamma-Glutamyl Transferase",
    BiomarkerId.HEMOGLOBIN:           "Hemoglobin",
    BiomarkerId.RBC:                  "Red Blood Cells",
    BiomarkerId.MCV:                  "Mean Corpuscular Volume",
    BiomarkerId.CHOLESTEROL:          "Total Cholesterol",
    BiomarkerId.TRIGLYCERIDES:        "Triglycerides",
    BiomarkerId.TSH:                  "Thyroid-Stimulating Hormone",
    BiomarkerId.T4:                   "Thyroxine (T4)",
    BiomarkerId.D_DIMER:              "D-Dimer",
    BiomarkerId.BILIRUBIN_TOTAL:      "Bilirubin, Total",
    BiomarkerId.BILIRUBIN_DIRECT:     "Bilirubin, Direct",
    BiomarkerId.BILIRUBIN_INDIRECT:   "Bilirubin, Indirect",
    BiomarkerId.ALBUMIN:              "Albumin",
    BiomarkerId.PROTEIN:              "Total Protein",
    BiomarkerId.ALT:                  "Alanine Aminotransferase",
    BiomarkerId.AST:                  "Aspartate Aminotransferase",
    BiomarkerId.PT:                   "Prothrombin Time",
    BiomarkerId.APTT:                 "Activated Partial Thromboplastin Time",
    BiomarkerId.CREATININE:           "Creatinine",
    BiomarkerId.HBA1C:                "HbA1c",
    BiomarkerId.EGFR:                 "Estimated GFR",
    BiomarkerId.PROLACTIN:            "Prolactin",
    BiomarkerId.SHBG:                 "SHBG",
}


def is_known_biomarker(biomarker_id: int) -> bool:
    try:
        BiomarkerId(biomarker_id)
    except ValueError:
        return False
    return True


def biomarker_label(biomarker_id: int) -> Optional[str]:
    """Human-readable label, or None for ids outside the registry."""
    if not is_known_biomarker(biomarker_id):
        return None
    return _LABELS[BiomarkerId(biomarker_id)]


def list_biomarkers() -> List[dict]:
    """Registry entries in id order, ready for JSON."""
    return [
        {"id": int(b), "name": b.name.lower(), "label": _LABELS[b]}
        for b in BiomarkerId
    ]

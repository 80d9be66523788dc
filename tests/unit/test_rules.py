"""
Unit Tests for the Standard Rule Table

Covers the table's shape and one firing / one non-firing case per rule.
"""
import pytest

from app.core.plasma import (
    STANDARD_RULES,
    BiomarkerId as B,
    Measurement,
    PlasmaEngine,
    RangeClassification as R,
)


def panel(*pairs):
    """panel((B.ALT, R.ELEVATED), ...) -> list of Measurements."""
    return [Measurement(biomarker_id=int(b), value=1.0, range=r) for b, r in pairs]


def fired_ids(engine, measurements):
    return [o.rule_id for o in engine.process(measurements)]


EXPECTED_TABLE = {
    1:  ({B.ALT, B.AST}, 3),
    2:  ({B.GLUCOSE, B.HBA1C}, 3),
    3:  ({B.LDL_CHOLESTEROL, B.APO_B, B.CRP}, 1),
    4:  ({B.INSULIN, B.GLUCOSE, B.HBA1C}, 1),
    5:  ({B.CALCIUM, B.VITAMIN_D}, 1),
    6:  ({B.CORTISOL, B.DHEAS, B.TESTOSTERONE}, 1),
    7:  ({B.VITAMIN_D, B.MAGNESIUM, B.ZINC}, 1),
    8:  ({B.ALKALINE_PHOSPHATASE, B.ALT, B.GGT, B.INSULIN}, 1),
    9:  ({B.HEMOGLOBIN, B.RBC, B.MCV}, 3),
    10: ({B.CHOLESTEROL, B.LDL_CHOLESTEROL, B.TRIGLYCERIDES}, 2),
    11: ({B.TSH, B.T4}, 3),
    12: ({B.D_DIMER}, 3),
    13: ({B.BILIRUBIN_TOTAL, B.BILIRUBIN_DIRECT, B.BILIRUBIN_INDIRECT, B.GGT}, 3),
    14: ({B.ALBUMIN, B.PROTEIN}, 3),
    15: ({B.PT, B.APTT}, 3),
    16: ({B.PT, B.APTT}, 3),
    17: ({B.CREATININE, B.EGFR}, 3),
    18: ({B.TESTOSTERONE, B.PROLACTIN}, 3),
    19: ({B.TESTOSTERONE, B.SHBG}, 2),
}


class TestStandardTable:
    """Shape of the canonical table."""

    def test_nineteen_rules_in_id_order(self):
        assert [r.id for r in STANDARD_RULES] == list(range(1, 20))

    @pytest.mark.parametrize("rule", STANDARD_RULES, ids=lambda r: f"rule-{r.id}")
    def test_biomarkers_and_importance(self, rule):
        biomarkers, importance = EXPECTED_TABLE[rule.id]
        assert rule.biomarker_ids == frozenset(int(b) for b in biomarkers)
        assert rule.importance == importance
        assert rule.message
        assert rule.name

    def test_coagulation_rules_share_message_with_d_dimer(self):
        by_id = {r.id: r for r in STANDARD_RULES}
        assert by_id[16].message == by_id[12].message
        assert "bleeding" in by_id[15].message


FIRING_CASES = [
    (1, [(B.ALT, R.ELEVATED), (B.AST, R.CRITICAL_ABUNDANCE)]),
    (2, [(B.GLUCOSE, R.CRITICAL_ABUNDANCE), (B.HBA1C, R.NORMAL_ZONE)]),
    (3, [(B.LDL_CHOLESTEROL, R.ELEVATED), (B.APO_B, R.ELEVATED), (B.CRP, R.NORMAL_ZONE)]),
    (4, [(B.INSULIN, R.CRITICAL_DEFICIENCY), (B.GLUCOSE, R.NORMAL_ZONE), (B.HBA1C, R.NORMAL_ZONE)]),
    (4, [(B.INSULIN, R.ELEVATED), (B.GLUCOSE, R.DEFICIENT), (B.HBA1C, R.OPTIMAL_ZONE)]),
    (5, [(B.CALCIUM, R.DEFICIENT), (B.VITAMIN_D, R.CRITICAL_DEFICIENCY)]),
    (6, [(B.CORTISOL, R.ELEVATED), (B.DHEAS, R.DEFICIENT), (B.TESTOSTERONE, R.NORMAL_ZONE)]),
    (6, [(B.CORTISOL, R.NORMAL_ZONE), (B.DHEAS, R.NORMAL_ZONE), (B.TESTOSTERONE, R.CRITICAL_ABUNDANCE)]),
    (7, [(B.VITAMIN_D, R.DEFICIENT), (B.MAGNESIUM, R.DEFICIENT), (B.ZINC, R.DEFICIENT)]),
    (8, [(B.ALKALINE_PHOSPHATASE, R.ELEVATED), (B.ALT, R.NORMAL_ZONE),
         (B.GGT, R.ELEVATED), (B.INSULIN, R.NORMAL_ZONE)]),
    (9, [(B.HEMOGLOBIN, R.DEFICIENT), (B.RBC, R.DEFICIENT), (B.MCV, R.NORMAL_ZONE)]),
    (10, [(B.CHOLESTEROL, R.CRITICAL_ABUNDANCE), (B.LDL_CHOLESTEROL, R.NORMAL_ZONE),
          (B.TRIGLYCERIDES, R.NORMAL_ZONE)]),
    (11, [(B.TSH, R.ELEVATED), (B.T4, R.DEFICIENT)]),
    (12, [(B.D_DIMER, R.ELEVATED)]),
    (13, [(B.BILIRUBIN_TOTAL, R.ELEVATED), (B.BILIRUBIN_DIRECT, R.ELEVATED),
          (B.BILIRUBIN_INDIRECT, R.ELEVATED), (B.GGT, R.CRITICAL_ABUNDANCE)]),
    (14, [(B.ALBUMIN, R.DEFICIENT), (B.PROTEIN, R.DEFICIENT)]),
    (15, [(B.PT, R.ELEVATED), (B.APTT, R.CRITICAL_ABUNDANCE)]),
    (16, [(B.PT, R.DEFICIENT), (B.APTT, R.CRITICAL_DEFICIENCY)]),
    (17, [(B.CREATININE, R.ELEVATED), (B.EGFR, R.DEFICIENT)]),
    (18, [(B.TESTOSTERONE, R.DEFICIENT), (B.PROLACTIN, R.ELEVATED)]),
    (19, [(B.TESTOSTERONE, R.NORMAL_ZONE), (B.SHBG, R.ELEVATED)]),
]

NON_FIRING_CASES = [
    (1, [(B.ALT, R.ELEVATED), (B.AST, R.NORMAL_ZONE)]),
    (1, [(B.ALT, R.ELEVATED), (B.AST, None)]),
    (2, [(B.GLUCOSE, R.ELEVATED), (B.HBA1C, R.ELEVATED)]),
    (3, [(B.LDL_CHOLESTEROL, R.CRITICAL_ABUNDANCE), (B.APO_B, R.CRITICAL_ABUNDANCE),
         (B.CRP, R.ELEVATED)]),
    (4, [(B.INSULIN, R.ELEVATED), (B.GLUCOSE, R.NORMAL_ZONE), (B.HBA1C, None)]),
    (5, [(B.CALCIUM, R.DEFICIENT), (B.VITAMIN_D, R.OPTIMAL_ZONE)]),
    (6, [(B.CORTISOL, R.ELEVATED), (B.DHEAS, R.NORMAL_ZONE), (B.TESTOSTERONE, R.DEFICIENT)]),
    (6, [(B.CORTISOL, R.ELEVATED), (B.DHEAS, None), (B.TESTOSTERONE, R.NORMAL_ZONE)]),
    (7, [(B.VITAMIN_D, R.DEFICIENT), (B.MAGNESIUM, R.DEFICIENT), (B.ZINC, None)]),
    (8, [(B.ALKALINE_PHOSPHATASE, R.ELEVATED), (B.ALT, R.NORMAL_ZONE),
         (B.GGT, R.NORMAL_ZONE), (B.INSULIN, R.NORMAL_ZONE)]),
    (9, [(B.HEMOGLOBIN, R.DEFICIENT), (B.RBC, R.NORMAL_ZONE), (B.MCV, R.NORMAL_ZONE)]),
    (10, [(B.CHOLESTEROL, R.ELEVATED), (B.LDL_CHOLESTEROL, R.NORMAL_ZONE),
          (B.TRIGLYCERIDES, R.NORMAL_ZONE)]),
    (11, [(B.TSH, R.ELEVATED), (B.T4, R.NORMAL_ZONE)]),
    (12, [(B.D_DIMER, R.NORMAL_ZONE)]),
    (12, [(B.D_DIMER, None)]),
    (13, [(B.BILIRUBIN_TOTAL, R.ELEVATED), (B.BILIRUBIN_DIRECT, R.ELEVATED),
          (B.BILIRUBIN_INDIRECT, R.ELEVATED), (B.GGT, R.NORMAL_ZONE)]),
    (14, [(B.ALBUMIN, R.DEFICIENT), (B.PROTEIN, R.NORMAL_ZONE)]),
    (15, [(B.PT, R.ELEVATED), (B.APTT, R.DEFICIENT)]),
    (16, [(B.PT, R.ELEVATED), (B.APTT, R.DEFICIENT)]),
    (17, [(B.CREATININE, R.ELEVATED), (B.EGFR, R.NORMAL_ZONE)]),
    (18, [(B.TESTOSTERONE, R.DEFICIENT), (B.PROLACTIN, R.NORMAL_ZONE)]),
    (18, [(B.TESTOSTERONE, None), (B.PROLACTIN, R.ELEVATED)]),
    (19, [(B.TESTOSTERONE, R.NORMAL_ZONE), (B.SHBG, R.OPTIMAL_ZONE)]),
]


class TestRuleFiring:
    """Each rule against a pattern that should and should not trigger it."""

    @pytest.mark.parametrize("rule_id,pairs", FIRING_CASES)
    def test_fires(self, engine, rule_id, pairs):
        assert rule_id in fired_ids(engine, panel(*pairs))

    @pytest.mark.parametrize("rule_id,pairs", NON_FIRING_CASES)
    def test_does_not_fire(self, engine, rule_id, pairs):
        assert rule_id not in fired_ids(engine, panel(*pairs))

    def test_diabetes_output(self, engine):
        outputs = engine.process(panel((B.GLUCOSE, R.CRITICAL_ABUNDANCE), (B.HBA1C, R.NORMAL_ZONE)))
        diabetes = [o for o in outputs if o.rule_id == 2]
        assert len(diabetes) == 1
        assert diabetes[0].importance == 3
        assert "diabetes" in diabetes[0].message

    def test_coagulation_high_and_low_are_exclusive(self, engine):
        high = fired_ids(engine, panel((B.PT, R.ELEVATED), (B.APTT, R.ELEVATED)))
        low = fired_ids(engine, panel((B.PT, R.DEFICIENT), (B.APTT, R.CRITICAL_DEFICIENCY)))
        assert high == [15]
        assert low == [16]

    def test_hormone_interaction_is_order_independent(self, engine):
        forward = panel((B.TESTOSTERONE, R.DEFICIENT), (B.PROLACTIN, R.ELEVATED))
        assert 18 in fired_ids(engine, list(reversed(forward)))

    def test_hormone_panel_looks_up_cortisol_and_dheas_by_id(self, engine):
        """Two abnormal cortisol values do not stand in for DHEA-S."""
        measurements = panel(
            (B.CORTISOL, R.ELEVATED), (B.CORTISOL, R.ELEVATED), (B.TESTOSTERONE, R.NORMAL_ZONE),
        )
        assert 6 not in fired_ids(engine, measurements)

    def test_healthy_panel_fires_nothing(self, engine, healthy_panel):
        assert engine.process(healthy_panel) == []


class TestRuleCoverage:
    """A firing pattern stops firing once its coverage count is off."""

    @pytest.mark.parametrize("rule_id,pairs", FIRING_CASES)
    def test_missing_biomarker(self, engine, rule_id, pairs):
        for dropped in range(len(pairs)):
            remaining = pairs[:dropped] + pairs[dropped + 1:]
            assert rule_id not in fired_ids(engine, panel(*remaining))

    @pytest.mark.parametrize("rule_id,pairs", FIRING_CASES)
    def test_extra_duplicate(self, engine, rule_id, pairs):
        for repeated in pairs:
            assert rule_id not in fired_ids(engine, panel(*pairs, repeated))

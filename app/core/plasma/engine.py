"""
Plasma Rule Engine

Takes a batch of classified measurements and returns one Output for every
rule in the table that has full biomarker coverage and whose predicate holds.

Usage:
    from app.core.plasma import get_engine, Measurement, RangeClassification

    engine = get_engine()
    outputs = engine.process([
        Measurement(biomarker_id=1, value=240.0, range=RangeClassification.CRITICAL_ABUNDANCE),
        Measurement(biomarker_id=33, value=5.4, range=RangeClassification.NORMAL_ZONE),
    ])
    for o in outputs:
        print(o.rule_id, o.importance, o.message)
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from app.utils import get_logger
from app.utils.exceptions import RuleConfigurationError
from .base import Measurement, Output, Rule
from .rules import STANDARD_RULES

logger = get_logger(__name__)


class PlasmaEngine:
    """
    Evaluates measurements against an immutable rule table.

    The table is fixed at construction and only read afterwards, so one
    instance can serve concurrent callers.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        table = tuple(STANDARD_RULES if rules is None else rules)

        seen = set()
        for rule in table:
            if rule.id in seen:
                raise RuleConfigurationError(
                    f"Duplicate rule id {rule.id} in rule table",
                    rule_id=rule.id,
                )
            seen.add(rule.id)

        self._rules = table
        self._by_id: Dict[int, Rule] = {rule.id: rule for rule in table}
        logger.debug(f"PlasmaEngine: loaded {len(table)} rule(s)")

    @property
    def rules(self) -> tuple:
        return self._rules

    def get_rule(self, rule_id: int) -> Optional[Rule]:
        return self._by_id.get(rule_id)

    def process(self, measurements: Iterable[Measurement]) -> List[Output]:
        """
        Evaluate every rule against the measurements.

        For each rule the input is filtered to the rule's biomarker ids
        (keeping input order). The rule is skipped unless the filtered list
        has exactly as many entries as the rule has ids; this is a count
        check, so duplicates of one id can stand in for a missing one and it
        is up to the predicate to look ids up where that matters.

        Returns:
            Outputs in rule-table order; empty when nothing fires.
        """
        values: Sequence[Measurement] = list(measurements)
        outputs: List[Output] = []

        for rule in self._rules:
            relevant = [v for v in values if v.biomarker_id in rule.biomarker_ids]
            if len(relevant) != len(rule.biomarker_ids):
                logger.debug(
                    f"PlasmaEngine [rule {rule.id}]: coverage "
                    f"{len(relevant)}/{len(rule.biomarker_ids)}, skipping"
                )
                continue

            try:
                fired = bool(rule.predicate(relevant))
            except Exception as exc:
                # A faulty predicate must not take the other rules down with it
                logger.error(
                    f"PlasmaEngine [rule {rule.id}]: predicate raised {exc}",
                    exc_info=True,
                )
                continue

            if fired:
                outputs.append(Output.from_rule(rule))

        if outputs:
            logger.info(
                f"PlasmaEngine: {len(outputs)} rule(s) fired — "
                + ", ".join(str(o.rule_id) for o in outputs)
            )
        else:
            logger.debug("PlasmaEngine: no rules fired")

        return outputs

    @staticmethod
    def summarise(outputs: List[Output]) -> Dict:
        """
        Build a compact summary dict suitable for JSON API responses.

        Example output:
        {
            "total_outputs": 2,
            "highest_importance": 3,
            "importance_counts": {"3": 1, "1": 1},
            "rule_ids": [2, 4],
            "outputs": [{...}, {...}]
        }
        """
        counts: Dict[str, int] = {}
        for o in outputs:
            counts[str(o.importance)] = counts.get(str(o.importance), 0) + 1

        return {
            "total_outputs":      len(outputs),
            "highest_importance": max((o.importance for o in outputs), default=None),
            "importance_counts":  counts,
            "rule_ids":           [o.rule_id for o in outputs],
            "outputs":            [o.to_dict() for o in outputs],
        }


_default_engine: Optional[PlasmaEngine] = None


def get_engine() -> PlasmaEngine:
    """Shared engine over the standard table, built on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PlasmaEngine()
    return _default_engine

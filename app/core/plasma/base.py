"""
Plasma Rule Engine — Base Types

Data contracts shared by the rule table, the engine and the API layer:
the range classification of a lab value, the measurement record handed in
by the upstream classifier, the rule record and the output record.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Sequence, Union

from app.utils.exceptions import MeasurementValidationError, RuleConfigurationError


class RangeClassification(str, Enum):
    """
    Placement of a measured value relative to its reference interval.

    Members are declared in severity direction (high to low), not by value.
    Every member belongs to exactly one of the critical / abnormal / normal
    groups; a new member has to be placed in one of them and every rule
    relying on membership re-checked.
    """
    CRITICAL_ABUNDANCE  = "critical_abundance"
    ELEVATED            = "elevated"
    NORMAL_ZONE         = "normal_zone"
    OPTIMAL_ZONE        = "optimal_zone"
    DEFICIENT           = "deficient"
    CRITICAL_DEFICIENCY = "critical_deficiency"

    @property
    def is_critical(self) -> bool:
        return self in (RangeClassification.CRITICAL_ABUNDANCE,
                        RangeClassification.CRITICAL_DEFICIENCY)

    @property
    def is_abnormal(self) -> bool:
        return self in (RangeClassification.ELEVATED,
                        RangeClassification.DEFICIENT)

    @property
    def is_normal(self) -> bool:
        return self in (RangeClassification.NORMAL_ZONE,
                        RangeClassification.OPTIMAL_ZONE)

    @property
    def code(self) -> int:
        """Numeric code used by the upstream classifier (1..6)."""
        return _RANGE_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "RangeClassification":
        for member, member_code in _RANGE_CODES.items():
            if member_code == code:
                return member
        raise MeasurementValidationError(
            f"Unknown range code: {code}. Valid: {sorted(_RANGE_CODES.values())}",
            field="range",
        )


_RANGE_CODES: Dict[RangeClassification, int] = {
    member: index for index, member in enumerate(RangeClassification, start=1)
}

_RANGE_ALIASES: Dict[str, RangeClassification] = {
    "criticalabundance":  RangeClassification.CRITICAL_ABUNDANCE,
    "critical_high":      RangeClassification.CRITICAL_ABUNDANCE,
    "high":               RangeClassification.ELEVATED,
    "normalzone":         RangeClassification.NORMAL_ZONE,
    "normal":             RangeClassification.NORMAL_ZONE,
    "optimalzone":        RangeClassification.OPTIMAL_ZONE,
    "optimal":            RangeClassification.OPTIMAL_ZONE,
    "low":                RangeClassification.DEFICIENT,
    "criticaldeficiency": RangeClassification.CRITICAL_DEFICIENCY,
    "critical_low":       RangeClassification.CRITICAL_DEFICIENCY,
}


def parse_range(
    raw: Union[None, RangeClassification, int, str],
) -> Optional[RangeClassification]:
    """
    Normalise an upstream range value.

    Accepts None (classification unavailable), a member, its numeric code,
    its value or name in any case, or one of the short aliases
    (``high``, ``low``, ``normal``, ``optimal``, ``critical_high``,
    ``critical_low``).

    Raises:
        MeasurementValidationError: the value names no classification.
    """
    if raw is None or isinstance(raw, RangeClassification):
        return raw

    if isinstance(raw, int) and not isinstance(raw, bool):
        return RangeClassification.from_code(raw)

    if isinstance(raw, str):
        key = raw.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return RangeClassification(key)
        except ValueError:
            pass
        if key in _RANGE_ALIASES:
            return _RANGE_ALIASES[key]
        if key.isdigit():
            return RangeClassification.from_code(int(key))

    raise MeasurementValidationError(
        f"Unknown range classification: {raw!r}. "
        f"Valid: {[r.value for r in RangeClassification]}",
        field="range",
    )


@dataclass(frozen=True)
class Measurement:
    """One classified lab value. ``range`` is None when classification failed."""
    biomarker_id: int
    value: float
    range: Optional[RangeClassification] = None

    def to_dict(self) -> dict:
        return {
            "biomarker_id": self.biomarker_id,
            "value": self.value,
            "range": self.range.value if self.range is not None else None,
        }


Predicate = Callable[[Sequence[Measurement]], bool]


@dataclass(frozen=True)
class Rule:
    """
    One entry of the rule table.

    ``predicate`` only ever sees the measurements whose ids are in
    ``biomarker_ids``, and only once the engine has checked coverage.
    """
    id: int
    biomarker_ids: FrozenSet[int]
    predicate: Predicate
    message: str
    importance: int
    name: str = ""

    def __post_init__(self):
        ids = frozenset(self.biomarker_ids)
        if not ids:
            raise RuleConfigurationError(
                f"Rule {self.id} requires at least one biomarker",
                rule_id=self.id,
            )
        object.__setattr__(self, "biomarker_ids", ids)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "biomarker_ids": sorted(int(b) for b in self.biomarker_ids),
            "message": self.message,
            "importance": self.importance,
        }


@dataclass(frozen=True)
class Output:
    """Advisory produced by one firing rule."""
    message: str
    importance: int
    rule_id: int

    @classmethod
    def from_rule(cls, rule: Rule) -> "Output":
        return cls(message=rule.message, importance=rule.importance, rule_id=rule.id)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "importance": self.importance,
            "rule_id": self.rule_id,
        }


def measurements_from_dicts(items: Iterable[dict]) -> list:
    """Build Measurements from plain dicts (``biomarker_id``, ``value``, ``range``)."""
    return [
        Measurement(
            biomarker_id=int(item["biomarker_id"]),
            value=float(item.get("value", 0.0)),
            range=parse_range(item.get("range")),
        )
        for item in items
    ]

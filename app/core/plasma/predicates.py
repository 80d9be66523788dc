"""
Predicate building blocks for the rule table.

Conditions test a single measurement and are False whenever the range
classification is missing. Shapes combine conditions over the measurements
a rule receives.
"""
from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from .base import Measurement, Predicate, RangeClassification

Condition = Callable[[Measurement], bool]


# ── Conditions ────────────────────────────────────────────────────────────────

def is_flagged(m: Measurement) -> bool:
    """Abnormal or critical, in either direction."""
    return m.range is not None and (m.range.is_abnormal or m.range.is_critical)


def is_critical(m: Measurement) -> bool:
    return m.range is not None and m.range.is_critical


def is_elevated(m: Measurement) -> bool:
    """Elevated only; critical abundance does not count."""
    return m.range is RangeClassification.ELEVATED


def is_high(m: Measurement) -> bool:
    return m.range in (RangeClassification.ELEVATED,
                       RangeClassification.CRITICAL_ABUNDANCE)


def is_low(m: Measurement) -> bool:
    return m.range in (RangeClassification.DEFICIENT,
                       RangeClassification.CRITICAL_DEFICIENCY)


# ── Shapes ────────────────────────────────────────────────────────────────────

def find(values: Sequence[Measurement], biomarker_id: int) -> Optional[Measurement]:
    """First measurement carrying ``biomarker_id``, if any."""
    return next((v for v in values if v.biomarker_id == biomarker_id), None)


def all_of(biomarker_ids: Iterable[int], condition: Condition) -> Predicate:
    """
    Every listed biomarker is present and satisfies ``condition``.

    Looks each id up rather than testing every element, so a batch that only
    passed the coverage count through duplicates of one id does not fire.
    """
    ids = tuple(biomarker_ids)

    def predicate(values: Sequence[Measurement]) -> bool:
        for biomarker_id in ids:
            m = find(values, biomarker_id)
            if m is None or not condition(m):
                return False
        return True

    return predicate


def by_id(biomarker_id: int, condition: Condition) -> Predicate:
    def predicate(values: Sequence[Measurement]) -> bool:
        m = find(values, biomarker_id)
        return m is not None and condition(m)

    return predicate


def any_of(condition: Condition) -> Predicate:
    def predicate(values: Sequence[Measurement]) -> bool:
        return any(condition(v) for v in values)

    return predicate


def count_at_least(condition: Condition, threshold: int) -> Predicate:
    def predicate(values: Sequence[Measurement]) -> bool:
        return sum(1 for v in values if condition(v)) >= threshold

    return predicate


def either(*predicates: Predicate) -> Predicate:
    def predicate(values: Sequence[Measurement]) -> bool:
        return any(p(values) for p in predicates)

    return predicate


def both(*predicates: Predicate) -> Predicate:
    def predicate(values: Sequence[Measurement]) -> bool:
        return all(p(values) for p in predicates)

    return predicate


any_critical = any_of(is_critical)


def critical_or_flagged_count(threshold: int) -> Predicate:
    """Any critical value, or at least ``threshold`` abnormal-or-critical ones."""
    return either(any_critical, count_at_least(is_flagged, threshold))

"""WCAG AA compliance classification.

Two tiers are supported: AA for normal text (4.5) and AA-Large for large
text (3.0). Which tier applies to a pair of grades depends on how far apart
they are; see ``required_threshold``.
"""

from __future__ import annotations

from typing import Protocol, Union

from .settings import AA_GRADE_DISTANCE, MIN_CONTRAST_AA, MIN_CONTRAST_AA_LARGE

__all__ = [
    "MIN_CONTRAST_AA",
    "MIN_CONTRAST_AA_LARGE",
    "is_aa_compliant",
    "is_aa_large_compliant",
    "required_threshold",
    "is_compliant_for_distance",
]


class HasRatio(Protocol):
    ratio: float


RatioLike = Union[float, HasRatio]


def _ratio(value: RatioLike) -> float:
    return float(getattr(value, "ratio", value))


def is_aa_compliant(value: RatioLike) -> bool:
    return _ratio(value) >= MIN_CONTRAST_AA


def is_aa_large_compliant(value: RatioLike) -> bool:
    return _ratio(value) >= MIN_CONTRAST_AA_LARGE


def required_threshold(base_grade: int, compared_grade: int) -> float:
    """Minimum ratio expected between two grades of the same family.

    Grades at least ``AA_GRADE_DISTANCE`` apart are treated as a
    foreground/background pairing and must meet AA; closer grades only need
    AA-Large.
    """
    if abs(base_grade - compared_grade) >= AA_GRADE_DISTANCE:
        return MIN_CONTRAST_AA
    return MIN_CONTRAST_AA_LARGE


def is_compliant_for_distance(value: RatioLike, base_grade: int, compared_grade: int) -> bool:
    return _ratio(value) >= required_threshold(base_grade, compared_grade)

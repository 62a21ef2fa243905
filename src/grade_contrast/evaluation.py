"""Contrast evaluators over a loaded palette.

Two evaluators answer different questions and deliberately differ in how
they filter:

``contrast_for_family``
    Foreground/background guidance inside one family. Starting 40 grades
    away from each color (grade >= 40) it walks outward in steps of 10 toward
    white (grade 0) and black (grade 100), stopping a direction at the first
    grade the family does not define. Only pairs failing the tier required
    for their distance (AA at >= 50 apart, AA-Large below) are returned.

``check_contrast``
    Exhaustive sweep across family pairs. Pairs are matched by position
    (i-th color of one family against the j-th of the other, i < j) and any
    pair at least 40 grades apart is returned with its ratio, compliant or
    not. Threshold bucketing happens later in ``report``.

Neither evaluator logs or prints. Callers wanting a trace pass an
``on_compare(base_label, contrast_label)`` callable.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional

from .compliance import is_compliant_for_distance
from .contrast import contrast_ratio, normalize_hex
from .palette import Color, ColorFamily, GradeMissing, Palette
from .settings import (
    BLACK,
    DARKEST_GRADE,
    GRADE_STEP,
    LIGHTEST_GRADE,
    MIN_GRADE_DISTANCE,
    WHITE,
)

__all__ = [
    "ContrastResult",
    "CompareHook",
    "format_color_name",
    "contrast_for_family",
    "check_contrast",
    "family_contrast_matrix",
    "family_contrast_with_color",
]

CompareHook = Callable[[str, str], None]


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    base: str
    contrast: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def format_color_name(family: object, grade: int) -> str:
    return f"{family}-{grade}"


def _walk(
    family: ColorFamily,
    color: Color,
    direction: int,
    on_compare: Optional[CompareHook],
) -> List[ContrastResult]:
    name = str(family.name)
    base_label = format_color_name(name, color.grade)
    failures: List[ContrastResult] = []
    compared = color.grade + direction * MIN_GRADE_DISTANCE
    while LIGHTEST_GRADE <= compared <= DARKEST_GRADE:
        if compared == LIGHTEST_GRADE:
            value, label = WHITE, "white"
        elif compared == DARKEST_GRADE:
            value, label = BLACK, "black"
        else:
            found = family.find_by_grade(compared)
            if isinstance(found, GradeMissing):
                break
            value, label = found.value, format_color_name(name, found.grade)
        if on_compare is not None:
            on_compare(base_label, label)
        ratio = contrast_ratio(color.value, value)
        if not is_compliant_for_distance(ratio, color.grade, compared):
            failures.append(ContrastResult(ratio=ratio, base=base_label, contrast=label))
        compared += direction * GRADE_STEP
    return failures


def contrast_for_family(
    family: ColorFamily, *, on_compare: Optional[CompareHook] = None
) -> List[ContrastResult]:
    """Return the non-compliant grade pairs of a single family."""
    output: List[ContrastResult] = []
    for color in family:
        if color.grade < MIN_GRADE_DISTANCE:
            continue
        output.extend(_walk(family, color, -1, on_compare))
        output.extend(_walk(family, color, 1, on_compare))
    return output


def check_contrast(
    palette: Palette, *, on_compare: Optional[CompareHook] = None
) -> List[ContrastResult]:
    """Return every cross-family pair at least 40 grades apart, unfiltered."""
    families = palette.families()
    output: List[ContrastResult] = []
    for b, base_family in enumerate(families):
        for contrast_family in families[b + 1 :]:
            shortest = min(len(base_family), len(contrast_family))
            for i in range(shortest):
                base = base_family.colors[i]
                for j in range(i + 1, shortest):
                    other = contrast_family.colors[j]
                    if abs(base.grade - other.grade) < MIN_GRADE_DISTANCE:
                        continue
                    base_label = format_color_name(base_family.name, base.grade)
                    other_label = format_color_name(contrast_family.name, other.grade)
                    if on_compare is not None:
                        on_compare(base_label, other_label)
                    output.append(
                        ContrastResult(
                            ratio=contrast_ratio(base.value, other.value),
                            base=base_label,
                            contrast=other_label,
                        )
                    )
    return output


def family_contrast_matrix(family: ColorFamily) -> List[ContrastResult]:
    """Ratio of every pair of colors within one family (token order, i < j)."""
    colors = family.colors
    output: List[ContrastResult] = []
    for i, base in enumerate(colors):
        for other in colors[i + 1 :]:
            output.append(
                ContrastResult(
                    ratio=contrast_ratio(base.value, other.value),
                    base=format_color_name(family.name, base.grade),
                    contrast=format_color_name(family.name, other.grade),
                )
            )
    return output


def family_contrast_with_color(
    family: ColorFamily,
    color: str,
    predicate: Optional[Callable[[int], bool]] = None,
    *,
    label: Optional[str] = None,
) -> List[ContrastResult]:
    """Contrast each grade of ``family`` (optionally filtered) against one color."""
    target = normalize_hex(color)
    contrast_label = label or target
    return [
        ContrastResult(
            ratio=contrast_ratio(c.value, target),
            base=format_color_name(family.name, c.grade),
            contrast=contrast_label,
        )
        for c in family
        if predicate is None or predicate(c.grade)
    ]

import pytest

from grade_contrast.evaluation import (
    contrast_for_family,
    family_contrast_matrix,
    family_contrast_with_color,
)

MID_GRAY = "#777777"


def test_walk_stops_at_missing_grade(gap_family):
    seen = []
    failures = contrast_for_family(gap_family, on_compare=lambda b, c: seen.append((b, c)))
    # 40 -> 80 is missing so 40 is never compared with 90
    assert seen == [("gray-40", "white"), ("gray-60", "black")]
    assert failures == []


def test_aa_required_at_distance_50_downward(family_factory):
    fam = family_factory("gray", {10: "#ffffff", 50: MID_GRAY})
    failures = contrast_for_family(fam)
    # 50 vs 10 (distance 40) only needs AA-Large and passes; 50 vs white needs AA
    assert [(f.base, f.contrast) for f in failures] == [("gray-50", "white")]
    assert failures[0].ratio == pytest.approx(4.48, abs=0.01)


def test_aa_required_at_distance_50_upward(family_factory):
    fam = family_factory("gray", {40: MID_GRAY, 80: "#ffffff", 90: "#ffffff"})
    failures = contrast_for_family(fam)
    assert [(f.base, f.contrast) for f in failures] == [("gray-40", "gray-90")]


def test_close_grades_never_compared(family_factory):
    fam = family_factory("gray", {40: "#a0a0a0", 50: "#909090"})
    seen = []
    contrast_for_family(fam, on_compare=lambda b, c: seen.append((b, c)))
    assert ("gray-40", "gray-50") not in seen
    assert ("gray-50", "gray-40") not in seen


def test_low_grades_are_not_bases(family_factory):
    fam = family_factory("gray", {10: "#f0f0f0", 90: "#1b1b1b"})
    seen = []
    assert contrast_for_family(fam, on_compare=lambda b, c: seen.append(b)) == []
    assert "gray-10" not in seen


def test_identical_colors_fail(family_factory):
    fam = family_factory("gray", {40: MID_GRAY, 80: MID_GRAY})
    failures = contrast_for_family(fam)
    pairs = {(f.base, f.contrast) for f in failures}
    assert ("gray-40", "gray-80") in pairs
    assert ("gray-80", "gray-40") in pairs
    assert all(f.ratio == 1.0 for f in failures if "white" not in f.contrast)


def test_family_contrast_matrix(family_factory):
    fam = family_factory("gray", {10: "#ffffff", 50: MID_GRAY, 90: "#000000"})
    matrix = family_contrast_matrix(fam)
    assert [(r.base, r.contrast) for r in matrix] == [
        ("gray-10", "gray-50"),
        ("gray-10", "gray-90"),
        ("gray-50", "gray-90"),
    ]
    assert matrix[1].ratio == pytest.approx(21.0)


def test_family_contrast_with_color(family_factory):
    fam = family_factory("gray", {10: "#ffffff", 50: MID_GRAY, 90: "#000000"})
    results = family_contrast_with_color(fam, "#fff", lambda g: g < 50, label="white")
    assert [(r.base, r.contrast, r.ratio) for r in results] == [("gray-10", "white", 1.0)]
    assert len(family_contrast_with_color(fam, "#000000")) == 3


def test_endpoints_win_over_stored_grades(family_factory):
    fam = family_factory("gray", {0: "#000000", 40: MID_GRAY, 60: MID_GRAY, 100: "#ffffff"})
    seen = []
    contrast_for_family(fam, on_compare=lambda b, c: seen.append((b, c)))
    assert ("gray-40", "white") in seen
    assert ("gray-60", "black") in seen
    assert not any(c in ("gray-0", "gray-100") for _, c in seen)

import json

import pytest

from grade_contrast.evaluation import ContrastResult
from grade_contrast.report import (
    PaletteReport,
    build_family_report,
    build_palette_report,
    write_palette_report,
)


def _results():
    return [
        ContrastResult(ratio=3.5, base="gray-50", contrast="blue-90"),
        ContrastResult(ratio=2.0, base="gray-40", contrast="blue-80"),
        ContrastResult(ratio=7.0, base="gray-10", contrast="blue-90"),
    ]


def test_palette_report_buckets():
    report = build_palette_report(_results())
    assert [r.ratio for r in report.not_aa] == [3.5, 2.0]
    assert [r.ratio for r in report.not_aa_large] == [2.0]
    assert set(report.not_aa_large) <= set(report.not_aa)
    assert report.summary["total"] == 3
    assert report.summary["not_aa"] == 2


def test_palette_report_json(tmp_path):
    report = build_palette_report(_results())
    out = write_palette_report(report, tmp_path / "nested" / "contrast-report.json")
    data = json.loads(out.read_text(encoding="utf-8"))
    assert set(data) == {"notAALarge", "notAA"}
    assert data["notAALarge"] == [{"ratio": 2.0, "base": "gray-40", "contrast": "blue-80"}]


def test_family_report_render():
    empty = build_family_report("gray", [])
    assert empty.ok
    assert empty.render() == "No contrast errors found for color family gray!"
    failing = build_family_report("gray", _results()[:1])
    assert not failing.ok
    text = failing.render()
    assert text.startswith("Errors found in color family gray!")
    assert '"contrast": "blue-90"' in text
    assert failing.summary == {"family": "gray", "failing": 1}


def test_palette_report_requires_total():
    with pytest.raises(TypeError):
        PaletteReport(not_aa_large=[], not_aa=[])  # type: ignore[call-arg]

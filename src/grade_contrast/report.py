"""Report assembly for evaluator output.

Exports:
 - PaletteReport dataclass (not_aa_large, not_aa, summary)
 - FamilyReport dataclass (family, failures, ok, render())
 - build_palette_report(results)
 - build_family_report(family_name, failures)
 - write_palette_report(report, path)

Whole-palette results are bucketed against both thresholds independently,
so a pair below 3.0 lands in ``notAALarge`` and ``notAA``. Family reports
carry failures that ``contrast_for_family`` already filtered.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .evaluation import ContrastResult
from .settings import MIN_CONTRAST_AA, MIN_CONTRAST_AA_LARGE

__all__ = [
    "PaletteReport",
    "FamilyReport",
    "build_palette_report",
    "build_family_report",
    "write_palette_report",
]

_logger = logging.getLogger(__name__)


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class PaletteReport:
    not_aa_large: List[ContrastResult]
    not_aa: List[ContrastResult]
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "notAALarge": [r.to_dict() for r in self.not_aa_large],
            "notAA": [r.to_dict() for r in self.not_aa],
        }

    def to_json(self) -> str:
        return _dump(self.to_dict())

    @property
    def summary(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "not_aa_large": len(self.not_aa_large),
            "not_aa": len(self.not_aa),
            "threshold_normal": MIN_CONTRAST_AA,
            "threshold_large": MIN_CONTRAST_AA_LARGE,
        }


@dataclass(frozen=True)
class FamilyReport:
    family: str
    failures: List[ContrastResult]

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_json(self) -> str:
        return _dump([r.to_dict() for r in self.failures])

    def render(self) -> str:
        if self.ok:
            return f"No contrast errors found for color family {self.family}!"
        return f"Errors found in color family {self.family}!\n\n{self.to_json()}"

    @property
    def summary(self) -> Dict[str, Any]:
        return {"family": self.family, "failing": len(self.failures)}


def build_palette_report(results: Iterable[ContrastResult]) -> PaletteReport:
    all_results = list(results)
    return PaletteReport(
        not_aa_large=[r for r in all_results if r.ratio < MIN_CONTRAST_AA_LARGE],
        not_aa=[r for r in all_results if r.ratio < MIN_CONTRAST_AA],
        total=len(all_results),
    )


def build_family_report(family: object, failures: Iterable[ContrastResult]) -> FamilyReport:
    return FamilyReport(family=str(family), failures=list(failures))


def write_palette_report(report: PaletteReport, path: str | Path) -> Path:
    """Write ``report`` as indented JSON.

    Returns
    -------
    Path
        The path written.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(report.to_json() + "\n", encoding="utf-8")
    _logger.info("Wrote contrast report to %s", out)
    return out

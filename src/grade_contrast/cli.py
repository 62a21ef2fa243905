"""CLI entry point for palette luminance and contrast reports.

Usage examples:
  grade-contrast -c                     # whole palette, writes contrast-report.json
  grade-contrast -c -f blue_vivid       # single family, printed
  grade-contrast -l -f gray             # luminance of each grade
  grade-contrast -c --tokens tokens.yml --out build/report.json -v
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from . import settings
from .contrast import luminance_for_family
from .evaluation import check_contrast, contrast_for_family
from .loader import TokenValidationError, load_palette
from .palette import ColorFamily, Palette, UnknownFamilyError
from .report import build_family_report, build_palette_report, write_palette_report

_logger = logging.getLogger(__name__)


def _trace_comparison(base: str, contrast: str) -> None:
    _logger.debug("Comparing color grade %s with %s", base, contrast)


def _resolve_family(palette: Palette, name: Optional[str]) -> Optional[ColorFamily]:
    if name is None:
        return None
    return palette.family(name)


def cmd_luminance(palette: Palette, args: argparse.Namespace) -> int:
    try:
        family = _resolve_family(palette, args.family)
    except UnknownFamilyError:
        family = None
    if family is None:
        print("Luminance command requires a valid color family name!", file=sys.stderr)
        return 1
    print(json.dumps(luminance_for_family(family), indent=2))
    return 0


def cmd_contrast(palette: Palette, args: argparse.Namespace) -> int:
    trace = _trace_comparison if _logger.isEnabledFor(logging.DEBUG) else None
    try:
        family = _resolve_family(palette, args.family)
    except UnknownFamilyError as exc:
        print(f"{exc}", file=sys.stderr)
        return 1
    if family is None:
        report = build_palette_report(check_contrast(palette, on_compare=trace))
        _logger.info("Palette contrast summary: %s", report.summary)
        out = write_palette_report(report, args.out)
        print(f"Contrast report written to {out}")
        return 0
    family_report = build_family_report(family.name, contrast_for_family(family, on_compare=trace))
    _logger.info("Family contrast summary: %s", family_report.summary)
    print(family_report.render())
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="grade-contrast", description="WCAG contrast checks for a graded color palette"
    )
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument("-l", "--luminance", action="store_true", help="Print luminance per grade")
    mode.add_argument("-c", "--contrast", action="store_true", help="Report contrast failures")
    p.add_argument("-f", "--family", help="Color family name (e.g. blue_vivid)")
    p.add_argument(
        "--tokens", type=Path, default=None, help="Palette token file (.json, .yml, .yaml)"
    )
    p.add_argument(
        "--out", type=Path, default=settings.REPORT_PATH, help="Whole-palette report JSON path"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log every comparison")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(format="[%(levelname)s] %(name)s: %(message)s")
    # root may already be configured by the host
    logging.getLogger("grade_contrast").setLevel(logging.DEBUG if args.verbose else logging.INFO)
    try:
        palette = load_palette(args.tokens)
    except (FileNotFoundError, TokenValidationError) as exc:
        print(f"Unable to load palette: {exc}", file=sys.stderr)
        return 1
    if args.luminance:
        return cmd_luminance(palette, args)
    return cmd_contrast(palette, args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

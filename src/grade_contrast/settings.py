"""Global configuration and constants for palette contrast checks."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

WHITE: Final = "#ffffff"
BLACK: Final = "#000000"

# WCAG 2.x AA thresholds
MIN_CONTRAST_AA: Final = 4.5
MIN_CONTRAST_AA_LARGE: Final = 3.0

# Grade scale: 0 is absolute white, 100 is absolute black
LIGHTEST_GRADE: Final = 0
DARKEST_GRADE: Final = 100
GRADE_STEP: Final = 10
MIN_GRADE_DISTANCE: Final = 40  # closer grades are not expected to be compliant
AA_GRADE_DISTANCE: Final = 50  # from here on the stricter AA bar applies

_BUNDLED_TOKEN_FILE: Final = Path(__file__).parent / "data" / "system_colors.json"
TOKEN_FILE: Final = Path(os.environ.get("GRADE_CONTRAST_TOKEN_FILE", _BUNDLED_TOKEN_FILE))
REPORT_PATH: Final = Path(os.environ.get("GRADE_CONTRAST_REPORT_PATH", "contrast-report.json"))

"""Palette contrast package.

Loads a graded design-system palette and checks WCAG AA contrast between its
grades, within a family and across families.
"""

from .palette import (  # noqa: F401
    Color,
    ColorFamily,
    FamilyName,
    GradeMissing,
    Palette,
    UnknownFamilyError,
)
from .loader import build_palette, load_palette, TokenValidationError  # noqa: F401
from .contrast import contrast_ratio, relative_luminance, luminance_for_family  # noqa: F401
from .compliance import (  # noqa: F401
    is_aa_compliant,
    is_aa_large_compliant,
    required_threshold,
)
from .evaluation import (  # noqa: F401
    ContrastResult,
    check_contrast,
    contrast_for_family,
    family_contrast_matrix,
    family_contrast_with_color,
)
from .report import (  # noqa: F401
    FamilyReport,
    PaletteReport,
    build_family_report,
    build_palette_report,
    write_palette_report,
)

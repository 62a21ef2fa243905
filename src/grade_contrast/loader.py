"""Palette token loading utilities.

Responsibilities:
- Load a token document (JSON or YAML) describing system color families.
- Validate its structure and normalize grades/values.
- Build an immutable ``Palette``.

Expected document shape::

    colors:
      system:
        gray:
          - utility: gray-5
            value: "#f0f0f0"
          - utility: gray-10
            value: "#e6e6e6"

Usage:
    from grade_contrast import load_palette
    palette = load_palette()
    palette.family("gray").find_by_grade(10)
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from . import settings
from .contrast import normalize_hex
from .palette import Color, ColorFamily, Palette

_logger = logging.getLogger(__name__)

_GRADE_RE = re.compile(r"(\d+)")


class TokenValidationError(RuntimeError):
    """Raised when required token fields are missing or malformed."""


def extract_grade(utility: Any) -> int:
    """First run of digits in a utility name (``"blue-vivid-40"`` -> 40)."""
    match = _GRADE_RE.search(str(utility)) if utility is not None else None
    if match is None:
        raise TokenValidationError(f"Utility name has no numeric grade: {utility!r}")
    return int(match.group(1))


def _build_family(name: str, entries: Any) -> ColorFamily:
    if not isinstance(entries, list):
        raise TokenValidationError(f"colors.system.{name} must be a list of entries")
    colors: List[Color] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise TokenValidationError(f"colors.system.{name} entries must be mappings")
        value = entry.get("value")
        if not value:
            _logger.debug("Dropping %s entry without value: %s", name, entry.get("utility"))
            continue
        try:
            hex_value = normalize_hex(value)
        except ValueError as exc:
            raise TokenValidationError(f"colors.system.{name}: {exc}") from exc
        colors.append(Color(grade=extract_grade(entry.get("utility")), value=hex_value))
    try:
        return ColorFamily(name, colors)
    except ValueError as exc:
        raise TokenValidationError(str(exc)) from exc


def build_palette(data: Mapping[str, Any]) -> Palette:
    """Build a palette from an already parsed token document."""
    _validate_tokens(data)
    system = data["colors"]["system"]
    families = [_build_family(str(name), entries) for name, entries in system.items()]
    _logger.debug("Loaded %d color families", len(families))
    return Palette(families)


def _read_document(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as f:
        try:
            if suffix == ".json":
                return json.load(f)
            if suffix in (".yml", ".yaml"):
                return yaml.safe_load(f) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise TokenValidationError(f"Malformed token file {path.name}: {exc}") from exc
    raise TokenValidationError(f"Unsupported token file type: {path.name}")


def load_palette(path: str | Path | None = None) -> Palette:
    """Load a palette from a token file.

    Parameters
    ----------
    path: optional explicit path override (defaults to ``settings.TOKEN_FILE``).
    """
    token_path = Path(path) if path else settings.TOKEN_FILE
    if not token_path.exists():
        raise FileNotFoundError(f"Palette token file not found: {token_path}")
    data = _read_document(token_path)
    return build_palette(data)


def _validate_tokens(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise TokenValidationError("Token document must be a mapping")
    colors = data.get("colors")
    if not isinstance(colors, Mapping):
        raise TokenValidationError("Missing top-level token group: colors")
    if not isinstance(colors.get("system"), Mapping):
        raise TokenValidationError("colors.system group required")


__all__ = ["build_palette", "extract_grade", "load_palette", "TokenValidationError"]

# Shared palette fixtures. Colors are chosen for well-known ratios:
#   #777777 on white ~= 4.48 (AA-Large only), on black ~= 4.69 (AA).

import json
from typing import Dict

import pytest

from grade_contrast.palette import Color, ColorFamily, Palette

MID_GRAY = "#777777"


def make_family(name: str, grades: Dict[int, str]) -> ColorFamily:
    return ColorFamily(name, [Color(grade=g, value=v) for g, v in grades.items()])


@pytest.fixture
def gap_family() -> ColorFamily:
    return make_family("gray", {40: MID_GRAY, 60: MID_GRAY, 90: MID_GRAY})


@pytest.fixture
def two_family_palette() -> Palette:
    return Palette(
        [
            make_family("gray", {10: "#f0f0f0", 90: "#1b1b1b"}),
            make_family("slate", {10: "#f0f0f0", 90: "#1b1b1b"}),
        ]
    )


@pytest.fixture
def token_doc() -> dict:
    return {
        "colors": {
            "system": {
                "gray": [
                    {"utility": "gray-10", "value": "#f0f0f0"},
                    {"utility": "gray-40", "value": "#a0a0a0"},
                    {"utility": "gray-50", "value": "#909090"},
                    {"utility": "gray-90", "value": "#1b1b1b"},
                ],
                "blue_vivid": [
                    {"utility": "blue-10v", "value": "#CFE8FF"},
                    {"utility": "blue-50v", "value": "#0076d6"},
                    {"utility": "blue-70v"},
                    {"utility": "blue-90v", "value": "#11181d"},
                ],
            }
        }
    }


@pytest.fixture
def token_file(tmp_path, token_doc):
    p = tmp_path / "tokens.json"
    p.write_text(json.dumps(token_doc), encoding="utf-8")
    return p


@pytest.fixture
def family_factory():
    return make_family

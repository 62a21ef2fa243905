"""In-memory palette model: graded colors grouped into named families.

A palette is built once from a token file (see ``loader``) and never mutated
afterwards. Families are keyed by ``FamilyName`` and each family indexes its
colors by integer grade, so lookups are direct rather than linear scans.

Public API:
- Color(grade, value)
- FamilyName(value)
- ColorFamily(name, colors).find_by_grade(grade) -> Color | GradeMissing
- Palette(families).family(name) -> ColorFamily
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple, Union

__all__ = [
    "Color",
    "FamilyName",
    "GradeMissing",
    "ColorFamily",
    "Palette",
    "UnknownFamilyError",
]


@dataclass(frozen=True)
class Color:
    grade: int
    value: str


@dataclass(frozen=True, order=True)
class FamilyName:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"Family name must be a non-empty string: {self.value!r}")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GradeMissing:
    """Lookup result for a grade that has no color in the family."""

    family: str
    grade: int

    def __bool__(self) -> bool:
        return False


class UnknownFamilyError(KeyError):
    """Raised when a family name is not present in the palette."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = tuple(available)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) or "<none>"
        return f"Unknown color family '{self.name}' (available: {known})"


class ColorFamily:
    """Named set of colors sharing a hue, indexed by grade.

    ``colors`` keeps token order; at most one color per grade.
    """

    def __init__(self, name: Union[str, FamilyName], colors: Iterable[Color] = ()):
        self.name = name if isinstance(name, FamilyName) else FamilyName(name)
        self.colors: Tuple[Color, ...] = tuple(colors)
        self._by_grade: Dict[int, Color] = {}
        for color in self.colors:
            if color.grade in self._by_grade:
                raise ValueError(f"Duplicate grade {color.grade} in color family '{self.name}'")
            self._by_grade[color.grade] = color

    def __repr__(self) -> str:
        return f"ColorFamily(name={self.name.value!r}, grades={self.grades!r})"

    def find_by_grade(self, grade: int) -> Union[Color, GradeMissing]:
        color = self._by_grade.get(grade)
        if color is None:
            return GradeMissing(family=str(self.name), grade=grade)
        return color

    @property
    def grades(self) -> List[int]:
        return sorted(self._by_grade)

    def sorted_colors(self) -> List[Color]:
        return [self._by_grade[g] for g in self.grades]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)


class Palette(Mapping):
    """Read-only mapping of ``FamilyName`` to ``ColorFamily`` (insertion ordered)."""

    def __init__(self, families: Iterable[ColorFamily] = ()):
        self._families: Dict[FamilyName, ColorFamily] = {}
        for fam in families:
            if fam.name in self._families:
                raise ValueError(f"Duplicate color family '{fam.name}'")
            self._families[fam.name] = fam

    def __getitem__(self, key: Union[str, FamilyName]) -> ColorFamily:
        return self.family(key)

    def __iter__(self) -> Iterator[FamilyName]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            try:
                key = FamilyName(key)
            except ValueError:
                return False
        return key in self._families

    def family(self, name: Union[str, FamilyName]) -> ColorFamily:
        try:
            key = name if isinstance(name, FamilyName) else FamilyName(name)
        except ValueError:
            raise UnknownFamilyError(str(name), self.names()) from None
        fam = self._families.get(key)
        if fam is None:
            raise UnknownFamilyError(key.value, self.names())
        return fam

    def find_by_grade(self, name: Union[str, FamilyName], grade: int) -> Union[Color, GradeMissing]:
        return self.family(name).find_by_grade(grade)

    def families(self) -> List[ColorFamily]:
        return list(self._families.values())

    def names(self) -> List[str]:
        return [n.value for n in self._families]

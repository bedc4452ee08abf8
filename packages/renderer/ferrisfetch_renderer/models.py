"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, fields

from rich.cells import cell_len
from rich.color import Color, ColorParseError


@dataclass(frozen=True)
class ThemeConfig:
    name: str
    art_primary: str
    art_secondary: str
    label: str
    value: str
    bar_filled: str
    bar_empty: str

    def __post_init__(self) -> None:
        for role in self.role_names():
            color = getattr(self, role)
            if not color:
                raise ValueError(f"theme {self.name!r} is missing color role {role!r}")
            try:
                Color.parse(color)
            except ColorParseError as exc:
                raise ValueError(f"theme {self.name!r} role {role!r} has invalid color {color!r}") from exc

    @classmethod
    def role_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "name")

    def roles(self) -> dict[str, str]:
        return {role: getattr(self, role) for role in self.role_names()}


@dataclass(frozen=True)
class ArtBlock:
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        widths = {cell_len(line) for line in self.lines}
        if len(widths) > 1:
            raise ValueError(f"art lines must share one width, got {sorted(widths)}")

    @classmethod
    def empty(cls) -> "ArtBlock":
        return cls(lines=())

    @property
    def width(self) -> int:
        return cell_len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)


HEADER = "header"
SEPARATOR = "separator"
FIELD = "field"
BAR = "bar"


@dataclass(frozen=True)
class InfoLine:
    kind: str
    label: str = ""
    value: str = ""
    used: int = 0
    total: int = 0

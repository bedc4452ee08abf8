"""Fetch panel composer: Ferris art on the left, system facts on the right."""

from __future__ import annotations

import logging
from typing import Protocol

from rich.cells import cell_len
from rich.color import ColorSystem
from rich.style import Style

from ferrisfetch_telemetry import SystemInfo

from .art import lookup, validate_catalog
from .layout import BAR_SLOTS, GUTTER, bar_slots, usage_percent, zip_padded
from .models import BAR, FIELD, HEADER, SEPARATOR, ArtBlock, InfoLine, ThemeConfig
from .themes import get_theme, validate_themes

logger = logging.getLogger("ferrisfetch.renderer")

FULL_FIELDS = ("OS", "Kernel", "Uptime", "Shell", "CPU", "Memory")
MINIMAL_FIELDS = ("OS", "Uptime", "Memory")

CPU_NAME_MAX = 35
BAR_FILLED = "█"
BAR_EMPTY = "░"
RULE = "─"


class DisplayOptions(Protocol):
    theme: str
    minimal: bool
    no_color: bool
    no_art: bool


def field_policy(minimal: bool) -> tuple[str, ...]:
    return MINIMAL_FIELDS if minimal else FULL_FIELDS


def info_row_count(minimal: bool) -> int:
    return 2 + len(field_policy(minimal))


def build_info_lines(info: SystemInfo, minimal: bool) -> list[InfoLine]:
    header = f"{info.username}@{info.hostname}"
    values = {
        "OS": info.os_display,
        "Kernel": info.kernel,
        "Uptime": info.uptime,
        "Shell": info.shell,
        "CPU": info.cpu_display(CPU_NAME_MAX),
    }
    lines = [InfoLine(HEADER, value=header), InfoLine(SEPARATOR, value=RULE * cell_len(header))]
    for label in field_policy(minimal):
        if label == "Memory":
            lines.append(
                InfoLine(
                    BAR,
                    label=label,
                    value=f"{info.mem_used_gb} GB / {info.mem_total_gb} GB",
                    used=info.mem_used_bytes,
                    total=info.mem_total_bytes,
                )
            )
        else:
            lines.append(InfoLine(FIELD, label=label, value=values[label]))
    return lines


class _Painter:
    def __init__(self, theme: ThemeConfig, enabled: bool) -> None:
        self.theme = theme
        self.enabled = enabled

    def __call__(self, text: str, color: str, bold: bool = False) -> str:
        if not self.enabled:
            return text
        return Style(color=color, bold=bold).render(text, color_system=ColorSystem.TRUECOLOR)


class FetchRenderer:
    """Merges the art column and the info column into one text block."""

    def __init__(self, gutter: str = GUTTER, slots: int = BAR_SLOTS) -> None:
        self.gutter = gutter
        self.slots = slots

    def render(self, info: SystemInfo, cfg: DisplayOptions, width: int | None = None) -> str:
        theme = get_theme(cfg.theme)
        lines = build_info_lines(info, cfg.minimal)
        art = ArtBlock.empty() if cfg.no_art else lookup(cfg.minimal)

        if width is not None and art.height:
            plain = _Painter(theme, enabled=False)
            needed = art.width + len(self.gutter) + max(cell_len(self._info_cell(line, plain)) for line in lines)
            if needed > width:
                logger.debug("terminal width %d < %d, dropping art column", width, needed)
                art = ArtBlock.empty()

        paint = _Painter(theme, enabled=not cfg.no_color)
        left = [paint(line, theme.art_primary if i % 2 == 0 else theme.art_secondary) for i, line in enumerate(art.lines)]
        right = [self._info_cell(line, paint) for line in lines]

        rows = []
        for art_cell, info_cell in zip_padded(left, right, " " * art.width, ""):
            if not art.height:
                rows.append(info_cell)
            elif not info_cell:
                rows.append(art_cell)
            else:
                rows.append(art_cell + self.gutter + info_cell)
        return "\n".join(rows)

    def _bar(self, used: int, total: int, paint: _Painter) -> str:
        filled = bar_slots(used, total, self.slots)
        theme = paint.theme
        return (
            paint("[", theme.value)
            + paint(BAR_FILLED * filled, theme.bar_filled)
            + paint(BAR_EMPTY * (self.slots - filled), theme.bar_empty)
            + paint("]", theme.value)
            + " "
            + paint(f"{usage_percent(used, total)}%", theme.value)
        )

    def _info_cell(self, line: InfoLine, paint: _Painter) -> str:
        theme = paint.theme
        if line.kind == HEADER:
            return paint(line.value, theme.label, bold=True)
        if line.kind == SEPARATOR:
            return paint(line.value, theme.art_secondary)
        cell = paint(line.label, theme.label, bold=True) + ": " + paint(line.value, theme.value)
        if line.kind == BAR:
            cell += " " + self._bar(line.used, line.total, paint)
        return cell


def render(info: SystemInfo, cfg: DisplayOptions, width: int | None = None) -> str:
    return FetchRenderer().render(info, cfg, width)


def validate_tables() -> None:
    """Startup check of the static theme and art tables against the field policy."""
    validate_themes()
    validate_catalog({minimal: info_row_count(minimal) for minimal in (False, True)})

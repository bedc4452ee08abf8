"""Display settings resolved from the command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass

DEFAULT_THEME = "rust"

logger = logging.getLogger("ferrisfetch.config")


@dataclass(frozen=True)
class DisplayConfig:
    theme: str = DEFAULT_THEME
    minimal: bool = False
    no_color: bool = False
    no_art: bool = False


def _normalize_theme(theme: str | None, known: list[str] | None) -> str:
    name = (theme or "").strip().lower() or DEFAULT_THEME
    if known is not None and name not in known:
        # Kept as given; the theme registry falls back to the default at lookup.
        logger.debug("unknown theme %r, known themes: %s", name, ", ".join(known))
    return name


def resolve_display_config(
    theme: str | None = DEFAULT_THEME,
    minimal: bool = False,
    no_color: bool = False,
    no_art: bool = False,
    known_themes: list[str] | None = None,
) -> DisplayConfig:
    return DisplayConfig(
        theme=_normalize_theme(theme, known_themes),
        minimal=bool(minimal),
        no_color=bool(no_color),
        no_art=bool(no_art),
    )

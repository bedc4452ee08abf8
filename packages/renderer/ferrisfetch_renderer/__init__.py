"""Renderer package for the ferris-fetch text panel."""

from .art import FERRIS_FULL, FERRIS_SMALL, lookup, validate_catalog
from .layout import BAR_SLOTS, GUTTER, bar_slots, usage_percent, zip_padded
from .models import ArtBlock, InfoLine, ThemeConfig
from .panel import FetchRenderer, build_info_lines, info_row_count, render, validate_tables
from .themes import DEFAULT_THEME_NAME, THEMES, get_theme, list_themes, validate_themes

__all__ = [
    "ArtBlock",
    "BAR_SLOTS",
    "DEFAULT_THEME_NAME",
    "FERRIS_FULL",
    "FERRIS_SMALL",
    "FetchRenderer",
    "GUTTER",
    "InfoLine",
    "THEMES",
    "ThemeConfig",
    "bar_slots",
    "build_info_lines",
    "get_theme",
    "info_row_count",
    "list_themes",
    "lookup",
    "render",
    "usage_percent",
    "validate_catalog",
    "validate_tables",
    "validate_themes",
    "zip_padded",
]

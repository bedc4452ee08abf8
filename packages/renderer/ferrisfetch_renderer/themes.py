"""Built-in terminal color themes."""

from __future__ import annotations

from .models import ThemeConfig

DEFAULT_THEME_NAME = "rust"

THEMES: dict[str, ThemeConfig] = {
    "rust": ThemeConfig(
        name="rust",
        art_primary="#FF8000",
        art_secondary="#B7410E",
        label="#FF8000",
        value="white",
        bar_filled="#FFC864",
        bar_empty="#B7410E",
    ),
    "ocean": ThemeConfig(
        name="ocean",
        art_primary="cyan",
        art_secondary="blue",
        label="cyan",
        value="white",
        bar_filled="bright_cyan",
        bar_empty="blue",
    ),
    "forest": ThemeConfig(
        name="forest",
        art_primary="green",
        art_secondary="bright_green",
        label="green",
        value="white",
        bar_filled="yellow",
        bar_empty="bright_green",
    ),
    "sunset": ThemeConfig(
        name="sunset",
        art_primary="red",
        art_secondary="yellow",
        label="red",
        value="white",
        bar_filled="magenta",
        bar_empty="yellow",
    ),
    "mono": ThemeConfig(
        name="mono",
        art_primary="white",
        art_secondary="white",
        label="white",
        value="white",
        bar_filled="white",
        bar_empty="white",
    ),
}


def list_themes() -> list[str]:
    return sorted(THEMES.keys())


def get_theme(name: str | None) -> ThemeConfig:
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name.strip().lower(), THEMES[DEFAULT_THEME_NAME])


def validate_themes(themes: dict[str, ThemeConfig] | None = None) -> None:
    themes = THEMES if themes is None else themes
    if DEFAULT_THEME_NAME not in themes:
        raise RuntimeError(f"default theme {DEFAULT_THEME_NAME!r} is not registered")
    expected = len(ThemeConfig.role_names())
    for key, theme in themes.items():
        if key != theme.name:
            raise RuntimeError(f"theme registered as {key!r} is named {theme.name!r}")
        if len(theme.roles()) != expected:
            raise RuntimeError(f"theme {key!r} defines {len(theme.roles())} roles, expected {expected}")

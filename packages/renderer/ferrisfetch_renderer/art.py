"""Ferris the crab, in full and minimal sizes."""

from __future__ import annotations

from .models import ArtBlock

FERRIS_FULL = ArtBlock(
    lines=(
        r"        _~^~^~_        ",
        r"    \) /  o o  \ (/    ",
        r"      '_   -   _'      ",
        r"      / '-----' \      ",
        r"     /           \     ",
        r"    /  /       \  \    ",
        r"   (  |         |  )   ",
        r"    \_|         |_/    ",
    )
)

FERRIS_SMALL = ArtBlock(
    lines=(
        r"   _~^~_   ",
        r" \)/o o\(/ ",
        r"  '- ^ -'  ",
        r"  /|   |\  ",
        r"   '   '   ",
    )
)


def lookup(minimal: bool) -> ArtBlock:
    return FERRIS_SMALL if minimal else FERRIS_FULL


def validate_catalog(info_rows: dict[bool, int]) -> None:
    """Check each art block is tall enough for the info rows of its mode.

    ``info_rows`` maps the ``minimal`` flag to the number of info rows that
    mode renders.
    """
    for minimal, rows in info_rows.items():
        art = lookup(minimal)
        if art.height < rows:
            mode = "minimal" if minimal else "full"
            raise RuntimeError(f"{mode} art has {art.height} lines but {rows} info rows must sit beside it")

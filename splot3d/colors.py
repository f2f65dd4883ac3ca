"""Standard color table for scene primitives."""

from __future__ import annotations

from typing import Tuple

DEFAULT_COLOR = "black"

STANDARD_COLORS: Tuple[str, ...] = (
    "#808080",
    "#000000",
    "#C20A0A",
    "#C2780A",
    "#9DC20A",
    "#2FC20A",
    "#0AC253",
    "#0AC2C2",
    "#0A53C2",
    "#2F0AC2",
    "#9D0AC2",
    "#C20A78",
)


def std_color(index: int, table: Tuple[str, ...] = STANDARD_COLORS) -> str:
    """Return the color at ``index``, wrapping around the table in both directions."""

    return table[index % len(table)]

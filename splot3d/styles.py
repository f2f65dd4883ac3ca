"""Drawing styles and their canonical, comparable keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

from .colors import DEFAULT_COLOR

FILLED_HEAD = "filled head"
NO_HEAD = "nohead"

MIN_WIDTH = 1
MAX_WIDTH = 99
# Widths above MAX_WIDTH collapse to this value, which later resolves to the default.
UNSET_WIDTH = 0

DEFAULT_POINT_WIDTH = 3
DEFAULT_SEGMENT_WIDTH = 1
DEFAULT_LINE_ATTR = NO_HEAD
DEFAULT_POINT_ATTR = ""


class PrimitiveKind(enum.IntEnum):
    """Primitive kinds, ordered so segment groups sort before point groups."""

    SEGMENT = 0
    POINT = 1


@dataclass
class Style:
    color: str = ""
    width: int = UNSET_WIDTH
    line_attr: str = ""
    point_attr: str = ""
    kind: PrimitiveKind = PrimitiveKind.SEGMENT

    @property
    def is_point(self) -> bool:
        return self.kind is PrimitiveKind.POINT


class StyleKey(NamedTuple):
    """Resolved style; tuple order is the drawing order of style groups."""

    kind: PrimitiveKind
    width: int
    color: str
    attr: str

    @property
    def is_point(self) -> bool:
        return self.kind is PrimitiveKind.POINT


def clamp_width(width: int) -> int:
    """Clamp a requested width: below 1 becomes 1, above 99 wraps to 0."""

    width = int(width)
    if width < MIN_WIDTH:
        return MIN_WIDTH
    if width > MAX_WIDTH:
        return UNSET_WIDTH
    return width


def canonicalize(style: Style) -> StyleKey:
    """Resolve defaults in ``style`` and return its grouping key.

    Points use ``point_attr`` and segments use ``line_attr``; the other field
    is ignored, so it never splits a group. A width of 0 means unset and
    resolves to the kind default; negative widths clamp to 1 and widths above
    99 wrap to 0 (unset).
    """

    color = style.color or DEFAULT_COLOR
    width = style.width
    if width < UNSET_WIDTH:
        width = MIN_WIDTH
    elif width > MAX_WIDTH:
        width = UNSET_WIDTH
    if style.is_point:
        if width <= UNSET_WIDTH:
            width = DEFAULT_POINT_WIDTH
        attr = style.point_attr or DEFAULT_POINT_ATTR
    else:
        if width <= UNSET_WIDTH:
            width = DEFAULT_SEGMENT_WIDTH
        attr = style.line_attr or DEFAULT_LINE_ATTR
    return StyleKey(style.kind, width, color, attr)

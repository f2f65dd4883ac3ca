"""In-memory scene builder with cursor semantics.

A :class:`Scene` records points and segments in drawing order. Style and
label setters act on the primitive under the cursor:

* ``EMPTY`` - nothing drawn yet; the cursor is a scratch primitive whose
  style is inherited by the first drawn primitive.
* ``COMMITTED`` - the cursor is the last drawn primitive; setters modify it.
* ``EDITING`` - after :meth:`Scene.break_path` or :meth:`Scene.move_to` the
  cursor is a detached scratch copy, so setters no longer touch anything
  already drawn.

Every new primitive copies the style of the cursor primitive, so a chain of
``line_to`` calls keeps the last color and width until they are changed.
"""

from __future__ import annotations

import copy
import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .colors import std_color
from .styles import FILLED_HEAD, NO_HEAD, PrimitiveKind, Style, clamp_width
from .vectors import ORIGIN, Vec3, add, arc_points, as_vec3, sub

logger = logging.getLogger(__name__)

ARC_STEPS_PER_CIRCLE = 60


class CursorState(enum.Enum):
    EMPTY = "empty"
    COMMITTED = "committed"
    EDITING = "editing"


@dataclass
class Primitive:
    """A point (``start == end``) or a segment from ``start`` to ``end``."""

    start: Vec3 = ORIGIN
    end: Vec3 = ORIGIN
    label: str = ""
    style: Style = field(default_factory=Style)

    @property
    def kind(self) -> PrimitiveKind:
        return self.style.kind

    @property
    def is_point(self) -> bool:
        return self.style.is_point

    @property
    def position(self) -> Vec3:
        """Trailing position: the point itself, or the segment end."""
        return self.start if self.is_point else self.end

    def direction(self) -> Vec3:
        if self.is_point:
            return ORIGIN
        return sub(self.end, self.start)


class Scene:
    def __init__(self, title: str = "") -> None:
        self._title = title
        self._primitives: List[Primitive] = []
        self._scratch = Primitive()
        self._detached = False

    def __len__(self) -> int:
        return len(self._primitives)

    def __repr__(self) -> str:
        return f"Scene(title={self._title!r}, primitives={len(self._primitives)}, state={self.state.value})"

    @property
    def title(self) -> str:
        return self._title

    @property
    def primitives(self) -> Tuple[Primitive, ...]:
        return tuple(self._primitives)

    @property
    def state(self) -> CursorState:
        if not self._primitives:
            return CursorState.EMPTY
        if self._detached:
            return CursorState.EDITING
        return CursorState.COMMITTED

    # ------------------------------------------------------------------
    # Cursor transitions
    # ------------------------------------------------------------------

    def cursor(self) -> Primitive:
        """Return the primitive that setters currently modify."""

        if self.state is CursorState.COMMITTED:
            return self._primitives[-1]
        return self._scratch

    def _detach(self) -> Primitive:
        if self.state is CursorState.COMMITTED:
            self._scratch = copy.deepcopy(self._primitives[-1])
            self._detached = True
        return self._scratch

    def _commit(self, start: Iterable[float], end: Iterable[float], kind: PrimitiveKind) -> Primitive:
        base = self.cursor()
        style = copy.copy(base.style)
        style.kind = kind
        primitive = Primitive(as_vec3(start), as_vec3(end), "", style)
        self._primitives.append(primitive)
        self._detached = False
        return primitive

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> "Scene":
        self._title = title
        return self

    def point(self, position: Iterable[float]) -> "Scene":
        pos = as_vec3(position)
        self._commit(pos, pos, PrimitiveKind.POINT)
        return self

    def line(self, start: Iterable[float], end: Iterable[float]) -> "Scene":
        self._commit(start, end, PrimitiveKind.SEGMENT)
        return self

    def vector(self, origin: Iterable[float], direction: Iterable[float]) -> "Scene":
        origin = as_vec3(origin)
        return self.line(origin, add(origin, as_vec3(direction)))

    line_dir = vector

    def line_to(self, position: Iterable[float]) -> "Scene":
        return self.line(self.current_position(), position)

    def move_to(self, position: Iterable[float]) -> "Scene":
        """Reposition the pen without drawing."""

        pos = as_vec3(position)
        target = self._detach()
        if target.is_point:
            target.start = target.end = pos
        else:
            target.end = pos
        return self

    def break_path(self) -> "Scene":
        """Detach the cursor so later setters leave drawn primitives alone."""

        self._detach()
        return self

    def current_position(self) -> Vec3:
        return self.cursor().position

    def arc(
        self,
        center: Iterable[float],
        normal: Iterable[float],
        radius: float,
        angle0: float,
        angle1: float,
        *,
        color: Optional[str] = None,
        steps_per_circle: int = ARC_STEPS_PER_CIRCLE,
    ) -> "Scene":
        """Approximate an arc around ``center`` in the plane orthogonal to ``normal``."""

        for name, value in (("radius", radius), ("angle0", angle0), ("angle1", angle1)):
            if not math.isfinite(value):
                raise ValueError(f"arc {name} must be finite, got {value!r}")
        samples = arc_points(as_vec3(center), as_vec3(normal), radius, angle0, angle1, steps_per_circle)
        if not samples:
            return self
        self.move_to(samples[0])
        if color is not None:
            self.set_color(color)
        for sample in samples[1:]:
            self.line_to(sample)
        logger.debug("Arc sampled into %d segment(s)", len(samples) - 1)
        return self

    def circle(
        self,
        center: Iterable[float],
        normal: Iterable[float],
        radius: float,
        *,
        color: Optional[str] = None,
        steps_per_circle: int = ARC_STEPS_PER_CIRCLE,
    ) -> "Scene":
        return self.arc(center, normal, radius, 0.0, 2.0 * math.pi, color=color, steps_per_circle=steps_per_circle)

    # ------------------------------------------------------------------
    # Style and label
    # ------------------------------------------------------------------

    def set_color(self, color: str) -> "Scene":
        self.cursor().style.color = color
        return self

    def set_std_color(self, index: int) -> "Scene":
        return self.set_color(std_color(index))

    def set_width(self, width: int) -> "Scene":
        self.cursor().style.width = clamp_width(width)
        return self

    def set_head(self, attr: str) -> "Scene":
        self.cursor().style.line_attr = attr
        return self

    def filled_head(self) -> "Scene":
        return self.set_head(FILLED_HEAD)

    def no_head(self) -> "Scene":
        return self.set_head(NO_HEAD)

    def set_attr(self, attr: str) -> "Scene":
        style = self.cursor().style
        if style.is_point:
            style.point_attr = attr
        else:
            style.line_attr = attr
        return self

    def set_label(self, text: object, *args: object) -> "Scene":
        """Label the cursor primitive; ``args`` are %-formatted into ``text``."""

        self.cursor().label = str(text) % args if args else str(text)
        return self

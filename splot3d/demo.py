"""Quaternion rotation visualization built with :class:`~splot3d.scene.Scene`."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .colors import std_color
from .scene import Scene
from .vectors import ORIGIN, Vec3, normalize

logger = logging.getLogger(__name__)

Quaternion = Tuple[float, float, float, float]

DEFAULT_QUATERNION: Quaternion = (1.0, 2.0, 3.0, 0.3)
TRAJECTORY_STEP = 0.1
AXIS_EXTENT = 1.2


def normalize_quaternion(q: Sequence[float]) -> Quaternion:
    arr = np.asarray(q, dtype=float)
    norm = float(np.linalg.norm(arr))
    if norm == 0.0:
        raise ValueError("cannot normalize a zero quaternion")
    arr = arr / norm
    return float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3])


def quaternion_from_axis_angle(axis: Sequence[float], angle: float) -> Quaternion:
    """Unit quaternion ``(x, y, z, w)`` rotating by ``angle`` radians about ``axis``."""

    a = np.asarray(normalize(axis))
    s = math.sin(angle * 0.5)
    return float(a[0] * s), float(a[1] * s), float(a[2] * s), math.cos(angle * 0.5)


def rotate(q: Sequence[float], v: Sequence[float]) -> Vec3:
    """Rotate ``v`` by the unit quaternion ``q``."""

    u = np.asarray(q[:3], dtype=float)
    vec = np.asarray(v, dtype=float)
    t = 2.0 * np.cross(u, vec)
    out = vec + q[3] * t + np.cross(u, t)
    return float(out[0]), float(out[1]), float(out[2])


def build_quaternion_scene(
    quaternion: Sequence[float] = DEFAULT_QUATERNION,
    *,
    initial: Sequence[float] = (1.0, 0.0, 0.0),
    title: Optional[str] = None,
) -> Scene:
    q = normalize_quaternion(quaternion)
    v0 = normalize(initial)
    scene = Scene()
    scene.set_title(title or "Quaternion %fi + %fj + %fk + %f" % q)
    scene.set_width(1)

    e = AXIS_EXTENT
    scene.line((-e, 0, 0), (e, 0, 0)).set_color("#FF80C0").filled_head()
    scene.line((0, -e, 0), (0, e, 0)).set_color("#C0FF80").filled_head()
    scene.line((0, 0, -e), (0, 0, e)).set_color("#80C0FF").filled_head()
    for normal in ((1, 0, 0), (0, 1, 0), (0, 0, 1)):
        scene.circle(ORIGIN, normal, 1.0, color=std_color(0))

    axis = normalize(q[:3])
    scene.line(ORIGIN, axis).set_color("purple").set_label("axis").no_head().set_width(2)
    scene.line(ORIGIN, v0).set_color("black").set_label("v0").filled_head().set_width(2)
    v1 = rotate(q, v0)
    scene.line(ORIGIN, v1).set_color("black").set_label("v1").filled_head().set_width(2)

    max_angle = 2.0 * math.acos(max(-1.0, min(1.0, q[3])))
    steps = max(int(max_angle / TRAJECTORY_STEP), 1)
    delta = max_angle / steps
    for i in range(steps + 1):
        v = rotate(quaternion_from_axis_angle(q[:3], delta * i), v0)
        if i == 0:
            scene.move_to(v).set_color("red").no_head()
        else:
            scene.line_to(v)

    logger.info("Built quaternion scene with %d primitive(s)", len(scene))
    return scene

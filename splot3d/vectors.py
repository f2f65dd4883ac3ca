from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]

_TINY = float(np.finfo(np.float32).tiny)
ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def as_vec3(value: Iterable[float]) -> Vec3:
    arr = np.asarray(tuple(value), dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected three coordinates, got {arr.shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])


def _tuple(arr: np.ndarray) -> Vec3:
    return float(arr[0]), float(arr[1]), float(arr[2])


def add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return _tuple(np.add(a, b, dtype=float))


def sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return _tuple(np.subtract(a, b, dtype=float))


def scale(v: Sequence[float], factor: float) -> Vec3:
    return _tuple(np.multiply(v, factor, dtype=float))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    return float(np.dot(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return _tuple(np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))


def length(v: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(v, dtype=float)))


def normalize(v: Sequence[float]) -> Vec3:
    """Return ``v`` scaled to unit length; degenerate vectors map to the x axis."""

    arr = np.asarray(v, dtype=float)
    sq = float(np.dot(arr, arr))
    if sq <= _TINY * _TINY:
        return (1.0, 0.0, 0.0)
    return _tuple(arr / math.sqrt(sq))


def lerp(a: Sequence[float], b: Sequence[float], t: float) -> Vec3:
    a_arr = np.asarray(a, dtype=float)
    return _tuple(a_arr + (np.asarray(b, dtype=float) - a_arr) * t)


def orthonormal_basis(normal: Sequence[float]) -> Tuple[Vec3, Vec3, Vec3]:
    """Return ``(tangent, bitangent, normal)`` spanning the plane orthogonal to ``normal``."""

    n = normalize(normal)
    tangent: Vec3 = (1.0, 0.0, 0.0)
    if abs(dot(n, tangent)) < 0.9:
        bitangent = normalize(cross(n, tangent))
        tangent = normalize(cross(bitangent, n))
    else:
        bitangent = (0.0, 1.0, 0.0)
        tangent = normalize(cross(bitangent, n))
        bitangent = normalize(cross(n, tangent))
    return tangent, bitangent, n


def arc_step_count(angle0: float, angle1: float, steps_per_circle: int) -> int:
    if steps_per_circle < 1:
        raise ValueError(f"steps_per_circle must be at least 1, got {steps_per_circle!r}")
    step = 2.0 * math.pi / steps_per_circle
    count = abs(int((angle1 - angle0) / step))
    return max(count, 1)


def arc_points(
    center: Sequence[float],
    normal: Sequence[float],
    radius: float,
    angle0: float,
    angle1: float,
    steps_per_circle: int = 60,
) -> List[Vec3]:
    """Sample an arc from ``angle0`` to ``angle1`` (radians), both ends included.

    Angles are measured in the plane orthogonal to ``normal`` starting at the
    tangent returned by :func:`orthonormal_basis`. The direction of travel
    follows the sign of ``angle1 - angle0``.
    """

    count = arc_step_count(angle0, angle1, steps_per_circle)
    if angle0 == angle1:
        return []
    tangent, bitangent, _ = orthonormal_basis(normal)
    angles = angle0 + (angle1 - angle0) * np.arange(count + 1) / count
    basis = np.array([tangent, bitangent])
    offsets = radius * np.column_stack((np.cos(angles), np.sin(angles))) @ basis
    samples = np.asarray(center, dtype=float) + offsets
    return [_tuple(row) for row in samples]

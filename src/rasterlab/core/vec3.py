"""Vector arithmetic over 3-component vectors.

This module provides the small amount of linear algebra the scene needs:
- Componentwise sum, difference, scaling and division
- Dot and cross products, length, normalization
- Angle between two vectors
- 4x4 affine translation matrices

Vectors are plain (x, y, z) tuples; any Point is accepted wherever a
vector is expected. All functions are pure and stateless.
"""

import math

from rasterlab.domain import Point
from rasterlab.exceptions import DivisionByZeroError, ZeroVectorError

Vec3 = tuple[float, float, float]
Mat4 = list[list[float]]


def _components(v: Vec3 | Point) -> Vec3:
    if isinstance(v, Point):
        return v.to_tuple()
    x, y, z = v
    return (float(x), float(y), float(z))


def vec_sum(a: Vec3 | Point, b: Vec3 | Point) -> Vec3:
    """Componentwise a + b."""
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return (ax + bx, ay + by, az + bz)


def vec_sub(a: Vec3 | Point, b: Vec3 | Point) -> Vec3:
    """Componentwise a - b."""
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return (ax - bx, ay - by, az - bz)


def scale(a: Vec3 | Point, k: float) -> Vec3:
    """Multiply every component by k."""
    x, y, z = _components(a)
    return (x * k, y * k, z * k)


def divide(a: Vec3 | Point, k: float) -> Vec3:
    """Divide every component by k.

    Raises:
        DivisionByZeroError: If k is zero
    """
    if k == 0:
        raise DivisionByZeroError(_components(a))
    x, y, z = _components(a)
    return (x / k, y / k, z / k)


def dot(a: Vec3 | Point, b: Vec3 | Point) -> float:
    """Dot product of a and b."""
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return ax * bx + ay * by + az * bz


def cross(a: Vec3 | Point, b: Vec3 | Point) -> Vec3:
    """Right-handed cross product a x b.

    Examples:
        >>> cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        (0.0, 0.0, 1.0)
    """
    ax, ay, az = _components(a)
    bx, by, bz = _components(b)
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )


def length(a: Vec3 | Point) -> float:
    """Euclidean length of a."""
    return math.sqrt(dot(a, a))


def normalize(a: Vec3 | Point) -> Vec3:
    """Scale a to unit length.

    Raises:
        ZeroVectorError: If a has zero length
    """
    norm = length(a)
    if norm == 0:
        raise ZeroVectorError("normalize")
    return divide(a, norm)


def angle_between(a: Vec3 | Point, b: Vec3 | Point) -> float:
    """Angle between a and b in radians, within [0, pi].

    The cosine is clamped to [-1, 1] before acos so parallel vectors do not
    fall outside the domain through rounding.

    Raises:
        ZeroVectorError: If either vector has zero length
    """
    len_a = length(a)
    len_b = length(b)
    if len_a == 0 or len_b == 0:
        raise ZeroVectorError("measure an angle against")
    cos_theta = dot(a, b) / (len_a * len_b)
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def identity() -> Mat4:
    """4x4 identity matrix, row-major."""
    return [[1.0 if row == col else 0.0 for col in range(4)] for row in range(4)]


def translate(t: Vec3 | Point) -> Mat4:
    """4x4 affine translation matrix, row-major.

    The matrix is the identity with its fourth column set to (tx, ty, tz, 1),
    so ``m[i][3]`` holds the i-th translation component.

    Examples:
        >>> translate((1.0, 2.0, 3.0))[1][3]
        2.0
    """
    tx, ty, tz = _components(t)
    matrix = identity()
    matrix[0][3] = tx
    matrix[1][3] = ty
    matrix[2][3] = tz
    return matrix

# swerve_drive/swerve_drive/geometry.py
"""
Planar vector primitives used by the swerve drive kinematics.

Provides the immutable `Point2D` value type and the small set of vector
operations the transform needs: addition, subtraction, magnitude, rotation
and direction angle.

Two arctangent conventions are exposed on purpose:

- `full_angle` uses the four-quadrant `atan2(y, x)`.
- `quadrant_angle` uses the single-argument `atan(y / x)`, which cannot tell
  (x, y) from (-x, -y) and so is off by pi whenever x < 0.

`vector_angle` is the one place the rotation branch of the controller asks
for "the angle of this vector". It currently returns `quadrant_angle` to keep
the established steering output; switching it to `full_angle` is the
intended one-line fix once the steering sign convention is settled.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    """
    A point (or free vector) in the body frame.

    Attributes:
        x: Lateral component, positive to the right.
        y: Longitudinal component, positive forward.
    """
    x: float
    y: float

    def __add__(self, other: "Point2D") -> "Point2D":
        return add(self, other)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return subtract(self, other)


ORIGIN = Point2D(0.0, 0.0)


def add(a: Point2D, b: Point2D) -> Point2D:
    """Componentwise sum of two vectors."""
    return Point2D(a.x + b.x, a.y + b.y)


def subtract(a: Point2D, b: Point2D) -> Point2D:
    """Componentwise difference `a - b`, i.e. the vector pointing from b to a."""
    return Point2D(a.x - b.x, a.y - b.y)


def magnitude(v: Point2D) -> float:
    """Euclidean length of `v`. Always >= 0; 0.0 for the zero vector."""
    return math.sqrt(v.x * v.x + v.y * v.y)


def scale(v: Point2D, factor: float) -> Point2D:
    """Multiplies both components of `v` by `factor`."""
    return Point2D(v.x * factor, v.y * factor)


def rotate(v: Point2D, theta: float) -> Point2D:
    """
    Rotates a vector by `theta` radians (counter-clockwise positive).

    Args:
        v: Vector to rotate.
        theta: Rotation angle in radians.

    Returns:
        A new Point2D, `R(theta) @ v`.
    """
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return Point2D(v.x * cos_t - v.y * sin_t, v.x * sin_t + v.y * cos_t)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Float division with IEEE-754 results instead of ZeroDivisionError.

    A zero denominator yields a signed infinity, or NaN for 0/0 (and NaN/0).
    The sign of a zero denominator is honoured, so 1.0 / -0.0 is -inf.
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def full_angle(v: Point2D) -> float:
    """Four-quadrant direction of `v` in radians, in [-pi, pi]."""
    return math.atan2(v.y, v.x)


def quadrant_angle(v: Point2D) -> float:
    """
    Single-quadrant direction of `v`: `atan(y / x)`, in [-pi/2, pi/2].

    Loses the sign of x: vectors pointing into the left half-plane come back
    rotated by pi. A zero x gives +/-pi/2, and the zero vector gives NaN.
    """
    return math.atan(ieee_divide(v.y, v.x))


def vector_angle(v: Point2D) -> float:
    """Steering direction of a module velocity vector."""
    return quadrant_angle(v)


# Name used throughout the kinematics docs for the steering-angle helper.
direction = vector_angle

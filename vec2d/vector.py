from __future__ import annotations

import logging
import math


__all__ = [
    "Vector2D",
    "add",
    "subtract",
    "dot",
    "scale",
    "divide",
    "rotated_ccw",
    "rotated_cw",
    "negated",
    "normalized",
    "to_string",
    "angle_between",
]

_logger = logging.getLogger(__name__)


class Vector2D:
    """2D euclidean vector with float components.

    Mutators (``add``, ``scale``, ``rotate_ccw``, ``normalize``, ... and the
    compound assignment operators) change the vector in place and return it.
    Binary operators and the module-level functions return new vectors.

    There is no ``__eq__``: compare components with a tolerance
    that suits the caller.
    """
    __slots__ = ("x", "y")

    def __init__(self, x: float = 0, y: float = 0):
        self.x = float(x)
        self.y = float(y)

    @staticmethod
    def from_polar(angle: float, magnitude: float = 1) -> Vector2D:
        """Build a vector from polar coordinates. The angle is in radians."""
        return Vector2D(magnitude * math.cos(angle), magnitude * math.sin(angle))

    def angle(self) -> float:
        """Return the angle in radians, in [-pi, pi]. The zero vector has angle 0."""
        if self.x == 0 and self.y == 0:
            # atan2 of signed zeros would give +-pi
            _logger.debug("Angle of zero vector requested, returning 0.")
            return 0.0

        return math.atan2(self.y, self.x)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def add(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def scale(self, factor: float) -> Vector2D:
        if isinstance(factor, Vector2D):
            raise TypeError("Cannot scale a vector by another vector, use dot() for the scalar product.")

        self.x *= factor
        self.y *= factor
        return self

    def divide(self, divisor: float) -> Vector2D:
        """Divide in place by multiplying with 1 / divisor.

        The divisor must not be zero.
        """
        assert divisor != 0, "Cannot divide a vector by zero."
        return self.scale(1 / divisor)

    def rotate_ccw(self, angle: float) -> Vector2D:
        """Rotate counter-clockwise by angle (radians), in place."""
        cos = math.cos(angle)
        sin = math.sin(angle)

        new_x = self.x * cos - self.y * sin
        new_y = self.x * sin + self.y * cos

        self.x = new_x
        self.y = new_y
        return self

    def rotate_cw(self, angle: float) -> Vector2D:
        """Rotate clockwise by angle (radians), in place."""
        return self.rotate_ccw(-angle)

    def normalize(self) -> Vector2D:
        """Scale to unit length, in place. Must not be called on the zero vector."""
        magnitude = self.magnitude()
        assert magnitude != 0, "Cannot normalize the zero vector."

        # true division: the reciprocal of a subnormal magnitude overflows to inf
        self.x /= magnitude
        self.y /= magnitude
        return self

    def negated(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def copy(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def __iter__(self):
        return iter((self.x, self.y))

    def __getitem__(self, i: int):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y

        raise IndexError

    def __iadd__(self, other: Vector2D):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: Vector2D):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.subtract(other)

    def __imul__(self, factor: float):
        if isinstance(factor, Vector2D):
            return NotImplemented
        return self.scale(factor)

    def __itruediv__(self, divisor: float):
        if isinstance(divisor, Vector2D):
            return NotImplemented
        return self.divide(divisor)

    def __ilshift__(self, angle: float):
        if isinstance(angle, Vector2D):
            return NotImplemented
        return self.rotate_ccw(angle)

    def __irshift__(self, angle: float):
        if isinstance(angle, Vector2D):
            return NotImplemented
        return self.rotate_cw(angle)

    def __add__(self, other: Vector2D):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Vector2D):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return subtract(self, other)

    def __matmul__(self, other: Vector2D):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return dot(self, other)

    def __mul__(self, factor: float):
        if isinstance(factor, Vector2D):
            return NotImplemented
        return scale(self, factor)

    def __rmul__(self, factor: float):
        if isinstance(factor, Vector2D):
            return NotImplemented
        return scale(factor, self)

    def __truediv__(self, divisor: float):
        if isinstance(divisor, Vector2D):
            return NotImplemented
        return divide(self, divisor)

    def __lshift__(self, angle: float):
        if isinstance(angle, Vector2D):
            return NotImplemented
        return rotated_ccw(self, angle)

    def __rshift__(self, angle: float):
        if isinstance(angle, Vector2D):
            return NotImplemented
        return rotated_cw(self, angle)

    def __neg__(self):
        return self.negated()

    def __str__(self):
        return to_string(self)

    def __repr__(self):
        return f"Vector2D({self.x!r}, {self.y!r})"


def add(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return v1.copy().add(v2)


def subtract(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return v1.copy().subtract(v2)


def dot(v1: Vector2D, v2: Vector2D) -> float:
    return v1.x * v2.x + v1.y * v2.y


def scale(v: Vector2D | float, a: Vector2D | float) -> Vector2D:
    """Scalar multiplication. Accepts ``scale(v, a)`` as well as ``scale(a, v)``."""
    if isinstance(v, Vector2D):
        return v.copy().scale(a)
    elif isinstance(a, Vector2D):
        return a.copy().scale(v)

    raise TypeError(f"Expected a Vector2D operand, got {type(v).__name__} and {type(a).__name__}.")


def divide(v: Vector2D, a: float) -> Vector2D:
    return v.copy().divide(a)


def rotated_ccw(v: Vector2D, angle: float) -> Vector2D:
    return v.copy().rotate_ccw(angle)


def rotated_cw(v: Vector2D, angle: float) -> Vector2D:
    return v.copy().rotate_cw(angle)


def negated(v: Vector2D) -> Vector2D:
    return v.negated()


def normalized(v: Vector2D) -> Vector2D:
    return v.copy().normalize()


def _format_component(value: float) -> str:
    # general format, 6 significant digits: 1.0 renders as "1"
    return format(value, "g")


def to_string(v: Vector2D) -> str:
    """Render v as ``(x,y)``."""
    return f"({_format_component(v.x)},{_format_component(v.y)})"


def angle_between(v1: Vector2D, v2: Vector2D, *, legacy_grouping: bool = False) -> float:
    """Return the unsigned angle between v1 and v2 in radians, in [0, pi].

    If either vector has zero length, 0 is returned.

    With ``legacy_grouping`` the cosine is evaluated as ``(dot / m1) * m2``
    instead of as the dot product of the two unit vectors. That grouping only
    agrees with the geometric angle when both vectors have unit length. When
    it leaves the domain of acos the result is nan.
    """
    magnitude_1 = v1.magnitude()
    magnitude_2 = v2.magnitude()

    if magnitude_1 == 0 or magnitude_2 == 0:
        _logger.debug(f"Angle between {v1!r} and {v2!r} involves a zero vector, returning 0.")
        return 0.0

    if legacy_grouping:
        cosine = dot(v1, v2) / magnitude_1 * magnitude_2

        if not -1 <= cosine <= 1:
            _logger.warning(f"Legacy angle between {v1!r} and {v2!r} is undefined "
                            f"(cosine {cosine!r} outside [-1, 1]).")
            return math.nan

        return math.acos(cosine)

    # dot of the unit vectors, the plain product of magnitudes under- or overflows
    cosine = dot(normalized(v1), normalized(v2))

    return math.acos(min(1.0, max(-1.0, cosine)))

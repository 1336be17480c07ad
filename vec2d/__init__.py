from __future__ import annotations

from .vector import (
    Vector2D,
    add,
    subtract,
    dot,
    scale,
    divide,
    rotated_ccw,
    rotated_cw,
    negated,
    normalized,
    to_string,
    angle_between,
)
from .config import Config

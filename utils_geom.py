# utils_geom.py

import math
from typing import Tuple


def to_normalized(px: float, py: float, width: float, height: float) -> Tuple[float, float]:
    # Pixel -> fraction of canvas width/height
    return (1.0 * px / width, 1.0 * py / height)


def to_pixels(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    return (x * width, y * height)


def aspect_factors(width: float, height: float) -> Tuple[float, float]:
    """
    Factors that turn the radius (defined on the shorter side) into per-axis
    normalized radii, so the hit region is a circle on screen.
    """
    m = min(width, height)
    return (m / width, m / height)


def radius_px(radius: float, width: float, height: float) -> float:
    return radius * min(width, height)


def in_ellipse(px: float, py: float, cx: float, cy: float,
               aspect_x: float, aspect_y: float, radius: float) -> bool:
    dx = (px - cx) / aspect_x
    dy = (py - cy) / aspect_y
    return dx * dx + dy * dy <= radius * radius


def is_finite_point(x: float, y: float) -> bool:
    return math.isfinite(x) and math.isfinite(y)


def inside_open_interval(v: float, upper: float) -> bool:
    # Strictly inside (0, upper); used when dragging near the canvas border
    return 0 < v < upper

"""Jittered regular polygons used as blob skeletons."""

import math
import random
from typing import List, Optional, Tuple

Point = Tuple[float, float]

CANVAS_CENTER: Point = (150.0, 150.0)
DEFAULT_RADIUS = 60.0

# -------------------------
# Variation scales (all vanish at smoothness = 1)
# -------------------------

RADIUS_VARIATION = 0.8
RADIUS_SPREAD = 2.2
ANGLE_VARIATION = 0.8


def generate_blob_points(
    edges: int,
    smoothness: float,
    radius: float = DEFAULT_RADIUS,
    center: Point = CANVAS_CENTER,
    rng: Optional[random.Random] = None,
) -> List[Point]:
    """
    Ring of `edges` points around center, in increasing angle order.

    Each vertex blends a point on the ideal circle with a randomized one:
    smoothness 1 => regular polygon, 0 => fully jittered.
    Values outside [0, 1] extrapolate instead of failing.
    """
    if edges <= 0:
        return []

    rng = rng or random.Random()
    cx, cy = center

    angle_step = (2 * math.pi) / edges
    start_angle = rng.random() * 2 * math.pi

    roughness = 1 - smoothness
    radius_variation = RADIUS_VARIATION * roughness
    angle_variation = angle_step * ANGLE_VARIATION * roughness

    pts: List[Point] = []
    for i in range(edges):
        a = start_angle + i * angle_step

        radius_factor = 1 + (rng.random() - 0.5) * radius_variation * RADIUS_SPREAD
        random_r = radius * radius_factor * (1 + (rng.random() - 0.5) * roughness)
        random_a = a + (rng.random() - 0.5) * angle_variation

        perfect_x = cx + math.cos(a) * radius
        perfect_y = cy + math.sin(a) * radius
        random_x = cx + math.cos(random_a) * random_r
        random_y = cy + math.sin(random_a) * random_r

        pts.append(
            (
                perfect_x * smoothness + random_x * roughness,
                perfect_y * smoothness + random_y * roughness,
            )
        )
    return pts


def add_noise_to_points(
    points: List[Point], noise_amount: float, rng: Optional[random.Random] = None
) -> List[Point]:
    """Jitter every point by up to noise_amount / 2 on each axis."""
    rng = rng or random.Random()
    return [
        (
            x + (rng.random() - 0.5) * noise_amount,
            y + (rng.random() - 0.5) * noise_amount,
        )
        for x, y in points
    ]


def stretch_points(
    points: List[Point],
    scale_x: float = 1.0,
    scale_y: float = 1.0,
    center: Point = CANVAS_CENTER,
) -> List[Point]:
    cx, cy = center
    return [(cx + (x - cx) * scale_x, cy + (y - cy) * scale_y) for x, y in points]

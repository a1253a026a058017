"""Closed point rings -> smooth cubic Bezier outlines."""

from typing import List, Optional, Tuple

from shapely.geometry import Polygon

from blob_canvas.core.polygon import Point

Segment = Tuple[Point, Point, Point, Point]

# Higher => flatter segments, lower => rounder bulges
TENSION = 0.2

# -------------------------
# Catmull-Rom style tangents -> cubic Bezier segments
# -------------------------


def bezier_segments(points: List[Point], tension: float = TENSION) -> List[Segment]:
    """
    Returns one cubic segment (P1, C1, C2, P2) per ring edge, cyclically.

    C1 = P1 + (P2 - P0) * tension
    C2 = P2 - (P3 - P1) * tension

    Both handles at a vertex are parallel to (next - prev), so the curve is
    tangent-continuous at every vertex including the wrap-around seam.
    """
    n = len(points)
    if n < 3:
        return []

    segs: List[Segment] = []
    for i in range(n):
        p0 = points[(i - 1) % n]
        p1 = points[i]
        p2 = points[(i + 1) % n]
        p3 = points[(i + 2) % n]

        c1 = (p1[0] + (p2[0] - p0[0]) * tension, p1[1] + (p2[1] - p0[1]) * tension)
        c2 = (p2[0] - (p3[0] - p1[0]) * tension, p2[1] - (p3[1] - p1[1]) * tension)

        segs.append((p1, c1, c2, p2))
    return segs


def format_number(value: float, precision: Optional[int] = None) -> str:
    """Shortest round-trip text; integral values without a fraction."""
    if precision is not None:
        value = round(value, precision)
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def points_to_path(
    points: List[Point], tension: float = TENSION, precision: Optional[int] = None
) -> str:
    """
    SVG path data: "M x y" + one " C c1x c1y, c2x c2y, x y" per edge + " Z".
    Fewer than 3 points => "".
    """
    segs = bezier_segments(points, tension)
    if not segs:
        return ""

    def fmt(p: Point) -> str:
        return f"{format_number(p[0], precision)} {format_number(p[1], precision)}"

    d = [f"M {fmt(segs[0][0])}"]
    for _p1, c1, c2, p2 in segs:
        d.append(f"C {fmt(c1)}, {fmt(c2)}, {fmt(p2)}")
    d.append("Z")
    return " ".join(d)


# -------------------------
# Flattening (hit testing, validity checks)
# -------------------------


def _cubic_point(seg: Segment, t: float) -> Point:
    p0, c1, c2, p3 = seg
    u = 1.0 - t
    a = u * u * u
    b = 3 * u * u * t
    c = 3 * u * t * t
    d = t * t * t
    return (
        a * p0[0] + b * c1[0] + c * c2[0] + d * p3[0],
        a * p0[1] + b * c1[1] + c * c2[1] + d * p3[1],
    )


def sample_outline(
    points: List[Point], steps_per_segment: int = 16, tension: float = TENSION
) -> List[Point]:
    steps = max(1, steps_per_segment)
    out: List[Point] = []
    for seg in bezier_segments(points, tension):
        # segment end is the next segment's start
        for s in range(steps):
            out.append(_cubic_point(seg, s / steps))
    return out


def outline_polygon(
    points: List[Point], steps_per_segment: int = 16, tension: float = TENSION
) -> Polygon:
    """Flattened blob outline as a shapely polygon (empty below 3 points)."""
    outline = sample_outline(points, steps_per_segment, tension)
    if len(outline) < 3:
        return Polygon()
    return Polygon(outline)

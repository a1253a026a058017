"""Tests for the closed-curve interpolator."""

import math
import random
import re

import pytest

from blob_canvas.core.curves import (
    TENSION,
    bezier_segments,
    format_number,
    outline_polygon,
    points_to_path,
    sample_outline,
)
from blob_canvas.core.polygon import generate_blob_points

NUMBER = r"-?\d+(?:\.\d+)?(?:e[+-]?\d+)?"


def test_square_path_exact(square):
    assert points_to_path(square) == (
        "M 0 0 "
        "C 2 -2, 8 -2, 10 0 "
        "C 12 2, 12 8, 10 10 "
        "C 8 12, 2 12, 0 10 "
        "C -2 8, -2 2, 0 0 "
        "Z"
    )


@pytest.mark.parametrize("edges", [3, 5, 11, 30])
def test_path_structure(edges, rng):
    ring = generate_blob_points(edges, 0.3, rng=rng)
    d = points_to_path(ring)

    assert d.startswith("M ")
    assert d.endswith(" Z")
    assert d.count("C ") == edges
    assert d.count("M") == 1
    segment = rf"C {NUMBER} {NUMBER}, {NUMBER} {NUMBER}, {NUMBER} {NUMBER}"
    assert re.fullmatch(
        rf"M {NUMBER} {NUMBER}(?: {segment}){{{edges}}} Z", d
    ), d


def test_fewer_than_three_points_gives_empty_path():
    assert points_to_path([]) == ""
    assert points_to_path([(0, 0)]) == ""
    assert points_to_path([(0, 0), (5, 5)]) == ""
    assert bezier_segments([(0, 0), (5, 5)]) == []


def test_path_is_deterministic():
    ring = generate_blob_points(9, 0.2, rng=random.Random(5))
    assert points_to_path(ring) == points_to_path(list(ring))


def test_path_ends_on_first_point(square):
    segs = bezier_segments(square)
    assert segs[-1][3] == segs[0][0]
    assert [s[0] for s in segs] == square


def test_tangents_match_at_every_vertex_including_seam(rng):
    ring = generate_blob_points(7, 0.1, rng=rng)
    segs = bezier_segments(ring)
    n = len(segs)

    for i in range(n):
        p, c1 = segs[i][0], segs[i][1]
        c2_prev, end_prev = segs[(i - 1) % n][2], segs[(i - 1) % n][3]
        assert end_prev == p

        outgoing = (c1[0] - p[0], c1[1] - p[1])
        incoming = (p[0] - c2_prev[0], p[1] - c2_prev[1])
        assert outgoing[0] == pytest.approx(incoming[0])
        assert outgoing[1] == pytest.approx(incoming[1])


def test_tension_scales_handles(square):
    loose = bezier_segments(square, tension=0.1)[0]
    tight = bezier_segments(square, tension=0.4)[0]
    # handle of the first vertex is (next - prev) * tension = (10, -10) * t
    assert loose[1] == pytest.approx((1, -1))
    assert tight[1] == pytest.approx((4, -4))
    assert TENSION == 0.2


def test_precision_limits_decimals(rng):
    ring = generate_blob_points(6, 0.5, rng=rng)
    d = points_to_path(ring, precision=2)

    decimals = [n.split(".")[1] for n in re.findall(NUMBER, d) if "." in n]
    assert decimals
    assert all(len(part) <= 2 for part in decimals)


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, "0"), (-0.0, "0"), (150.0, "150"), (2.5, "2.5"), (-3.25, "-3.25")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_rounds():
    assert format_number(1.23456, 2) == "1.23"
    assert format_number(9.999, 2) == "10"


def test_sample_outline_count(square):
    assert len(sample_outline(square, steps_per_segment=8)) == 32
    assert sample_outline([(0, 0), (1, 1)]) == []


def test_outline_of_round_blob_is_close_to_circle(rng):
    ring = generate_blob_points(12, 1, radius=50, rng=rng)
    shape = outline_polygon(ring)

    assert shape.is_valid
    assert shape.area == pytest.approx(math.pi * 50**2, rel=0.1)
    assert shape.contains(shape.centroid)


def test_outline_of_degenerate_ring_is_empty():
    assert outline_polygon([(0, 0), (1, 0)]).is_empty

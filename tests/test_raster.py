import itertools

import numpy as np
import pytest

from linecanvas.model.geometry_primitives import Point
from linecanvas.model.raster import (
    Annotation, iter_line_high, iter_line_low, rasterize, render_segment
)

ENDPOINTS = [(0, 0), (7, 2), (-3, 5), (2, -6), (10, 10), (-4, -4), (0, 9), (9, 0)]
SEGMENTS = [(a, b) for a, b in itertools.product(ENDPOINTS, repeat=2)]


def test_diagonal_is_exact():
    assert rasterize(0, 0, 4, 4) == ((0, 0), (1, 1), (2, 2), (3, 3), (4, 4))


def test_shallow_line_steps_once():
    pixels = rasterize(0, 0, 4, 1)
    assert pixels == ((0, 0), (1, 0), (2, 0), (3, 1), (4, 1))


def test_reversed_diagonal_has_same_points():
    assert set(rasterize(4, 4, 0, 0)) == set(rasterize(0, 0, 4, 4))


def test_single_point():
    assert rasterize(3, 3, 3, 3) == ((3, 3),)


@pytest.mark.parametrize("x1, y1, x2, y2", [
    (0, 0, 10, 0),
    (10, 0, 0, 0),
    (5, -3, 5, 8),
    (5, 8, 5, -3),
    (-2, 4, 3, 4),
])
def test_axis_aligned_runs_are_contiguous(x1, y1, x2, y2):
    pixels = rasterize(x1, y1, x2, y2)
    assert len(pixels) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    if y1 == y2:
        assert {p[1] for p in pixels} == {y1}
        assert [p[0] for p in pixels] == list(range(min(x1, x2), max(x1, x2) + 1))
    else:
        assert {p[0] for p in pixels} == {x1}
        assert [p[1] for p in pixels] == list(range(min(y1, y2), max(y1, y2) + 1))


@pytest.mark.parametrize("start, end", SEGMENTS)
def test_pixels_are_8_connected(start, end):
    pixels = rasterize(*start, *end)
    for (ax, ay), (bx, by) in zip(pixels, pixels[1:]):
        assert abs(ax - bx) <= 1 and abs(ay - by) <= 1


@pytest.mark.parametrize("start, end", SEGMENTS)
def test_endpoints_are_hit(start, end):
    pixels = rasterize(*start, *end)
    assert set(pixels) >= {start, end}
    dx, dy = abs(end[0] - start[0]), abs(end[1] - start[1])
    assert len(pixels) == max(dx, dy) + 1


@pytest.mark.parametrize("start, end", SEGMENTS)
def test_direction_does_not_change_point_set(start, end):
    assert set(rasterize(*start, *end)) == set(rasterize(*end, *start))


def test_driving_axis_only_increases():
    shallow = rasterize(9, 2, 0, 0)
    assert [p[0] for p in shallow] == list(range(0, 10))
    steep = rasterize(1, 9, 0, 0)
    assert [p[1] for p in steep] == list(range(0, 10))


def test_low_and_high_routines_step_minor_axis_down():
    assert list(iter_line_low(0, 2, 4, 0))[-1] == (4, 0)
    assert list(iter_line_high(2, 0, 0, 4))[-1] == (0, 4)


def test_real_coordinates_are_truncated():
    assert rasterize(0.9, 0.2, 3.7, 0.99) == ((0, 0), (1, 0), (2, 0), (3, 0))


def test_result_is_restartable():
    pixels = rasterize(0, 0, 6, 3)
    assert list(pixels) == list(pixels)


def test_pixel_array_shape():
    arr = render_segment(Point(0, 0), Point(4, 1)).pixel_array()
    assert arr.shape == (5, 2)
    assert arr.dtype == np.int64
    np.testing.assert_array_equal(arr[-1], [4, 1])


def test_render_segment_labels_original_endpoints():
    # Steep and reversed: the stepping loop runs from (2, 0) up to (0, 10)...
    frame = render_segment(Point(0, 10), Point(2, 0), label_offset=5)
    # ...but the labels still follow the caller's endpoint order.
    assert frame.labels == (Annotation("A2", 0, 5), Annotation("B2", 2, -5))
    assert frame.pixels[0] == (2, 0)
    assert frame.pixel_array().shape == (11, 2)

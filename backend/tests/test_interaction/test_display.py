"""Tests for the letterbox/pillarbox display mapping."""

from __future__ import annotations

import pytest

from holdmap.engine.display import (
    DisplayParameters,
    compute_display_parameters,
    displayed_size,
    to_display_space,
    to_image_space,
)


def test_wide_viewport_square_image():
    params = compute_display_parameters(800, 400, 1600, 1600)
    assert params.is_valid
    assert displayed_size(params, 1600, 1600) == pytest.approx((400.0, 400.0))
    assert params.offset_x == pytest.approx(200.0)
    assert params.offset_y == 0.0
    assert params.scale_x == pytest.approx(0.25)
    assert params.scale_y == pytest.approx(0.25)


def test_tall_viewport_is_width_constrained():
    params = compute_display_parameters(400, 800, 1600, 1600)
    assert displayed_size(params, 1600, 1600) == pytest.approx((400.0, 400.0))
    assert params.offset_x == 0.0
    assert params.offset_y == pytest.approx(200.0)


def test_matching_aspect_fills_viewport():
    params = compute_display_parameters(800, 600, 400, 300)
    assert params.scale_x == pytest.approx(2.0)
    assert params.scale_y == pytest.approx(2.0)
    assert (params.offset_x, params.offset_y) == pytest.approx((0.0, 0.0))


@pytest.mark.parametrize("viewport", [(0, 400), (800, 0), (0, 0)])
def test_empty_viewport_is_invalid(viewport):
    params = compute_display_parameters(*viewport, 100, 100)
    assert not params.is_valid
    assert params == DisplayParameters(0.0, 0.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "viewport, image",
    [
        ((800, 400), (1600, 1600)),
        ((1280, 720), (3024, 4032)),
        ((375, 812), (4000, 3000)),
        ((1000, 1000), (1, 999)),
        ((333, 777), (555, 111)),
        ((1920, 1080), (1920, 1080)),
    ],
)
def test_fit_stays_inside_viewport_and_keeps_aspect(viewport, image):
    vw, vh = viewport
    iw, ih = image
    params = compute_display_parameters(vw, vh, iw, ih)
    dw, dh = displayed_size(params, iw, ih)

    assert dw <= vw + 1e-9
    assert dh <= vh + 1e-9
    assert dw == pytest.approx(vw) or dh == pytest.approx(vh)
    assert dw / dh == pytest.approx(iw / ih)
    assert params.offset_x + dw <= vw + 1e-9
    assert params.offset_y + dh <= vh + 1e-9


def test_image_and_display_space_round_trip():
    params = compute_display_parameters(1280, 720, 3024, 4032)
    image_point = to_image_space(to_display_space((1500.0, 2000.0), params), params)
    assert image_point == pytest.approx((1500.0, 2000.0))


def test_image_space_needs_valid_params():
    assert to_image_space((10.0, 10.0), compute_display_parameters(0, 0, 10, 10)) is None

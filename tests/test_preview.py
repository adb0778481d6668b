import logging
import math

import PIL.Image
import pytest

import pyease.easing as easing
import pyease.preview as preview
from pyease.curves import Curve

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def small():
    return preview.PreviewSettings(frame_size=(20, 20), margin=0,
                                   samples=32, line_width=1)


def test_unit_square():
    settings = preview.PreviewSettings(frame_size=(100, 50), margin=0.2)
    assert settings.unit_square() == (20, 10, 79, 39)


def test_render_linear(small):
    img = preview.render_curve_pil(Curve.LINEAR, small)
    assert img.mode == 'RGBA'
    assert img.size == (20, 20)
    assert img.getpixel((0, 19)) == WHITE
    assert img.getpixel((19, 0)) == WHITE


def test_render_accepts_names_and_callables(small):
    by_curve = preview.render_curve(Curve.IN_OUT_SINE, small)
    by_name = preview.render_curve('in-out-sine', small)
    by_func = preview.render_curve(easing.in_out_sine, small)
    assert by_curve == by_name == by_func
    assert len(by_curve) == 20 * 20 * 4


def test_render_skips_non_finite(small):
    img = preview.render_curve_pil(lambda p: math.nan, small)
    assert img.getpixel((10, 10)) == BLACK


def test_render_far_out_of_frame(small):
    img = preview.render_curve_pil(Curve.IN_ELASTIC, small)
    assert img.size == (20, 20)
    img = preview.render_curve_pil(lambda p: 1e300 * (p - 0.5), small)
    assert img.size == (20, 20)


def test_render_unknown_curve_raises(small):
    with pytest.raises(ValueError):
        preview.render_curve_pil('nope', small)
    with pytest.raises(ValueError):
        preview.render_curve_pil(99, small)


@pytest.mark.parametrize('kwargs', [
    {'frame_size': (0, 10)},
    {'frame_size': (10, 10, 10)},
    {'frame_size': (10.0, 10)},
    {'margin': 0.5},
    {'margin': -0.1},
    {'samples': 1},
    {'line_width': 0},
    {'background': 5},
])
def test_bad_settings_raise(kwargs):
    with pytest.raises(ValueError):
        preview.PreviewSettings(**kwargs)


def test_gallery_grid(small, caplog):
    logger = logging.getLogger('pyease.preview')
    with caplog.at_level(logging.DEBUG, logger='pyease.preview'):
        img = preview.render_gallery(columns=4, settings=small, logger=logger)
    assert img.size == (80, 160)
    assert 'rendering in_out_bounce (31/31)' in caplog.text
    # the last row only has 3 of 4 cells filled
    assert img.getpixel((70, 150)) == BLACK


def test_gallery_subset(small):
    img = preview.render_gallery(['InCubic', Curve.OUT_CUBIC], columns=3,
                                 settings=small, logger=logging.getLogger('t'))
    assert img.size == (60, 20)
    cell = img.crop((0, 0, 20, 20))
    assert cell.tobytes() == preview.render_curve(Curve.IN_CUBIC, small)


def test_gallery_bad_arguments(small):
    with pytest.raises(ValueError):
        preview.render_gallery(columns=0, settings=small)
    with pytest.raises(ValueError):
        preview.render_gallery([], settings=small)
    with pytest.raises(ValueError):
        preview.render_gallery(['linear', 'wobble'], settings=small,
                               logger=logging.getLogger('t'))


def test_save_gallery(tmp_path, small):
    outfile = str(tmp_path / 'out' / 'gallery.png')
    preview.save_gallery(outfile, [Curve.LINEAR, Curve.OUT_BOUNCE],
                         columns=2, settings=small,
                         logger=logging.getLogger('t'))
    with PIL.Image.open(outfile) as img:
        assert img.size == (40, 20)

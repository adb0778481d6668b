"""Renders easings to images so that they can be compared by eye. Each
preview is the eased value plotted against progress over [0, 1], drawn over
the outline of the unit square. There is a margin around the unit square so
that curves which overshoot (back, elastic) stay partly visible; whatever
leaves the frame is clipped.
"""

import os
import math
import typing
import logging
import PIL.Image
import PIL.ImageDraw
import pytypeutils as tus
import pyease.resolve as resolve
from pyease.curves import Curve
from pyease.easing import Easing

class PreviewSettings:
    """Describes how previews are drawn.

    Attributes:
        frame_size (tuple[int, int]): the width and height of a single
            preview in pixels
        margin (float): the fraction of the frame on each side that is kept
            around the unit square. Must be in [0, 0.5)
        samples (int): the number of evenly spaced progress values that the
            curve is evaluated at, including both 0 and 1
        background (str, tuple): the pillow color for the background
        axis_color (str, tuple): the pillow color for the unit square
        line_color (str, tuple): the pillow color for the curve
        line_width (int): the width of the curve in pixels
    """
    def __init__(self, frame_size=(200, 200), margin=0.2, samples=256,
                 background='black', axis_color='gray', line_color='white',
                 line_width=2):
        tus.check(
            frame_size=(frame_size, (list, tuple)),
            margin=(margin, (int, float)),
            samples=(samples, int),
            background=(background, (str, tuple)),
            axis_color=(axis_color, (str, tuple)),
            line_color=(line_color, (str, tuple)),
            line_width=(line_width, int)
        )
        tus.check_listlike(frame_size=(frame_size, int, 2))
        if frame_size[0] <= 0 or frame_size[1] <= 0:
            raise ValueError(f'frame_size={frame_size} must be positive')
        if margin < 0 or margin >= 0.5:
            raise ValueError(f'margin={margin} should be in [0, 0.5)')
        if samples < 2:
            raise ValueError(f'samples={samples} must be at least 2')
        if line_width <= 0:
            raise ValueError(f'line_width={line_width} must be positive')

        self.frame_size = tuple(frame_size)
        self.margin = margin
        self.samples = samples
        self.background = background
        self.axis_color = axis_color
        self.line_color = line_color
        self.line_width = line_width

    def unit_square(self) -> typing.Tuple[int, int, int, int]:
        """Returns (left, top, right, bottom) in pixels of where the unit
        square is drawn within a frame"""
        width, height = self.frame_size
        left = int(width * self.margin)
        top = int(height * self.margin)
        return left, top, width - 1 - left, height - 1 - top

def img_to_bytes(img: PIL.Image.Image) -> bytes:
    """Converts the given pillow image to raw rgba bytes"""
    if img.mode == 'RGBA':
        return img.tobytes()
    return img.convert('RGBA').tobytes()

def render_curve_pil(curve, settings: PreviewSettings = None) -> PIL.Image.Image:
    """Renders a preview of the given curve.

    Args:
        curve (Curve, str, callable): the curve to render. Curves and names
            are resolved with pyease.resolve.get; anything else must be an
            easing function.
        settings (PreviewSettings, optional): how to draw. Defaults are used
            if not provided.

    Returns:
        (PIL.Image.Image): the rendered preview in RGBA mode

    Raises:
        ValueError: if curve is a Curve or name that does not resolve
    """
    if settings is None:
        settings = PreviewSettings()
    tus.check(settings=(settings, PreviewSettings))
    _, func = _resolve_curve(curve)

    img = PIL.Image.new('RGBA', settings.frame_size, settings.background)
    draw = PIL.ImageDraw.Draw(img)
    draw.rectangle(settings.unit_square(), outline=settings.axis_color)

    for segment in _curve_segments(func, settings):
        if len(segment) == 1:
            draw.point(segment, fill=settings.line_color)
        else:
            draw.line(segment, fill=settings.line_color,
                      width=settings.line_width)
    return img

def render_curve(curve, settings: PreviewSettings = None) -> bytes:
    """Renders a preview of the given curve to raw rgba bytes. See
    render_curve_pil"""
    return img_to_bytes(render_curve_pil(curve, settings))

def render_gallery(curves: typing.Optional[typing.Iterable] = None,
                   columns: int = 3, settings: PreviewSettings = None,
                   logger: logging.Logger = None) -> PIL.Image.Image:
    """Renders one preview per curve and stitches them into a grid, filled
    row by row.

    Arguments:
        curves (iterable, optional): the curves to render, as accepted by
            render_curve_pil. Defaults to every Curve in order.
        columns (int): the number of previews per row
        settings (PreviewSettings, optional): how to draw each preview
        logger (Logger, optional): the logger to report progress on

    Returns:
        (PIL.Image.Image): the grid of previews. Empty cells in the last row
            are left with the background color.
    """
    if curves is None:
        curves = tuple(Curve)
    curves = tuple(curves)
    if settings is None:
        settings = PreviewSettings()
    tus.check(columns=(columns, int), settings=(settings, PreviewSettings))
    if columns <= 0:
        raise ValueError(f'columns={columns} must be positive')
    if not curves:
        raise ValueError('there must be at least one curve to render')
    if logger is None:
        logger = logging.getLogger('pyease.preview')
        if not logger.handlers:
            logger.setLevel(logging.DEBUG)
            logging.basicConfig(
                format='%(asctime)s [%(filename)s:%(lineno)d] %(message)s',
                datefmt='%m/%d/%Y %I:%M:%S %p')

    width, height = settings.frame_size
    rows = (len(curves) + columns - 1) // columns
    gallery = PIL.Image.new('RGBA', (width * columns, height * rows),
                            settings.background)
    for i, curve in enumerate(curves):
        label, _ = _resolve_curve(curve)
        logger.debug('rendering %s (%d/%d)', label, i + 1, len(curves))
        row, col = divmod(i, columns)
        gallery.paste(render_curve_pil(curve, settings),
                      (col * width, row * height))
    logger.info('Rendered %d curves in a %dx%d grid', len(curves), columns, rows)
    return gallery

def save_gallery(outfile: str, curves: typing.Optional[typing.Iterable] = None,
                 columns: int = 3, settings: PreviewSettings = None,
                 logger: logging.Logger = None) -> None:
    """Renders a gallery (see render_gallery) and saves it to the given file.
    The directory up to the file is created if necessary, and the format is
    determined from the extension."""
    tus.check(outfile=(outfile, str))
    dirname = os.path.dirname(outfile)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    render_gallery(curves, columns, settings, logger).save(outfile)

def _resolve_curve(curve) -> typing.Tuple[str, Easing]:
    if isinstance(curve, (Curve, str)):
        func = resolve.get(curve)
        if func is None:
            raise ValueError(f'curve={curve!r} is not a known curve')
        return (curve.name.lower() if isinstance(curve, Curve) else curve), func
    tus.check_callable(curve=curve)
    return getattr(curve, '__name__', repr(curve)), curve

def _curve_segments(func, settings: PreviewSettings):
    """Yields the runs of consecutive finite samples of func as pixel
    coordinates. A non-finite sample ends the current run."""
    left, top, right, bottom = settings.unit_square()
    height = settings.frame_size[1]
    # keeps far out of frame values from overflowing pillow's coordinates
    lo, hi = -4 * height, 5 * height

    segment = []
    for i in range(settings.samples):
        p = i / (settings.samples - 1)
        val = func(p)
        if not math.isfinite(val):
            if segment:
                yield segment
            segment = []
            continue
        x = left + p * (right - left)
        y = bottom - val * (bottom - top)
        segment.append((x, min(max(y, lo), hi)))
    if segment:
        yield segment

"""Describes what an easing is for the purpose of this package, and provides
the fixed catalog of easings based on https://easings.net/ and the AHEasing
formulas (https://github.com/warrenm/AHEasing/).

Every easing in this module is a plain function of one number. They are pure
and total: they accept any real number (not just [0, 1]), never raise, and
never clamp. Values outside [0, 1] are evaluated as-is. The polynomial and
exponential families preserve the numeric type of their input (Fraction and
Decimal stay exact; ints become floats only where a value is halved). The
trigonometric, root and bounce families convert the input to a float first,
with ints too large for a float treated as infinite.

The back and elastic families overshoot [0, 1] by design.
"""

import math

HALF_PI = math.pi / 2

class Easing:
    """The interface for easings. Things that accept easings should work for
    any callable object that acts like an Easing; every function in this
    module is one."""

    def __call__(self, p: float) -> float:
        """Accepts a number which is typically between 0 and 1 and returns
        the eased number, typically in the same range.

        An easing f is said to be a proper easing if f(0) = 0 and f(1) = 1.

        Args:
            p (float): The "uneased" progress

        Returns:
            eased (float): the "eased" progress
        """
        raise NotImplementedError

def squared(p): # pylint: disable=invalid-name
    """Returns p * p. This stands in for the pow(2, x) of the exponential
    and elastic models and must stay a square, since existing outputs depend
    on it."""
    return p * p

def linear(p): # pylint: disable=invalid-name
    """Modeled after the line y = x

    This is a proper easing.
    """
    return p

def in_quadratic(p): # pylint: disable=invalid-name
    """Modeled after the parabola y = x^2"""
    return p * p

def out_quadratic(p): # pylint: disable=invalid-name
    """Modeled after the parabola y = -x^2 + 2x"""
    return -(p * (p - 2))

def in_out_quadratic(p): # pylint: disable=invalid-name
    """Modeled after the piecewise quadratic

    y = (1/2)((2x)^2)             ; [0, 0.5)
    y = -(1/2)((2x-1)*(2x-3) - 1) ; [0.5, 1]
    """
    if p < 0.5:
        return 2 * p * p
    return (-2 * p * p) + (4 * p) - 1

def in_cubic(p): # pylint: disable=invalid-name
    """Modeled after the cubic y = x^3"""
    return p * p * p

def out_cubic(p): # pylint: disable=invalid-name
    """Modeled after the cubic y = (x - 1)^3 + 1"""
    f = p - 1
    return f * f * f + 1

def in_out_cubic(p): # pylint: disable=invalid-name
    """Modeled after the piecewise cubic

    y = (1/2)((2x)^3)       ; [0, 0.5)
    y = (1/2)((2x-2)^3 + 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 4 * p * p * p
    f = (2 * p) - 2
    return _half(f * f * f) + 1

def in_quartic(p): # pylint: disable=invalid-name
    """Modeled after the quartic x^4"""
    return p * p * p * p

def out_quartic(p): # pylint: disable=invalid-name
    """Modeled after the quartic y = 1 - (x - 1)^4"""
    f = p - 1
    return f * f * f * (1 - p) + 1

def in_out_quartic(p): # pylint: disable=invalid-name
    """Modeled after the piecewise quartic

    y = (1/2)((2x)^4)        ; [0, 0.5)
    y = -(1/2)((2x-2)^4 - 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 8 * p * p * p * p
    f = p - 1
    return -8 * f * f * f * f + 1

def in_quintic(p): # pylint: disable=invalid-name
    """Modeled after the quintic y = x^5"""
    return p * p * p * p * p

def out_quintic(p): # pylint: disable=invalid-name
    """Modeled after the quintic y = (x - 1)^5 + 1"""
    f = p - 1
    return f * f * f * f * f + 1

def in_out_quintic(p): # pylint: disable=invalid-name
    """Modeled after the piecewise quintic

    y = (1/2)((2x)^5)       ; [0, 0.5)
    y = (1/2)((2x-2)^5 + 2) ; [0.5, 1]
    """
    if p < 0.5:
        return 16 * p * p * p * p * p
    f = (2 * p) - 2
    return _half(f * f * f * f * f) + 1

def in_sine(p): # pylint: disable=invalid-name
    """Modeled after quarter-cycle of sine wave"""
    p = _as_float(p)
    return _sin((p - 1) * HALF_PI) + 1

def out_sine(p): # pylint: disable=invalid-name
    """Modeled after quarter-cycle of sine wave (different phase)"""
    p = _as_float(p)
    return _sin(p * HALF_PI)

def in_out_sine(p): # pylint: disable=invalid-name
    """Modeled after half sine wave"""
    p = _as_float(p)
    return 0.5 * (1 - _cos(p * math.pi))

def in_circular(p): # pylint: disable=invalid-name
    """Modeled after shifted quadrant IV of unit circle. Outside [-1, 1]
    the root is undefined and this returns nan."""
    p = _as_float(p)
    return 1 - _sqrt(1 - (p * p))

def out_circular(p): # pylint: disable=invalid-name
    """Modeled after shifted quadrant II of unit circle"""
    p = _as_float(p)
    return _sqrt((2 - p) * p)

def in_out_circular(p): # pylint: disable=invalid-name
    """Modeled after the piecewise circular function

    y = (1/2)(1 - sqrt(1 - 4x^2))           ; [0, 0.5)
    y = (1/2)(sqrt(-(2x - 3)*(2x - 1)) + 1) ; [0.5, 1]
    """
    p = _as_float(p)
    if p < 0.5:
        return 0.5 * (1 - _sqrt(1 - 4 * (p * p)))
    return 0.5 * (_sqrt(-((2 * p) - 3) * ((2 * p) - 1)) + 1)

def in_exponential(p): # pylint: disable=invalid-name
    """Modeled after the exponential function y = 2^(10(x - 1)), with the
    power replaced by a square (see squared). Returns p unchanged at 0."""
    if p == 0:
        return p
    return squared(10 * (p - 1))

def out_exponential(p): # pylint: disable=invalid-name
    """Modeled after the exponential function y = -2^(-10x) + 1, with the
    power replaced by a square (see squared). Returns p unchanged at 1."""
    if p == 1:
        return p
    return 1 - squared(-10 * p)

def in_out_exponential(p): # pylint: disable=invalid-name
    """Modeled after the piecewise exponential

    y = (1/2)2^(10(2x - 1))         ; [0,0.5)
    y = -(1/2)*2^(-10(2x - 1))) + 1 ; [0.5,1]

    Returns p unchanged at 0 and 1.
    """
    if p == 0 or p == 1:
        return p
    if p < 0.5:
        return _half(squared((20 * p) - 10))
    return -_half(squared((-20 * p) + 10)) + 1

def in_elastic(p): # pylint: disable=invalid-name
    """Modeled after the damped sine wave y = sin(13pi/2*x)*pow(2, 10 * (x - 1))
    """
    p = _as_float(p)
    return _sin(13 * HALF_PI * p) * squared(10 * (p - 1))

def out_elastic(p): # pylint: disable=invalid-name
    """Modeled after the damped sine wave y = sin(-13pi/2*(x + 1))*pow(2, -10x) + 1
    """
    p = _as_float(p)
    return _sin(-13 * HALF_PI * (p + 1)) * squared(-10 * p) + 1

def in_out_elastic(p): # pylint: disable=invalid-name
    """Modeled after the piecewise exponentially-damped sine wave:

    y = (1/2)*sin(13pi/2*(2*x))*pow(2, 10 * ((2*x) - 1))      ; [0,0.5)
    y = (1/2)*(sin(-13pi/2*((2x-1)+1))*pow(2,-10(2*x-1)) + 2) ; [0.5, 1]
    """
    p = _as_float(p)
    if p < 0.5:
        return (0.5 * _sin(13 * HALF_PI * (2 * p))
                * squared(10 * ((2 * p) - 1)))
    return 0.5 * (_sin(-13 * HALF_PI * ((2 * p - 1) + 1))
                  * squared(-10 * (2 * p - 1)) + 2)

def in_back(p): # pylint: disable=invalid-name
    """Modeled after the overshooting cubic y = x^3-x*sin(x*pi)"""
    p = _as_float(p)
    return p * p * p - p * _sin(p * math.pi)

def out_back(p): # pylint: disable=invalid-name
    """Modeled after overshooting cubic y = 1-((1-x)^3-(1-x)*sin((1-x)*pi))"""
    p = _as_float(p)
    f = 1 - p
    return 1 - (f * f * f - f * _sin(f * math.pi))

def in_out_back(p): # pylint: disable=invalid-name
    """Modeled after the piecewise overshooting cubic function:

    y = (1/2)*((2x)^3-(2x)*sin(2*x*pi))           ; [0, 0.5)
    y = (1/2)*(1-((1-x)^3-(1-x)*sin((1-x)*pi))+1) ; [0.5, 1]
    """
    p = _as_float(p)
    if p < 0.5:
        f = 2 * p
        return 0.5 * (f * f * f - f * _sin(f * math.pi))
    f = 1 - (2 * p - 1)
    return 0.5 * (1 - (f * f * f - f * _sin(f * math.pi))) + 0.5

def out_bounce(p): # pylint: disable=invalid-name
    """Four quadratic pieces that land on 1 at p=4/11, 8/11 and 9/10 with
    decaying rebounds in between.

    This is a proper easing.
    """
    p = _as_float(p)
    if p < 4 / 11.0:
        return (121 * p * p) / 16.0
    if p < 8 / 11.0:
        return (363 / 40.0 * p * p) - (99 / 10.0 * p) + 17 / 5.0
    if p < 9 / 10.0:
        return (4356 / 361.0 * p * p) - (35442 / 1805.0 * p) + 16061 / 1805.0
    return (54 / 5.0 * p * p) - (513 / 25.0 * p) + 268 / 25.0

def in_bounce(p): # pylint: disable=invalid-name
    """The mirror image of out_bounce"""
    p = _as_float(p)
    return 1 - out_bounce(1 - p)

def in_out_bounce(p): # pylint: disable=invalid-name
    """in_bounce compressed into [0, 0.5) followed by out_bounce compressed
    into [0.5, 1]"""
    p = _as_float(p)
    if p < 0.5:
        return 0.5 * in_bounce(p * 2)
    return 0.5 * out_bounce(p * 2 - 1) + 0.5

def _sin(x): # pylint: disable=invalid-name
    # math.sin raises on infinities and easings never raise
    return math.sin(x) if math.isfinite(x) else math.nan

def _cos(x): # pylint: disable=invalid-name
    return math.cos(x) if math.isfinite(x) else math.nan

def _sqrt(x): # pylint: disable=invalid-name
    # likewise math.sqrt on negatives
    if x < 0:
        return math.nan
    return math.sqrt(x)

def _as_float(p): # pylint: disable=invalid-name
    """float(p), with ints beyond the float range becoming +-inf"""
    try:
        return float(p)
    except OverflowError:
        return math.inf if p > 0 else -math.inf

def _half(x): # pylint: disable=invalid-name
    # true division overflows for ints beyond the float range
    if isinstance(x, int):
        return _as_float(x) / 2
    return x / 2

"""Turns a Curve or the name of a curve into the easing function it refers
to. This is what lets a curve be chosen from a config file or a dropdown
without an if/else at every call site.

Nothing in here raises for an unknown curve. The lookups return None and the
caller is expected to check for it before easing anything:

    ease = resolve_by_name(settings['ease'])
    if ease is None:
        ease = easing.linear
"""

import logging
import typing
import pytypeutils as tus
import pyease.easing as easing
from pyease.easing import Easing
import pyease.utils as eutils
from pyease.curves import Curve, Family, Phase

logger = logging.getLogger('pyease.resolve')

_BY_ID = {
    Curve.LINEAR: easing.linear,
    Curve.IN_QUADRATIC: easing.in_quadratic,
    Curve.OUT_QUADRATIC: easing.out_quadratic,
    Curve.IN_OUT_QUADRATIC: easing.in_out_quadratic,
    Curve.IN_CUBIC: easing.in_cubic,
    Curve.OUT_CUBIC: easing.out_cubic,
    Curve.IN_OUT_CUBIC: easing.in_out_cubic,
    Curve.IN_QUARTIC: easing.in_quartic,
    Curve.OUT_QUARTIC: easing.out_quartic,
    Curve.IN_OUT_QUARTIC: easing.in_out_quartic,
    Curve.IN_QUINTIC: easing.in_quintic,
    Curve.OUT_QUINTIC: easing.out_quintic,
    Curve.IN_OUT_QUINTIC: easing.in_out_quintic,
    Curve.IN_SINE: easing.in_sine,
    Curve.OUT_SINE: easing.out_sine,
    Curve.IN_OUT_SINE: easing.in_out_sine,
    Curve.IN_CIRCULAR: easing.in_circular,
    Curve.OUT_CIRCULAR: easing.out_circular,
    Curve.IN_OUT_CIRCULAR: easing.in_out_circular,
    Curve.IN_EXPONENTIAL: easing.in_exponential,
    Curve.OUT_EXPONENTIAL: easing.out_exponential,
    Curve.IN_OUT_EXPONENTIAL: easing.in_out_exponential,
    Curve.IN_ELASTIC: easing.in_elastic,
    Curve.OUT_ELASTIC: easing.out_elastic,
    Curve.IN_OUT_ELASTIC: easing.in_out_elastic,
    Curve.IN_BACK: easing.in_back,
    Curve.OUT_BACK: easing.out_back,
    Curve.IN_OUT_BACK: easing.in_out_back,
    Curve.IN_BOUNCE: easing.in_bounce,
    Curve.OUT_BOUNCE: easing.out_bounce,
    Curve.IN_OUT_BOUNCE: easing.in_out_bounce,
}

def resolve_by_id(identifier) -> typing.Optional[Easing]:
    """Returns the easing function for the given curve identifier.

    Args:
        identifier (Curve, int): the curve, or the integer value of a curve

    Returns:
        (callable, optional): the easing function, or None if the identifier
            is not a Curve or the value of one
    """
    if not isinstance(identifier, Curve):
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            logger.debug('not a curve identifier: %r', identifier)
            return None
        try:
            identifier = Curve(identifier)
        except ValueError:
            logger.debug('no curve has the value %d', identifier)
            return None
    return _BY_ID[identifier]

def resolve_by_name(name: str) -> typing.Optional[Easing]:
    """Returns the easing function for the given curve name. Names are
    matched ignoring case and accept spaces, dashes and underscores after the
    "in" and "out" prefixes, so "InOutCubic", "in_out_cubic", "IN-OUT-CUBIC"
    and "in out cubic" are all the same curve.

    Parsing is a single left to right pass: "in" is consumed, then "out" if
    it follows, and whatever is left must be exactly a family name. There is
    no backtracking, so "inoutblah" does not fall back to trying "outblah"
    as an ease-in, and "insidecubic" does not match "in" + "cubic".

    Args:
        name (str): the name of the curve

    Returns:
        (callable, optional): the easing function, or None if the name is not
            a known curve
    """
    tus.check(name=(name, str))

    if eutils.equals_ignore_case(name, 'linear'):
        return easing.linear

    consumed, rest = eutils.consume_prefix_ignore_case(name, 'in')
    if consumed:
        consumed, rest = eutils.consume_prefix_ignore_case(rest, 'out')
        phase = Phase.IN_OUT if consumed else Phase.IN
    else:
        consumed, rest = eutils.consume_prefix_ignore_case(name, 'out')
        if not consumed:
            logger.debug('unknown curve name: %r', name)
            return None
        phase = Phase.OUT

    family = _parse_family(rest)
    if family is None:
        logger.debug('unknown curve name: %r', name)
        return None
    return _BY_ID[Curve.of(family, phase)]

def get(selector) -> typing.Optional[Easing]:
    """Returns the easing function for the given curve or curve name. Strings
    go through resolve_by_name and everything else through resolve_by_id.

    Returns:
        (callable, optional): the easing function or None if unknown
    """
    if isinstance(selector, str):
        return resolve_by_name(selector)
    return resolve_by_id(selector)

def _parse_family(name: str) -> typing.Optional[Family]:
    for family in Family:
        if eutils.equals_ignore_case(name, family.value):
            return family
    return None

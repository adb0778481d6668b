import logging

import pytest

import pyease.easing as easing
import pyease.resolve as resolve
from pyease.curves import Curve, Family, Phase


@pytest.mark.parametrize('curve', list(Curve), ids=lambda c: c.name)
def test_resolve_by_id_matches_catalog(curve):
    func = resolve.resolve_by_id(curve)
    assert func is getattr(easing, curve.name.lower())


def test_resolve_by_id_accepts_values():
    assert resolve.resolve_by_id(0) is easing.linear
    assert resolve.resolve_by_id(Curve.IN_CUBIC.value) is easing.in_cubic
    assert resolve.resolve_by_id(30) is easing.in_out_bounce


@pytest.mark.parametrize('identifier', [31, -1, 1000, True, 4.0, '4',
                                        'IN_CUBIC', None, Family.CUBIC,
                                        Phase.IN])
def test_resolve_by_id_unknown_is_none(identifier):
    assert resolve.resolve_by_id(identifier) is None


@pytest.mark.parametrize('name', ['linear', 'LINEAR', 'Linear', 'lInEaR'])
def test_resolve_linear(name):
    func = resolve.resolve_by_name(name)
    assert func is easing.linear
    assert func(0.3) == 0.3


@pytest.mark.parametrize('name', ['InCubic', 'in_cubic', 'in-cubic',
                                  'IN CUBIC', 'incubic', 'in__- cubic'])
def test_resolve_in(name):
    assert resolve.resolve_by_name(name) is easing.in_cubic


@pytest.mark.parametrize('name', ['inoutcubic', 'in out cubic', 'IN-OUT-CUBIC',
                                  'InOutCubic', 'in_out_cubic', 'in-outcubic'])
def test_resolve_in_out(name):
    assert resolve.resolve_by_name(name) is easing.in_out_cubic


@pytest.mark.parametrize('name', ['outcubic', 'OutCubic', 'OUT_CUBIC',
                                  'out cubic'])
def test_resolve_out(name):
    assert resolve.resolve_by_name(name) is easing.out_cubic


@pytest.mark.parametrize('name', ['insidecubic', 'cubic', '', 'inoutblah',
                                  'in', 'inout', 'out', 'in-', 'insert',
                                  ' incubic', 'incubic ', 'in cubics',
                                  'out-in-cubic', 'ininquad', 'in quad',
                                  'linear ', 'easeInCubic', 'in bac\u212a'])
def test_resolve_unknown_is_none(name):
    assert resolve.resolve_by_name(name) is None


def test_resolve_every_family_and_phase():
    prefixes = {Phase.IN: 'In', Phase.OUT: 'Out', Phase.IN_OUT: 'InOut'}
    for family in Family:
        for phase in Phase:
            name = prefixes[phase] + family.value.capitalize()
            expected = resolve.resolve_by_id(Curve.of(family, phase))
            assert resolve.resolve_by_name(name) is expected, name
            snake = f'{phase.value}_{family.value}'.upper()
            assert resolve.resolve_by_name(snake) is expected, snake


def test_resolve_by_name_requires_str():
    with pytest.raises(ValueError):
        resolve.resolve_by_name(5)
    with pytest.raises(ValueError):
        resolve.resolve_by_name(None)


def test_unknown_name_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='pyease.resolve'):
        assert resolve.resolve_by_name('wobble') is None
    assert 'wobble' in caplog.text


def test_get_dispatches_on_type():
    assert resolve.get('in-out-bounce') is easing.in_out_bounce
    assert resolve.get(Curve.OUT_SINE) is easing.out_sine
    assert resolve.get(2) is easing.out_quadratic
    assert resolve.get('nope') is None
    assert resolve.get(99) is None

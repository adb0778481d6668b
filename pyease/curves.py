"""Stable identifiers for every easing in pyease.easing. A Curve is what you
store or pass around when you want to refer to an easing without holding the
function itself, for example when the choice comes from a settings dropdown.

The values of Curve are fixed and do not depend on any string form of the
curve; see pyease.resolve for going from a Curve or a name to the function.
"""

import enum
import typing
import pytypeutils as tus

class Family(enum.Enum):
    """The families of easings. The value is the name the family goes by
    when parsing curve names."""
    QUADRATIC = 'quadratic'
    CUBIC = 'cubic'
    QUARTIC = 'quartic'
    QUINTIC = 'quintic'
    SINE = 'sine'
    CIRCULAR = 'circular'
    EXPONENTIAL = 'exponential'
    ELASTIC = 'elastic'
    BACK = 'back'
    BOUNCE = 'bounce'

class Phase(enum.Enum):
    """Which part of the motion is eased: the start (IN), the end (OUT), or
    both (IN_OUT)"""
    IN = 'in'
    OUT = 'out'
    IN_OUT = 'in_out'

class Curve(enum.Enum):
    """Every supported easing: linear plus each family in each phase."""
    LINEAR = 0

    IN_QUADRATIC = 1
    OUT_QUADRATIC = 2
    IN_OUT_QUADRATIC = 3

    IN_CUBIC = 4
    OUT_CUBIC = 5
    IN_OUT_CUBIC = 6

    IN_QUARTIC = 7
    OUT_QUARTIC = 8
    IN_OUT_QUARTIC = 9

    IN_QUINTIC = 10
    OUT_QUINTIC = 11
    IN_OUT_QUINTIC = 12

    IN_SINE = 13
    OUT_SINE = 14
    IN_OUT_SINE = 15

    IN_CIRCULAR = 16
    OUT_CIRCULAR = 17
    IN_OUT_CIRCULAR = 18

    IN_EXPONENTIAL = 19
    OUT_EXPONENTIAL = 20
    IN_OUT_EXPONENTIAL = 21

    IN_ELASTIC = 22
    OUT_ELASTIC = 23
    IN_OUT_ELASTIC = 24

    IN_BACK = 25
    OUT_BACK = 26
    IN_OUT_BACK = 27

    IN_BOUNCE = 28
    OUT_BOUNCE = 29
    IN_OUT_BOUNCE = 30

    @property
    def family(self) -> typing.Optional[Family]:
        """The family this curve belongs to, or None for LINEAR"""
        if self is Curve.LINEAR:
            return None
        return Family[self.name.rsplit('_', 1)[1]]

    @property
    def phase(self) -> typing.Optional[Phase]:
        """The phase of this curve, or None for LINEAR"""
        if self is Curve.LINEAR:
            return None
        return Phase[self.name.rsplit('_', 1)[0]]

    @property
    def function(self):
        """The easing function this curve identifies"""
        import pyease.resolve as resolve
        return resolve.resolve_by_id(self)

    @classmethod
    def of(cls, family: Family, phase: Phase) -> 'Curve':
        """Returns the curve for the given family in the given phase.

        Args:
            family (Family): the family of the curve
            phase (Phase): the phase of the curve

        Returns:
            (Curve): the curve, e.g. IN_OUT_CUBIC for (CUBIC, IN_OUT)
        """
        tus.check(family=(family, Family), phase=(phase, Phase))
        return cls[f'{phase.name}_{family.name}']

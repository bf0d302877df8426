"""
Field of rational numbers with exact arithmetic.

Elements are fractions.Fraction instances. Integers, strings, numpy scalars and
sympy Rationals are accepted by value_of() and converted without loss; floats
are converted with a bounded denominator.
"""

import logging
import numbers
from fractions import Fraction
from typing import Any

import numpy as np
from sympy import Rational

from .field import Field
from ..names import DEFAULT_MAX_DENOMINATOR

LOG = logging.getLogger(__name__)


class RationalField(Field[Fraction]):
    """
    The field Q of rational numbers.

    Implements the singleton pattern, since the field carries no parameters
    and every instance would behave identically.
    """

    ZERO = Fraction(0)
    ONE = Fraction(1)

    _instance = None

    def __new__(cls):
        """Singleton pattern implementation"""
        if cls._instance is None:
            cls._instance = super(RationalField, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'RationalField':
        """Returns the singleton instance"""
        return cls()

    def __repr__(self) -> str:
        return "RationalField()"

    def zero(self) -> Fraction:
        return self.ZERO

    def one(self) -> Fraction:
        return self.ONE

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def subtract(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def multiply(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def reciprocal(self, a: Fraction) -> Fraction:
        if a.numerator == 0:
            raise ZeroDivisionError("Reciprocal of zero")
        return 1 / a

    def equals(self, a: Fraction, b: Fraction) -> bool:
        return a == b

    def value_of(self, obj: Any, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> Fraction:
        """
        Convert a numeric value to a Fraction.

        Args:
            obj: An int, Fraction, sympy.Rational, numpy scalar, string or float
            max_denominator: Largest denominator kept when approximating a float

        Returns:
            Fraction representation of the value
        """
        if isinstance(obj, Fraction):
            return obj
        elif isinstance(obj, Rational):
            return Fraction(int(obj.p), int(obj.q))
        elif isinstance(obj, (numbers.Integral, np.integer)):
            return Fraction(int(obj))
        elif isinstance(obj, str):
            return Fraction(obj)
        elif isinstance(obj, (float, np.floating)):
            exact = Fraction(float(obj))
            approx = exact.limit_denominator(max_denominator)
            if approx != exact:
                LOG.warning(f"Float {obj!r} approximated as {approx} (max denominator {max_denominator})")
            return approx
        else:
            raise TypeError(f"Cannot convert {type(obj)} to Fraction")

    @staticmethod
    def to_sympy(value: Fraction) -> Rational:
        """Convert a field element to a sympy Rational"""
        return Rational(value.numerator, value.denominator)

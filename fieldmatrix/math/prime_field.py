"""
Prime field GF(p) with elements represented as Python ints.
"""

import numbers
import operator
from fractions import Fraction
from typing import Any

import numpy as np
from sympy import isprime, Rational

from .field import Field


class PrimeField(Field[int]):
    """
    The finite field of integers modulo a prime p.

    Elements are the ints 0, 1, ..., p - 1. Every operation rejects values
    outside this range with ValueError.
    """

    def __init__(self, p: int):
        """
        Initialise the field of order p.

        Args:
            p: The modulus, which must be a prime number

        Raises:
            TypeError: If p is not an integer
            ValueError: If p is not prime
        """
        if not isinstance(p, (numbers.Integral, np.integer)) or isinstance(p, bool):
            raise TypeError(f"p must be an integer, got {type(p)}")
        p = int(p)
        if not isprime(p):
            raise ValueError(f"p must be a prime number: {p}")
        self.p = p

    def __repr__(self) -> str:
        return f"PrimeField({self.p})"

    def __eq__(self, other) -> bool:
        if isinstance(other, PrimeField):
            return self.p == other.p
        return NotImplemented

    def __hash__(self) -> int:
        return hash((PrimeField, self.p))

    def _check(self, a: int) -> int:
        try:
            value = operator.index(a)
        except TypeError:
            raise ValueError(f"Not an element of GF({self.p}): {a!r}") from None
        if not 0 <= value < self.p:
            raise ValueError(f"Not an element of GF({self.p}): {a!r}")
        return value

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return (self._check(a) + self._check(b)) % self.p

    def negate(self, a: int) -> int:
        return -self._check(a) % self.p

    def subtract(self, a: int, b: int) -> int:
        return (self._check(a) - self._check(b)) % self.p

    def multiply(self, a: int, b: int) -> int:
        return (self._check(a) * self._check(b)) % self.p

    def reciprocal(self, a: int) -> int:
        a = self._check(a)
        if a == 0:
            raise ZeroDivisionError(f"Reciprocal of zero in GF({self.p})")
        # Fermat's little theorem
        return pow(a, self.p - 2, self.p)

    def equals(self, a: int, b: int) -> bool:
        return self._check(a) == self._check(b)

    def value_of(self, obj: Any) -> int:
        """
        Map an integer or a rational number onto GF(p).

        Integers are reduced modulo p. A fraction n/d maps to n * d^-1, which
        fails with ZeroDivisionError when p divides d.
        """
        if isinstance(obj, bool):
            return int(obj)
        elif isinstance(obj, (numbers.Integral, np.integer)):
            return int(obj) % self.p
        elif isinstance(obj, Rational):
            return self.divide(int(obj.p) % self.p, int(obj.q) % self.p)
        elif isinstance(obj, Fraction):
            return self.divide(obj.numerator % self.p, obj.denominator % self.p)
        else:
            raise TypeError(f"Cannot convert {type(obj)} to an element of GF({self.p})")

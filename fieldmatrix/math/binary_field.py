"""
Binary extension field GF(2^k) as used by byte-oriented Reed-Solomon codes.

Elements are ints whose bits are the coefficients of a polynomial over GF(2).
Addition is XOR; multiplication is carry-less multiplication reduced by the
field's modulus polynomial.
"""

import numbers
import operator
from typing import Any

import numpy as np
from sympy import Poly, symbols

from .field import Field
from ..names import GF256_POLY

_X = symbols('x')


def is_irreducible_gf2(modulus: int) -> bool:
    """
    Check whether the polynomial encoded by the bits of modulus is irreducible over GF(2).

    Args:
        modulus: Polynomial with bit i holding the coefficient of x^i

    Returns:
        True if the polynomial has degree >= 1 and no non-trivial factors
    """
    if modulus < 2:
        return False
    coeffs = [int(bit) for bit in bin(modulus)[2:]]
    return Poly(coeffs, _X, modulus=2).is_irreducible


class BinaryField(Field[int]):
    """
    The finite field GF(2^k) defined by an irreducible modulus polynomial of degree k.

    Elements are the ints 0, 1, ..., 2^k - 1.
    """

    def __init__(self, modulus: int):
        """
        Initialise the field from its modulus polynomial.

        Args:
            modulus: Irreducible polynomial over GF(2), bit i = coefficient of x^i

        Raises:
            TypeError: If modulus is not an integer
            ValueError: If modulus has degree < 1 or is reducible
        """
        if not isinstance(modulus, (numbers.Integral, np.integer)) or isinstance(modulus, bool):
            raise TypeError(f"modulus must be an integer, got {type(modulus)}")
        modulus = int(modulus)
        if modulus < 2:
            raise ValueError(f"modulus must have degree >= 1: {modulus:#x}")
        if not is_irreducible_gf2(modulus):
            raise ValueError(f"modulus is not irreducible over GF(2): {modulus:#x}")
        self.modulus = modulus
        self.degree = modulus.bit_length() - 1
        self.size = 1 << self.degree

    @classmethod
    def gf256(cls) -> 'BinaryField':
        """GF(2^8) with the reducing polynomial x^8 + x^4 + x^3 + x^2 + 1"""
        return cls(GF256_POLY)

    def __repr__(self) -> str:
        return f"BinaryField({self.modulus:#x})"

    def __eq__(self, other) -> bool:
        if isinstance(other, BinaryField):
            return self.modulus == other.modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash((BinaryField, self.modulus))

    def _check(self, a: int) -> int:
        try:
            value = operator.index(a)
        except TypeError:
            raise ValueError(f"Not an element of GF(2^{self.degree}): {a!r}") from None
        if not 0 <= value < self.size:
            raise ValueError(f"Not an element of GF(2^{self.degree}): {a!r}")
        return value

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return self._check(a) ^ self._check(b)

    def negate(self, a: int) -> int:
        # Characteristic 2: every element is its own additive inverse
        return self._check(a)

    def subtract(self, a: int, b: int) -> int:
        return self._check(a) ^ self._check(b)

    def multiply(self, a: int, b: int) -> int:
        a = self._check(a)
        b = self._check(b)
        result = 0
        while b != 0:
            if b & 1:
                result ^= a
            b >>= 1
            a <<= 1
            if a & self.size:
                a ^= self.modulus
        return result

    def reciprocal(self, a: int) -> int:
        a = self._check(a)
        if a == 0:
            raise ZeroDivisionError(f"Reciprocal of zero in GF(2^{self.degree})")
        # a^(2^k - 2) == a^-1 since the multiplicative group has order 2^k - 1
        result = 1
        exponent = self.size - 2
        while exponent != 0:
            if exponent & 1:
                result = self.multiply(result, a)
            a = self.multiply(a, a)
            exponent >>= 1
        return result

    def equals(self, a: int, b: int) -> bool:
        return self._check(a) == self._check(b)

    def value_of(self, obj: Any) -> int:
        """Interpret an int in [0, 2^k) as a polynomial over GF(2)"""
        if isinstance(obj, (numbers.Integral, np.integer)):
            return self._check(int(obj))
        raise TypeError(f"Cannot convert {type(obj)} to an element of GF(2^{self.degree})")

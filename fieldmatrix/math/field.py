"""
Field interface for exact matrix arithmetic.

This module provides the abstract capability set that every field plugged into
a Matrix must offer. The matrix engine only ever calls zero, add, negate,
multiply, reciprocal and equals; the remaining methods are derived helpers used
by the Gauss operations and by callers building matrices.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Iterable, Any

# Type variable for field elements (Fraction, int, ...)
E = TypeVar('E')


class Field(ABC, Generic[E]):
    """
    Abstract field of elements of type E.

    Implementations must be exact: equals() is a strict equality test and
    reciprocal() must raise ZeroDivisionError for the additive identity.
    Elements are treated as immutable values and may be shared freely between
    matrices. Field operations must not keep mutable state so that one field
    instance can serve several matrices at once.
    """

    # Core capability set
    @abstractmethod
    def zero(self) -> E:
        """Return the additive identity"""
        pass

    @abstractmethod
    def one(self) -> E:
        """Return the multiplicative identity"""
        pass

    @abstractmethod
    def add(self, a: E, b: E) -> E:
        """Return a + b"""
        pass

    @abstractmethod
    def negate(self, a: E) -> E:
        """Return the additive inverse of a"""
        pass

    @abstractmethod
    def multiply(self, a: E, b: E) -> E:
        """Return a * b"""
        pass

    @abstractmethod
    def reciprocal(self, a: E) -> E:
        """
        Return the multiplicative inverse of a.

        Raises:
            ZeroDivisionError: If a is the additive identity
        """
        pass

    @abstractmethod
    def equals(self, a: E, b: E) -> bool:
        """Exact equality of two elements"""
        pass

    def value_of(self, obj: Any) -> E:
        """
        Convert a Python value into an element of this field.

        Not used by the matrix engine itself; Matrix.from_rows and the
        conversion helpers need it. The default accepts nothing.

        Args:
            obj: Value to convert (an int for every field, plus whatever
                 the concrete field accepts)

        Returns:
            The corresponding field element

        Raises:
            ValueError: If the value does not denote an element of this field
            TypeError: If the value has an unsupported type
        """
        raise TypeError(f"Cannot convert {type(obj)} to an element of {self!r}")

    # Derived operations
    def subtract(self, a: E, b: E) -> E:
        """Return a - b"""
        return self.add(a, self.negate(b))

    def divide(self, a: E, b: E) -> E:
        """Return a / b, raising ZeroDivisionError when b is zero"""
        return self.multiply(a, self.reciprocal(b))

    def is_zero(self, a: E) -> bool:
        """Check whether a is exactly the additive identity"""
        return self.equals(a, self.zero())

    def sum(self, values: Iterable[E]) -> E:
        """Field sum of the given values, zero for an empty iterable"""
        total = self.zero()
        for value in values:
            total = self.add(total, value)
        return total

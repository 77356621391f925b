from enum import Enum
from functools import total_ordering
from typing import Union

from inscripta.slicecantor.exc import InvalidStrandException


@total_ordering
class Strand(Enum):
    PLUS = 1
    MINUS = -1

    def __str__(self):
        return str(self.to_symbol())

    @staticmethod
    def from_symbol(value: str) -> "Strand":
        """Converts string representation of a strand to a Strand"""
        if value == "+":
            return Strand.PLUS
        if value == "-":
            return Strand.MINUS
        raise InvalidStrandException("{} is not a valid string representation of a strand".format(value))

    def to_symbol(self) -> str:
        if self == Strand.PLUS:
            return "+"
        return "-"

    @staticmethod
    def from_int(value: int) -> "Strand":
        """Converts integer representation of a strand to a Strand"""
        try:
            return Strand(value)
        except ValueError:
            raise InvalidStrandException(f"Strand must be -1 or 1, got {value}")

    @staticmethod
    def coerce(value: Union["Strand", int, None]) -> "Strand":
        """Accepts a Strand, an integer strand, or None (meaning plus strand)."""
        if value is None:
            return Strand.PLUS
        if isinstance(value, Strand):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidStrandException(f"Cannot interpret {value!r} as a strand")
        return Strand.from_int(value)

    def __lt__(self, other):
        if not type(other) is Strand:
            raise ValueError("Cannot compare {} to {}".format(type(self).__name__, type(other).__name__))
        return self.value > other.value

    def reverse(self) -> "Strand":
        """Returns the opposite of this Strand"""
        if self == Strand.PLUS:
            return Strand.MINUS
        return Strand.PLUS

    def relative_to(self, other: "Strand") -> "Strand":
        """Returns the orientation of this strand relative to the given other strand.
        Note: this operator is commutative.
        """
        if self == other:
            return Strand.PLUS
        return Strand.MINUS

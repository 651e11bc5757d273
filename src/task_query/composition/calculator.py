"""
Calculator Capability.

A capability with four abstract operations and one default built on them.
BasicCalculator supplies integer arithmetic and inherits remainder().
"""

from __future__ import annotations

from abc import abstractmethod

from task_query.composition.capability import Capability, default
from task_query.errors import InvalidArgument


class Calculator(Capability):
    """Integer arithmetic with a default remainder()."""

    @staticmethod
    def get_instance() -> "Calculator":
        return BasicCalculator()

    @abstractmethod
    def add(self, first: int, second: int) -> int:
        ...

    @abstractmethod
    def subtract(self, first: int, second: int) -> int:
        ...

    @abstractmethod
    def divide(self, number: int, divisor: int) -> int:
        ...

    @abstractmethod
    def multiply(self, first: int, second: int) -> int:
        ...

    @default
    def remainder(self, number: int, divisor: int) -> int:
        return self.subtract(number, self.multiply(divisor, self.divide(number, divisor)))


class BasicCalculator(Calculator):
    """Calculator truncating division toward zero."""

    def add(self, first: int, second: int) -> int:
        return first + second

    def subtract(self, first: int, second: int) -> int:
        return first - second

    def divide(self, number: int, divisor: int) -> int:
        if divisor == 0:
            raise InvalidArgument("Divisor can't be zero", field="divisor")
        quotient = abs(number) // abs(divisor)
        return quotient if (number >= 0) == (divisor > 0) else -quotient

    def multiply(self, first: int, second: int) -> int:
        return first * second

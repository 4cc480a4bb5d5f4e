"""Scalar fields: the element types a matrix can hold and their operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Field(ABC):
    """The arithmetic, formatting and parsing rules for one element type."""

    name: str = "field"

    @abstractmethod
    def zero(self) -> Any:
        """Return the additive identity."""

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Return ``a + b``."""

    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """Return ``a * b``."""

    @abstractmethod
    def format(self, value: Any) -> str:
        """Render one element as text."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Read one element from text, raising ValueError if it is not valid."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntField(Field):
    """Integers."""

    name = "int"

    def zero(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return a + b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def format(self, value: int) -> str:
        return "%d" % value

    def parse(self, text: str) -> int:
        try:
            return int(text.strip())
        except (TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"not an integer: {text!r}") from exc


class DoubleField(Field):
    """Double-precision floating-point numbers."""

    name = "double"

    def zero(self) -> float:
        return 0.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def format(self, value: float) -> str:
        return "%g" % value

    def parse(self, text: str) -> float:
        try:
            return float(text.strip())
        except (TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"not a number: {text!r}") from exc


_INT_FIELD = IntField()
_DOUBLE_FIELD = DoubleField()


def of_int() -> IntField:
    """Return the shared integer field."""
    return _INT_FIELD


def of_double() -> DoubleField:
    """Return the shared floating-point field."""
    return _DOUBLE_FIELD
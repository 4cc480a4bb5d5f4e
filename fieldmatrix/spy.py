"""A field wrapper that counts how often each operation is used."""

from __future__ import annotations

from typing import Any

from fieldmatrix.fields import Field


class FieldSpy(Field):
    """Delegates to a real field and counts zero, add, multiply and format calls."""

    def __init__(self, real: Field) -> None:
        if real is None:
            raise ValueError("a spy needs a field to wrap")
        self.real = real
        self.name = real.name
        self.zero_calls = 0
        self.add_calls = 0
        self.multiply_calls = 0
        self.format_calls = 0

    def reset(self) -> None:
        """Set every counter back to zero."""
        self.zero_calls = 0
        self.add_calls = 0
        self.multiply_calls = 0
        self.format_calls = 0

    def zero(self) -> Any:
        self.zero_calls += 1
        return self.real.zero()

    def add(self, a: Any, b: Any) -> Any:
        self.add_calls += 1
        return self.real.add(a, b)

    def multiply(self, a: Any, b: Any) -> Any:
        self.multiply_calls += 1
        return self.real.multiply(a, b)

    def format(self, value: Any) -> str:
        self.format_calls += 1
        return self.real.format(value)

    def parse(self, text: str) -> Any:
        return self.real.parse(text)

    def __repr__(self) -> str:
        return f"FieldSpy({self.real!r})"
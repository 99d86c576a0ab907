"""Exercises on converting text and numbers into records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_U8_MAX = 255
_USIZE_MAX = 2**64 - 1


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer: optional '+', then ASCII digits only, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonError(ValueError):
    """Text could not be parsed into a person."""


class EmptyInput(ParsePersonError):
    """The input text was empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLength(ParsePersonError):
    """The input did not hold exactly two comma-separated fields."""

    def __init__(self) -> None:
        super().__init__("expected exactly two comma-separated fields")


class NoName(ParsePersonError):
    """The name field was empty."""

    def __init__(self) -> None:
        super().__init__("the name field is empty")


class BadAge(ParsePersonError):
    """The age field is not an unsigned integer."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class Person:
    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> "Person":
        """Read "name,age"; fall back to the default person on any problem."""
        fields = text.split(",")
        name = fields[0]
        if not name or len(fields) < 2:
            return cls.default()
        try:
            age = _parse_usize(fields[1])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Read exactly "name,age"; raise a ParsePersonError on any problem."""
        if not text:
            raise EmptyInput()
        fields = text.split(",")
        if len(fields) != 2:
            raise BadLength()
        name, age_text = fields
        if not name:
            raise NoName()
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise BadAge(exc) from exc
        return cls(name=name, age=age)


class IntoColorError(ValueError):
    """Values could not be converted into a colour."""


class ColorBadLength(IntoColorError):
    """The sequence did not hold exactly three components."""

    def __init__(self) -> None:
        super().__init__("a colour needs exactly three components")


class ColorIntConversion(IntoColorError):
    """A component is outside the range 0..=255."""

    def __init__(self, value: int) -> None:
        super().__init__(f"colour component out of range: {value}")
        self.value = value


def _component(value: int) -> int:
    if not 0 <= value <= _U8_MAX:
        raise ColorIntConversion(value)
    return value


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for value in (self.red, self.green, self.blue):
            _component(value)

    @classmethod
    def try_from(cls, value: Sequence[int]) -> "Color":
        """Build a colour from three integers in 0..=255."""
        if len(value) != 3:
            raise ColorBadLength()
        red, green, blue = (_component(component) for component in value)
        return cls(red=red, green=green, blue=blue)
"""Exercises on raising, wrapping and collecting errors."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

_NUMBERS = (27, 297, 38502, 81)
_U64_MAX = 2**64 - 1


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer the strict way: optional sign, ASCII digits, in range."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity at 5 tokens each plus a fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * cost_per_item + processing_fee
    if not -(2**31) <= cost <= 2**31 - 1:
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


class CreationError(ValueError):
    """A number could not be made into a positive non-zero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: "CreationError.Kind") -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed, or the number was not positive."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one cause must be given")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> "ParsePosNonzeroError":
        return cls(creation=err)

    @classmethod
    def from_parseint(cls, err: ValueError) -> "ParsePosNonzeroError":
        return cls(parse_int=err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    try:
        number = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parseint(exc) from exc
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc


class DivisionError(ArithmeticError):
    """A division that could not be carried out."""


class NotDivisibleError(DivisionError):
    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """a divided by b when there is no positive remainder; quotients truncate toward zero."""
    if b == 0:
        raise DivideByZeroError()
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    remainder = a - b * quotient
    if remainder > 0:
        raise NotDivisibleError(a, b)
    return quotient


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27; the first failure is raised."""
    return [divide(number, 27) for number in _NUMBERS]


def _divide_or_error(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each failure in place."""
    return [_divide_or_error(number, 27) for number in _NUMBERS]


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit num, refusing results beyond 64 bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result
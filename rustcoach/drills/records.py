"""Exercises on records, tagged messages and recursive lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

GradeT = TypeVar("GradeT")

_U8_MAX = 255


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be between 0 and {_U8_MAX}, got {value}")


@dataclass
class ReportCard(Generic[GradeT]):
    """A student's report card; the grade may be a number or a letter."""

    grade: GradeT
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        _check_u8("student_age", self.student_age)

    def print(self) -> str:
        """The report card as one line of text."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """The order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A package to ship; it must weigh at least 10 grams."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8("x", self.x)
        _check_u8("y", self.y)


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        if len(self.color) != 3:
            raise ValueError("color must have three components")
        for component in self.color:
            _check_u8("color component", component)


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Move | Echo | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int]
    position: Point
    quit: bool
    message: str

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(color):
                self.color = tuple(color)
            case Quit():
                self.quit = True
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with strictly positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: "Cons | Nil"


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(1, Nil())
"""Exercises on strings and string commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class Command:
    """A transformation applied to a string."""

    def apply(self, text: str) -> str:
        raise TypeError(f"{type(self).__name__} is not a concrete command")


@dataclass(frozen=True)
class Uppercase(Command):
    def apply(self, text: str) -> str:
        return text.upper()


@dataclass(frozen=True)
class Trim(Command):
    def apply(self, text: str) -> str:
        return text.strip()


@dataclass(frozen=True)
class Append(Command):
    """Append "bar" the given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    def apply(self, text: str) -> str:
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in items]


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" becomes "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    return "".join(capitalize_first(word) for word in words)


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add "Bar" as a new item of a list."""
    if isinstance(value, str):
        return value + "Bar"
    if isinstance(value, list):
        return [*value, "Bar"]
    raise TypeError(f"cannot append Bar to {type(value).__name__}")
"""Small string, number and vector helpers shared by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float
    y: float


def endswith(text: Optional[str], suffix: Optional[str]) -> bool:
    """Tell whether ``text`` ends with a non-empty ``suffix``.

    Missing or empty arguments never match.
    """
    if not text or not suffix:
        return False
    return text.endswith(suffix)


def split_with_set(text: str, separators: str) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def char_count(text: Optional[str], char: str) -> int:
    """Count occurrences of ``char`` in ``text``.

    An empty ``char`` stands for the string terminator, which every
    string holds exactly once.
    """
    if char == "":
        return 1
    if text is None:
        return 0
    return sum(1 for c in text if c == char)


def is_same_str(first: Optional[str], second: Optional[str]) -> bool:
    """Tell whether both strings exist and are equal."""
    return first is not None and second is not None and first == second


def is_only_digits(text: str) -> bool:
    """Tell whether every character is an ASCII digit (true for empty text)."""
    return all(c in _DIGITS for c in text)


def has_non_space(text: str) -> bool:
    """Tell whether ``text`` holds at least one non-whitespace character."""
    return any(c not in _SPACES for c in text)


def clamp(value: float, low: float, high: float) -> float:
    """Bound ``value`` to ``[low, high]``; ``low`` wins if the bounds cross."""
    if value > high:
        value = high
    if value < low:
        value = low
    return value


def distance_between(first: Vec2, second: Vec2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(second.x - first.x, second.y - first.y)


def normalize_vector(vec: Vec2) -> Vec2:
    """Scale ``vec`` to unit length; the zero vector is returned unchanged."""
    magnitude = math.hypot(vec.x, vec.y)
    if magnitude == 0:
        return vec
    return Vec2(vec.x / magnitude, vec.y / magnitude)


def itoa(number: int) -> str:
    """Decimal text of an integer."""
    return str(int(number))


def find_first(
    items: Iterable[T],
    predicate: Optional[Callable[[T, Any], bool]],
    data: Any,
) -> Optional[T]:
    """Return the first item for which ``predicate(item, data)`` is true.

    Without a predicate the first item is returned. ``None`` when nothing
    matches or ``items`` is empty.
    """
    for item in items:
        if predicate is None or predicate(item, data) is True:
            return item
    return None


def is_between(pos: Vec2, low: Vec2, high: Vec2) -> bool:
    """Tell whether ``pos`` lies in the box from ``low`` to ``high``, inclusive."""
    return low.x <= pos.x <= high.x and low.y <= pos.y <= high.y
"""Dice rolls and their text pictures."""

from __future__ import annotations

import random

_FRAME = "-----"

_FACES: dict[int, tuple[str, str, str]] = {
    1: ("|   |", "| o |", "|   |"),
    2: ("|o  |", "|   |", "|  o|"),
    3: ("|o  |", "| o |", "|  o|"),
    4: ("|o o|", "|   |", "|o o|"),
    5: ("|o o|", "| o |", "|o o|"),
    6: ("|o o|", "|o o|", "|o o|"),
}


def _generator(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def roll_six(rng: random.Random | None = None) -> int:
    """Roll a six-sided die and return a value from 1 to 6."""
    return _generator(rng).randint(1, 6)


def roll_twelve(rng: random.Random | None = None) -> int:
    """Roll a twelve-sided die and return a value from 1 to 12."""
    return _generator(rng).randint(1, 12)


def die_face(value: int) -> tuple[str, ...]:
    """Return the five text lines that picture a six-sided die showing ``value``."""
    try:
        rows = _FACES[value]
    except (KeyError, TypeError):
        raise ValueError(f"a six-sided die cannot show {value!r}") from None
    return (_FRAME, *rows, _FRAME)
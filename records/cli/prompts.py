# /academic-records/records/cli/prompts.py

"""Console input helpers. Malformed numbers surface as InvalidInputError."""

import math
from typing import Callable

from ..core.exceptions import InvalidInputError

InputFn = Callable[[str], str]

# Whole numbers are held in fixed-width integer fields (seats, class ids).
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def read_text(input_fn: InputFn, prompt: str) -> str:
    return input_fn(prompt).strip()


def read_int(input_fn: InputFn, prompt: str) -> int:
    raw = input_fn(prompt).strip()
    try:
        value = int(raw)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not a whole number.")
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidInputError(f"'{raw}' is out of range.")
    return value


def read_float(input_fn: InputFn, prompt: str) -> float:
    raw = input_fn(prompt).strip().replace(",", ".")
    try:
        value = float(raw)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not a number.")
    if not math.isfinite(value):
        raise InvalidInputError(f"'{raw}' is not a finite number.")
    return value

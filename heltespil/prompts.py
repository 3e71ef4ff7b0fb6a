"""Reading validated numbers from the player."""

from __future__ import annotations

import re
import sys
from typing import Callable

_INTEGER = re.compile(r"\s*([+-]?\d+)\s*")


def read_int(
    low: int,
    high: int,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> int:
    """Keep asking until a whole number between low and high is entered."""
    read = read if read is not None else input
    write = write if write is not None else sys.stdout.write
    while True:
        match = _INTEGER.fullmatch(read())
        if match:
            value = int(match.group(1))
            if low <= value <= high:
                return value
        write(f"Indtast venligst et tal mellem {low} og {high}: ")
import logging
from collections import defaultdict
from enum import IntEnum
from typing import Optional

import numpy as np

import config
from errors import InvalidLength

logger = logging.getLogger(__name__)


class Classification(IntEnum):
    """
    Per-cell verdict.
    0 = Grey, 1 = Yellow, 2 = Green for submitted rows;
    the negative values only ever show up on the row being typed.
    """
    UNSET = -2
    PENDING = -1
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


_PATTERN_CHARS = {
    Classification.EXACT: "G",
    Classification.PRESENT: "Y",
    Classification.ABSENT: "B",
    Classification.PENDING: ".",
    Classification.UNSET: "_",
}


def evaluate(secret: str, guess: str, length: int = config.WORD_LENGTH,
             fail_closed: Optional[bool] = None) -> list[Classification]:
    """
    Calculates the colour pattern of `guess` against `secret`.
    Duplicate letters are only credited as often as they occur in the secret.
    """
    if fail_closed is None:
        fail_closed = config.FAIL_CLOSED

    if len(secret) != length or len(guess) != length:
        if fail_closed:
            logger.warning("Length mismatch (%r vs %r), answering all absent", secret, guess)
            return [Classification.ABSENT] * length
        raise InvalidLength(length, secret, guess)

    response = [Classification.ABSENT] * length  # Start with all Grey
    remaining = defaultdict(int)

    # 1. First pass: Greens, everything else goes into the unconsumed pool
    for i in range(length):
        if guess[i] == secret[i]:
            response[i] = Classification.EXACT
        else:
            remaining[secret[i]] += 1

    # 2. Second pass: Yellows, each one consumes a letter from the pool
    for i in range(length):
        if response[i] == Classification.EXACT:
            continue
        if remaining[guess[i]] > 0:
            response[i] = Classification.PRESENT
            remaining[guess[i]] -= 1

    return response


def classify_row(secret: str, text: str, row: int, active_row: int,
                 length: int = config.WORD_LENGTH) -> list[Classification]:
    # Rows before the active one are frozen and get scored
    if row < active_row:
        return evaluate(secret, text, length)
    if row == active_row:
        return [Classification.PENDING if i < len(text) else Classification.UNSET
                for i in range(length)]
    return [Classification.UNSET] * length


def response_to_str(response: list[Classification]) -> str:
    return "".join(_PATTERN_CHARS[Classification(code)] for code in response)


def response_to_int(response: list[Classification]) -> int:
    """Base 3 pattern code, first letter is the most significant digit."""
    codes = np.asarray([int(code) for code in response], dtype=np.int64)
    if (codes < 0).any():
        raise ValueError("only submitted rows have a pattern code")
    weights = 3 ** np.arange(len(codes) - 1, -1, -1, dtype=np.int64)
    return int(codes @ weights)

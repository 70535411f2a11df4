from enum import IntEnum

import numpy as np

import config
from wordHandle import evaluate


class LetterHint(IntEnum):
    UNUSED = -1
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


def aggregate(secret: str, submitted: list[str]) -> dict[str, LetterHint]:
    """
    Folds every submitted guess into one hint per letter of the alphabet.
    A letter only ever moves up: unused < absent < present < exact.
    Only pass frozen rows here, the row being typed has no verdict yet.
    """
    hints = np.full(len(config.ALPHABET), LetterHint.UNUSED, dtype=np.int8)

    for guess in submitted:
        response = evaluate(secret, guess)
        positions = [config.ALPHABET.index(char) for char in guess]
        # maximum.at is unbuffered, so a letter typed twice in one guess keeps its best code
        np.maximum.at(hints, positions, np.asarray(response, dtype=np.int8))

    return {letter: LetterHint(int(code)) for letter, code in zip(config.ALPHABET, hints)}

import logging
import random
from typing import List, Optional

import config
from errors import InvalidLength

logger = logging.getLogger(__name__)


def validate_secret(word: str) -> str:
    if len(word) != config.WORD_LENGTH:
        raise InvalidLength(config.WORD_LENGTH, word)
    if not all(char in config.ALPHABET for char in word):
        raise ValueError(f"secret must be lowercase a-z only, got {word!r}")
    return word


def load_answers(path: str = config.ANSWERS_PATH) -> List[str]:
    """
    Read the answers file, one word per line.
    Empty lines and words of the wrong length are skipped.
    """
    words: List[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            s = line.strip().lower()
            if len(s) == config.WORD_LENGTH and s.isalpha():
                words.append(s)
    logger.debug("Loaded %d answers from %s", len(words), path)
    return words


def pick_secret(answers: Optional[List[str]] = None, rng: Optional[random.Random] = None) -> str:
    if not answers:
        return config.DEFAULT_SECRET
    rng = rng or random
    return validate_secret(rng.choice(answers))


class WordProvider:
    """Hands out one secret per session."""

    def __init__(self, answers: Optional[List[str]] = None, seed: Optional[int] = None):
        self.answers = answers if answers is not None else []
        self.rng = random.Random(seed)

    @classmethod
    def from_file(cls, path: str = config.ANSWERS_PATH, seed: Optional[int] = None) -> "WordProvider":
        return cls(load_answers(path), seed)

    def __call__(self) -> str:
        return pick_secret(self.answers, self.rng)

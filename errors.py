class InvalidLength(ValueError):
    """A word did not have the length the game is played with."""

    def __init__(self, expected: int, *words: str):
        self.expected = expected
        self.words = words
        super().__init__(f"expected {expected} letters, got {[len(w) for w in words]}")


class IllegalTransition(Exception):
    """A state machine operation that is not allowed in the current state."""

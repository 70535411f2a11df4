import functools
import logging
from types import MappingProxyType
from typing import Callable, Optional

import config
import gating
import keyboard
import wordHandle
from errors import IllegalTransition
from state import Outcome, SessionState, Snapshot
from words import validate_secret

logger = logging.getLogger(__name__)

STATUS_WIN = "Win"
STATUS_LOSS = "Loss"
STATUS_NEXT = "Next Turn"
STATUS_REJECTED = "Rejected"

DELETE_KEYS = ("backspace", "delete", "undo")
SUBMIT_KEYS = ("return", "enter")


def _transition(rejected):
    """
    Runs a transition; an IllegalTransition raised inside turns into `rejected`.
    Callers never see the exception.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args):
            try:
                result = method(self, *args)
            except IllegalTransition as e:
                logger.debug("%s rejected: %s", method.__name__, e)
                return rejected
            logger.debug("%s -> row %d %r", method.__name__, self.state.active_row, self.state.active_buffer())
            return result
        return wrapper
    return decorator


class Game:
    """
    The Controller.
    Owns the session state and is the only thing that changes it.
    """
    def __init__(self, secret: Optional[str] = None, provider: Optional[Callable[[], str]] = None):
        self.provider = provider
        self.state = None
        self.new_game(secret)

    def new_game(self, secret: Optional[str] = None):
        # A fresh State object rather than resetting fields one by one
        if secret is None:
            secret = self.provider() if self.provider is not None else config.DEFAULT_SECRET
        self.state = SessionState(secret=validate_secret(secret.lower()))
        logger.debug("New game started")

    # --- Guards ---

    def _require_playing(self):
        if self.state.is_over:
            raise IllegalTransition("game is over")
        if not self.state.has_active_row():
            raise IllegalTransition("no active row")

    # --- Transitions ---

    @_transition(rejected=False)
    def type_char(self, char: str) -> bool:
        self._require_playing()
        char = char.lower()
        if len(char) != 1 or char not in config.ALPHABET:
            raise IllegalTransition(f"not a letter: {char!r}")
        if not gating.can_type_more(self.state, self.state.active_row):
            raise IllegalTransition("row is full")

        self.state.rows[self.state.active_row] += char
        return True

    @_transition(rejected=False)
    def delete_char(self) -> bool:
        self._require_playing()
        if gating.is_row_empty(self.state, self.state.active_row):
            raise IllegalTransition("row is empty")

        row = self.state.active_row
        self.state.rows[row] = self.state.rows[row][:-1]
        return True

    @_transition(rejected=STATUS_REJECTED)
    def submit_row(self) -> str:
        self._require_playing()
        if not gating.is_row_full(self.state, self.state.active_row):
            raise IllegalTransition("row is not full")

        guess = self.state.active_buffer()
        # Every accepted submit freezes the row by moving past it
        self.state.active_row += 1

        if guess == self.state.secret:
            return self._finish(Outcome.WIN)
        if self.state.active_row == config.MAX_ROWS:
            return self._finish(Outcome.LOSS)
        return STATUS_NEXT

    def _finish(self, outcome: Outcome) -> str:
        self.state.is_over = True
        self.state.outcome = outcome
        logger.info("Game over: %s after %d guesses", outcome.value, self.state.active_row)
        return STATUS_WIN if outcome is Outcome.WIN else STATUS_LOSS

    # --- Input Events ---

    def add_guess(self, guess: str) -> str:
        """Type a whole word into the active row, then submit it."""
        guess = guess.lower()
        if len(guess) != config.WORD_LENGTH or not all(char in config.ALPHABET for char in guess):
            logger.debug("add_guess rejected: %r", guess)
            return STATUS_REJECTED

        while self.delete_char():
            pass
        for char in guess:
            self.type_char(char)
        return self.submit_row()

    def press(self, key: str):
        """Maps a key name from a front end onto one transition."""
        key = key.lower()
        if key in DELETE_KEYS:
            return self.delete_char()
        if key in SUBMIT_KEYS:
            return self.submit_row()
        return self.type_char(key)

    # --- Read Side ---

    @property
    def outcome(self) -> Outcome:
        return self.state.outcome

    def snapshot(self) -> Snapshot:
        state = self.state
        cells = tuple(
            tuple(wordHandle.classify_row(state.secret, text, row, state.active_row))
            for row, text in enumerate(state.rows)
        )
        hints = keyboard.aggregate(state.secret, state.submitted_rows())

        return Snapshot(
            rows=tuple(state.rows),
            cells=cells,
            keyboard=MappingProxyType(hints),
            gates=gating.gates(state),
            active_row=state.active_row,
            is_over=state.is_over,
            outcome=state.outcome,
            answer=state.secret if state.is_over else None,
        )

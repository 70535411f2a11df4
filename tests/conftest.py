import pytest

import config
import game


@pytest.fixture
def g():
    return game.Game(secret="taffy")


@pytest.fixture
def type_word():
    def _type(g, word):
        for char in word:
            g.type_char(char)
    return _type


@pytest.fixture
def lost_game(g):
    for _ in range(config.MAX_ROWS):
        g.add_guess("fatty")
    return g


@pytest.fixture(autouse=True)
def strict_evaluator(monkeypatch):
    monkeypatch.setattr(config, "FAIL_CLOSED", False)

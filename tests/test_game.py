import pytest

import config
import game
from errors import InvalidLength
from state import Outcome
from wordHandle import Classification


def test_new_game_is_empty(g):
    assert g.state.rows == [""] * config.MAX_ROWS
    assert g.state.active_row == 0
    assert not g.state.is_over
    assert g.outcome is Outcome.NONE


def test_type_and_delete(g):
    assert g.type_char("t")
    assert g.type_char("A")
    assert g.state.active_buffer() == "ta"
    assert g.delete_char()
    assert g.state.active_buffer() == "t"


def test_type_past_word_length_is_noop(g, type_word):
    type_word(g, "taffy")
    assert not g.type_char("x")
    assert g.state.active_buffer() == "taffy"


def test_non_letters_are_rejected(g):
    assert not g.type_char("1")
    assert not g.type_char("shift")
    assert not g.type_char("")
    assert g.state.active_buffer() == ""


def test_delete_on_empty_row_is_noop(g):
    assert not g.delete_char()
    assert g.state.rows == [""] * config.MAX_ROWS


def test_submit_partial_row_is_noop(g, type_word):
    type_word(g, "taf")
    assert g.submit_row() == game.STATUS_REJECTED
    assert g.state.active_row == 0
    assert g.state.active_buffer() == "taf"


def test_submit_advances_row(g, type_word):
    type_word(g, "fatty")
    assert g.submit_row() == game.STATUS_NEXT
    assert g.state.active_row == 1
    assert g.state.submitted_rows() == ["fatty"]
    assert not g.state.is_over


def test_submitted_row_is_frozen(g, type_word):
    type_word(g, "fatty")
    g.submit_row()
    assert not g.delete_char()
    g.type_char("t")
    assert g.state.rows[0] == "fatty"
    assert g.state.rows[1] == "t"


def test_win_on_first_row(g, type_word):
    type_word(g, "taffy")
    assert g.submit_row() == game.STATUS_WIN
    assert g.state.is_over
    assert g.outcome is Outcome.WIN
    assert g.state.active_row == 1

    snapshot = g.snapshot()
    assert list(snapshot.cells[0]) == [Classification.EXACT] * 5
    assert snapshot.answer == "taffy"


def test_win_on_last_row(g):
    for _ in range(config.MAX_ROWS - 1):
        g.add_guess("fatty")
    assert g.add_guess("taffy") == game.STATUS_WIN
    assert g.outcome is Outcome.WIN


def test_loss_after_last_row(g):
    for _ in range(config.MAX_ROWS - 1):
        assert g.add_guess("fatty") == game.STATUS_NEXT
    assert g.add_guess("fatty") == game.STATUS_LOSS
    assert g.state.is_over
    assert g.outcome is Outcome.LOSS
    assert g.state.active_row == config.MAX_ROWS


def test_everything_is_noop_once_over(lost_game):
    before = list(lost_game.state.rows)
    assert not lost_game.type_char("a")
    assert not lost_game.delete_char()
    assert lost_game.submit_row() == game.STATUS_REJECTED
    assert lost_game.add_guess("taffy") == game.STATUS_REJECTED
    assert lost_game.state.rows == before
    assert lost_game.outcome is Outcome.LOSS


def test_noop_after_win(g):
    g.add_guess("taffy")
    assert not g.type_char("a")
    assert g.state.rows[1] == ""


def test_add_guess_replaces_partial_row(g, type_word):
    type_word(g, "xyz")
    assert g.add_guess("fatty") == game.STATUS_NEXT
    assert g.state.rows[0] == "fatty"


def test_add_guess_too_short(g):
    assert g.add_guess("taf") == game.STATUS_REJECTED
    assert g.state.active_row == 0


def test_add_guess_too_long(g):
    assert g.add_guess("taffyx") == game.STATUS_REJECTED
    assert g.state.active_row == 0
    assert g.state.rows[0] == ""
    assert g.outcome is Outcome.NONE


def test_add_guess_with_non_letter(g, type_word):
    type_word(g, "ta")
    assert g.add_guess("ta1ffy") == game.STATUS_REJECTED
    assert g.add_guess("taf1y") == game.STATUS_REJECTED
    # the row being typed is left alone
    assert g.state.active_buffer() == "ta"
    assert not g.state.is_over


def test_add_guess_is_case_insensitive(g):
    assert g.add_guess("TAFFY") == game.STATUS_WIN


def test_press_maps_keys(g):
    for key in "taff":
        assert g.press(key)
    assert g.press("Y")
    assert g.press("BackSpace")
    assert g.state.active_buffer() == "taff"
    g.press("y")
    assert g.press("Return") == game.STATUS_WIN


def test_press_unknown_key(g):
    assert not g.press("Shift_L")


def test_snapshot_cells(g, type_word):
    g.add_guess("fatty")
    type_word(g, "ta")
    snapshot = g.snapshot()

    assert snapshot.rows[0] == "fatty"
    assert [int(c) for c in snapshot.cells[0]] == [1, 2, 1, 0, 2]
    assert list(snapshot.cells[1]) == [Classification.PENDING] * 2 + [Classification.UNSET] * 3
    assert list(snapshot.cells[2]) == [Classification.UNSET] * 5
    assert snapshot.answer is None
    assert snapshot.outcome is Outcome.NONE


def test_snapshot_keyboard_ignores_row_in_progress(g, type_word):
    type_word(g, "zzz")
    snapshot = g.snapshot()
    assert snapshot.keyboard["z"].name == "UNUSED"


def test_snapshot_is_read_only(g):
    snapshot = g.snapshot()
    with pytest.raises(TypeError):
        snapshot.keyboard["a"] = 2
    with pytest.raises(AttributeError):
        snapshot.is_over = True


def test_snapshot_does_not_follow_later_moves(g):
    snapshot = g.snapshot()
    g.type_char("t")
    assert snapshot.rows[0] == ""


def test_secret_from_provider():
    g = game.Game(provider=lambda: "HORSE")
    assert g.state.secret == "horse"
    g.new_game("zebra")
    assert g.state.secret == "zebra"
    assert g.state.rows == [""] * config.MAX_ROWS


def test_bad_secret_rejected():
    with pytest.raises(InvalidLength):
        game.Game(secret="toolong")
    with pytest.raises(ValueError):
        game.Game(secret="ab1de")

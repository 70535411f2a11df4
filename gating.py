"""
Which controls are live right now.
Everything here is recomputed from the state on demand, nothing is stored.
"""
import config
from state import Gates, SessionState


def _is_active(state: SessionState, row: int) -> bool:
    return row == state.active_row and state.has_active_row()


def is_row_full(state: SessionState, row: int) -> bool:
    return _is_active(state, row) and len(state.rows[row]) == config.WORD_LENGTH


def is_row_empty(state: SessionState, row: int) -> bool:
    return _is_active(state, row) and len(state.rows[row]) == 0


def can_type_more(state: SessionState, row: int) -> bool:
    return _is_active(state, row) and len(state.rows[row]) < config.WORD_LENGTH


def _playing(state: SessionState) -> bool:
    return not state.is_over and state.has_active_row()


def can_submit(state: SessionState) -> bool:
    return _playing(state) and is_row_full(state, state.active_row)


def can_delete(state: SessionState) -> bool:
    return _playing(state) and not is_row_empty(state, state.active_row)


def can_type(state: SessionState) -> bool:
    return _playing(state) and can_type_more(state, state.active_row)


def gates(state: SessionState) -> Gates:
    row = state.active_row
    return Gates(
        can_type=can_type(state),
        can_delete=can_delete(state),
        can_submit=can_submit(state),
        row_full=is_row_full(state, row),
        row_empty=is_row_empty(state, row),
        can_type_more=can_type_more(state, row),
    )

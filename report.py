import pandas as pd

import config
from state import Outcome, Snapshot
from wordHandle import Classification, response_to_int, response_to_str

_SHARE_SQUARES = {
    Classification.EXACT: "\N{LARGE GREEN SQUARE}",
    Classification.PRESENT: "\N{LARGE YELLOW SQUARE}",
    Classification.ABSENT: "\N{WHITE LARGE SQUARE}",
}

HISTORY_COLUMNS = ["row", "guess", "pattern", "code", "exact", "present", "absent"]


def history_frame(snapshot: Snapshot) -> pd.DataFrame:
    """One line per submitted guess, in the order they were played."""
    records = []
    for row in range(snapshot.active_row):
        cells = list(snapshot.cells[row])
        records.append({
            "row": row + 1,
            "guess": snapshot.rows[row],
            "pattern": response_to_str(cells),
            "code": response_to_int(cells),
            "exact": cells.count(Classification.EXACT),
            "present": cells.count(Classification.PRESENT),
            "absent": cells.count(Classification.ABSENT),
        })
    return pd.DataFrame.from_records(records, columns=HISTORY_COLUMNS)


def share_text(snapshot: Snapshot) -> str:
    score = str(snapshot.active_row) if snapshot.outcome is Outcome.WIN else "X"
    lines = [f"Wordle {score}/{config.MAX_ROWS}", ""]
    for row in range(snapshot.active_row):
        lines.append("".join(_SHARE_SQUARES[cell] for cell in snapshot.cells[row]))
    return "\n".join(lines)

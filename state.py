from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

import config


class Outcome(Enum):
    NONE = "none"
    WIN = "win"
    LOSS = "loss"


@dataclass
class SessionState:
    """
    Holds ONLY the data of one session.
    It does not know about rules, scoring or where the secret came from.
    """
    secret: str
    rows: list[str] = field(default_factory=lambda: [""] * config.MAX_ROWS)
    active_row: int = 0
    is_over: bool = False
    outcome: Outcome = Outcome.NONE

    # Helper to get the rows that are frozen
    def submitted_rows(self) -> list[str]:
        return self.rows[:self.active_row]

    def has_active_row(self) -> bool:
        return self.active_row < len(self.rows)

    def active_buffer(self) -> str:
        if not self.has_active_row():
            return ""
        return self.rows[self.active_row]


@dataclass(frozen=True)
class Gates:
    can_type: bool
    can_delete: bool
    can_submit: bool
    row_full: bool
    row_empty: bool
    can_type_more: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the front ends after every operation."""
    rows: tuple
    cells: tuple
    keyboard: Mapping
    gates: Gates
    active_row: int
    is_over: bool
    outcome: Outcome
    answer: Optional[str] = None

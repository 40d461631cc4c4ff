"""
history.py
==========
Append-only store of completed matches.

Records live in a single JSON array file, most recent first. There is no
update or delete path. Reads fail open: a missing, unreadable or corrupt file
is treated as an empty history. Writes never raise; a failed save is logged
and reported through the return value so ongoing play is unaffected.

The logger name for this module is ``shuttle.history``.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError

from shuttle.lineup import MatchSetup
from shuttle.types import TEAM_A, TEAM_B, MatchState

logger = logging.getLogger("shuttle.history")


class MatchRecord(BaseModel):
    """
    Summary of one completed match.

    Fields:
        timestamp:   When the match ended (UTC).
        team_a:      Team A display name, partners joined with " & ".
        team_b:      Team B display name.
        score_a:     Team A points in the state at the final rally.
        score_b:     Team B points in the state at the final rally.
        sets_won_a:  Games won by team A.
        sets_won_b:  Games won by team B.
        match_winner: "A" or "B".
        game_type:   "singles" or "doubles".
    """

    timestamp: datetime
    team_a: str
    team_b: str
    score_a: int
    score_b: int
    sets_won_a: int
    sets_won_b: int
    match_winner: Literal["A", "B"]
    game_type: Literal["singles", "doubles"]

    def winner_name(self) -> str:
        return self.team_a if self.match_winner == TEAM_A else self.team_b


def build_record(
    state: MatchState,
    setup: MatchSetup,
    timestamp: Optional[datetime] = None,
) -> MatchRecord:
    """Summarise a finished match for storage."""
    if not state.is_finished:
        raise ValueError("Cannot record a match that is still in progress")

    return MatchRecord(
        timestamp=timestamp or datetime.now(timezone.utc),
        team_a=setup.display_name(TEAM_A),
        team_b=setup.display_name(TEAM_B),
        score_a=state.score_a,
        score_b=state.score_b,
        sets_won_a=state.sets_won_a,
        sets_won_b=state.sets_won_b,
        match_winner=state.match_winner,
        game_type=state.game_type,
    )


class HistoryStore:
    """JSON file of MatchRecords, newest first."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[MatchRecord]:
        """Return every stored record, or [] if the file is missing or corrupt."""
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable match history %s: %s", self.path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring match history %s: expected a list, got %s",
                           self.path, type(data).__name__)
            return []

        try:
            return [MatchRecord.model_validate(item) for item in data]
        except ValidationError as e:
            logger.warning("Ignoring invalid match history %s: %d error(s)",
                           self.path, e.error_count())
            return []

    def append(self, record: MatchRecord) -> bool:
        """Prepend ``record`` to the stored list. Returns False if the save failed."""
        records = self.load()
        records.insert(0, record)
        payload = [r.model_dump(mode="json") for r in records]

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save match history to %s", self.path)
            tmp_path.unlink(missing_ok=True)
            return False

        logger.info("Saved match %s vs %s (%d-%d) to %s", record.team_a, record.team_b,
                    record.sets_won_a, record.sets_won_b, self.path)
        return True

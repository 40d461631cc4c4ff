"""Match session: one setup, one engine, and the history store behind them.

The engine never sees names or storage. The session resolves names for
display and saves a record on the rally that ends the match.
"""

import logging
from typing import Optional

from shuttle.engine import MatchEngine
from shuttle.history import HistoryStore, build_record
from shuttle.lineup import MatchSetup
from shuttle.positions import derive_server_name, resolve_court
from shuttle.types import TEAM_A, TEAM_B, CourtView, MatchState

logger = logging.getLogger("shuttle.session")


class MatchSession:
    """Commands a scoreboard may issue: score, undo, reset."""

    def __init__(self, setup: MatchSetup, store: Optional[HistoryStore] = None):
        self.setup = setup
        self.store = store
        self.engine = MatchEngine(
            setup.initial_server,
            setup.game_type,
            setup.initial_server_index,
        )

    @property
    def state(self) -> MatchState:
        return self.engine.state

    def score(self, team: str) -> MatchState:
        was_finished = self.engine.state.is_finished
        state = self.engine.score(team)
        if state.is_finished and not was_finished:
            self._save(state)
        return state

    def undo(self) -> MatchState:
        return self.engine.undo()

    def reset(self) -> MatchState:
        return self.engine.reset_match(
            self.setup.initial_server,
            self.setup.game_type,
            self.setup.initial_server_index,
        )

    def server_name(self, team: str) -> Optional[str]:
        return derive_server_name(self.state, team, self.setup.names(team))

    def court_view(self) -> CourtView:
        return resolve_court(self.state, self.setup.names(TEAM_A), self.setup.names(TEAM_B))

    def _save(self, state: MatchState) -> bool:
        if self.store is None:
            return False
        try:
            record = build_record(state, self.setup)
        except ValueError:
            logger.exception("Could not build a history record")
            return False
        return self.store.append(record)

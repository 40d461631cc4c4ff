"""Match engine: the single owner of the live match state and its undo history.

Public API summary:
    engine = MatchEngine("A", "doubles", initial_server_index=1)
    engine.score("A")          → MatchState
    engine.undo()              → MatchState
    engine.reset_match(...)    → MatchState
    engine.state / engine.history / engine.can_undo

Every score pushes the prior state onto a bounded LIFO history, so undo is a
plain pop instead of an inverse operation.
"""

import logging
from collections import deque

from shuttle.config import ENGINE_CONFIG, EngineConfig
from shuttle.rules import create_match, score_rally
from shuttle.types import SINGLES, TEAM_A, MatchState

logger = logging.getLogger("shuttle.engine")


class MatchEngine:
    """Rally-by-rally scoring for one match session."""

    def __init__(
        self,
        initial_server: str = TEAM_A,
        game_type: str = SINGLES,
        initial_server_index: int = 0,
        config: EngineConfig = ENGINE_CONFIG,
    ):
        self._config = config
        self._state = create_match(initial_server, game_type, initial_server_index)
        self._history: deque = deque(maxlen=config.undo_depth)

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def history(self) -> tuple:
        """Prior states, oldest first."""
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def score(self, winner: str) -> MatchState:
        """Award the rally to ``winner``. No-op once the match is over."""
        if self._state.is_finished:
            logger.debug("Ignoring rally for %s: match already won by %s",
                         winner, self._state.match_winner)
            return self._state

        previous = self._state
        new_state = score_rally(previous, winner)
        self._history.append(previous)
        self._state = new_state

        logger.debug("Rally to %s: %d-%d (server %s)", winner,
                     new_state.score_a, new_state.score_b, new_state.current_server)

        if new_state.is_finished:
            logger.info("Match won by %s, sets %d-%d", new_state.match_winner,
                        new_state.sets_won_a, new_state.sets_won_b)
        elif new_state.current_set != previous.current_set:
            logger.info("Game %d won by %s, sets %d-%d", previous.current_set, winner,
                        new_state.sets_won_a, new_state.sets_won_b)

        return new_state

    def undo(self) -> MatchState:
        """Restore the state before the most recent rally, if any."""
        if not self._history:
            return self._state

        self._state = self._history.pop()
        logger.debug("Undo: back to %d-%d in game %d", self._state.score_a,
                     self._state.score_b, self._state.current_set)
        return self._state

    def reset_match(
        self,
        initial_server: str = TEAM_A,
        game_type: str = SINGLES,
        initial_server_index: int = 0,
    ) -> MatchState:
        """Start over with a fresh match. History does not survive a reset."""
        state = create_match(initial_server, game_type, initial_server_index)
        self._history.clear()
        self._state = state
        logger.debug("Match reset: %s, %s serves", game_type, initial_server)
        return self._state

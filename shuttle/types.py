"""Core data types for the badminton scoring engine."""

from dataclasses import dataclass
from typing import Optional

TEAM_A = "A"
TEAM_B = "B"
TEAMS = (TEAM_A, TEAM_B)

SINGLES = "singles"
DOUBLES = "doubles"
GAME_TYPES = (SINGLES, DOUBLES)


def other_team(team: str) -> str:
    """Return the opposing team label."""
    return TEAM_B if team == TEAM_A else TEAM_A


@dataclass(frozen=True)
class MatchState:
    """Current match state. Replaced, never edited, on every rally."""
    score_a: int = 0
    score_b: int = 0
    sets_won_a: int = 0
    sets_won_b: int = 0
    current_set: int = 1
    match_winner: Optional[str] = None  # "A", "B" or None
    current_server: str = TEAM_A
    game_type: str = SINGLES
    # Doubles only: index (0 or 1) of the player standing in the right service court
    team_a_player_in_right: int = 0
    team_b_player_in_right: int = 0

    @property
    def is_finished(self) -> bool:
        return self.match_winner is not None

    def score_of(self, team: str) -> int:
        return self.score_a if team == TEAM_A else self.score_b

    def sets_won_of(self, team: str) -> int:
        return self.sets_won_a if team == TEAM_A else self.sets_won_b

    def player_in_right(self, team: str) -> int:
        return self.team_a_player_in_right if team == TEAM_A else self.team_b_player_in_right


@dataclass(frozen=True)
class ServiceBox:
    """Rectangle of the active service court, in court layout units."""
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class CourtAssignment:
    """Where a player stands on screen."""
    side: str      # "near" (team A) or "far" (team B)
    vertical: str  # "top" or "bottom"
    in_right: bool


@dataclass(frozen=True)
class PlayerPosition:
    """A named player placed on the court for display."""
    name: str
    team: str
    index: int
    assignment: CourtAssignment
    marker: tuple  # (x, y) centre of the player marker
    is_server: bool = False


@dataclass(frozen=True)
class CourtView:
    """Everything a court display needs for one render."""
    service_box: Optional[ServiceBox]
    service_court: Optional[str]  # "right", "left" or None once the match is over
    players: tuple  # tuple[PlayerPosition, ...]

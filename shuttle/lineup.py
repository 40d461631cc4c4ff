"""Match setup: team names, mode and first server, validated before play."""

from dataclasses import dataclass
from typing import Sequence

from shuttle.types import DOUBLES, GAME_TYPES, SINGLES, TEAM_A, TEAMS

NAME_SEPARATOR = " & "


class SetupError(ValueError):
    """Raised when a match cannot be started with the given setup."""


@dataclass(frozen=True)
class MatchSetup:
    """Who plays, in which mode, and who serves first."""
    team_a: tuple
    team_b: tuple
    game_type: str = SINGLES
    initial_server: str = TEAM_A
    initial_server_index: int = 0

    def names(self, team: str) -> tuple:
        return self.team_a if team == TEAM_A else self.team_b

    def display_name(self, team: str) -> str:
        """Team names as shown in match history, e.g. "Lee & Chia"."""
        return NAME_SEPARATOR.join(self.names(team))


def _clean_names(team: str, names: Sequence[str], expected: int) -> tuple:
    if isinstance(names, str):
        names = [names]
    cleaned = tuple((n or "").strip() for n in names)
    if len(cleaned) != expected:
        raise SetupError(
            f"Team {team} needs exactly {expected} name(s), got {len(cleaned)}"
        )
    if not all(cleaned):
        raise SetupError(f"Team {team} has an empty player name")
    return cleaned


def build_setup(
    team_a: Sequence[str],
    team_b: Sequence[str],
    game_type: str = SINGLES,
    initial_server: str = TEAM_A,
    initial_server_index: int = 0,
) -> MatchSetup:
    """Validate setup input and return a MatchSetup.

    Names are trimmed and must be non-empty. Singles takes one name per team,
    doubles two. The server index picks which player of the serving team
    starts in the right court and is forced to 0 in singles.

    Raises:
        SetupError: on any invalid field.
    """
    if game_type not in GAME_TYPES:
        raise SetupError(f"Unknown game type: {game_type!r}")
    if initial_server not in TEAMS:
        raise SetupError(f"Initial server must be A or B, got {initial_server!r}")
    if initial_server_index not in (0, 1):
        raise SetupError(f"Initial server index must be 0 or 1, got {initial_server_index!r}")

    expected = 2 if game_type == DOUBLES else 1

    return MatchSetup(
        team_a=_clean_names("A", team_a, expected),
        team_b=_clean_names("B", team_b, expected),
        game_type=game_type,
        initial_server=initial_server,
        initial_server_index=initial_server_index if game_type == DOUBLES else 0,
    )

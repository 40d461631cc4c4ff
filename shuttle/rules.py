"""Scoring rules: one rally in, one new match state out.

BWF rally-point rules:
- Every rally scores a point for its winner
- Receiver winning the rally takes the serve (sideout)
- Doubles: a serving side that wins the rally swaps its players' courts
- Game to 21, win by 2, capped at 30
- Winner of a game serves first in the next one
- Best of three games
"""

from typing import Optional

from shuttle.config import RULES
from shuttle.types import DOUBLES, GAME_TYPES, SINGLES, TEAM_A, TEAMS, MatchState


def _check_team(team: str) -> None:
    if team not in TEAMS:
        raise ValueError(f"Invalid team: {team!r}")


def create_match(
    initial_server: str = TEAM_A,
    game_type: str = SINGLES,
    initial_server_index: int = 0,
) -> MatchState:
    """Create the 0-0 state of a new match.

    The server must stand in the right court at 0-0, so in doubles the
    serving team's right-court index is ``initial_server_index``. The
    receiving team defaults to player 0 on the right. Singles ignores the
    index entirely.
    """
    _check_team(initial_server)
    if game_type not in GAME_TYPES:
        raise ValueError(f"Invalid game type: {game_type!r}")
    if initial_server_index not in (0, 1):
        raise ValueError(f"Invalid server index: {initial_server_index!r}")

    index = initial_server_index if game_type == DOUBLES else 0

    return MatchState(
        current_server=initial_server,
        game_type=game_type,
        team_a_player_in_right=index if initial_server == TEAM_A else 0,
        team_b_player_in_right=index if initial_server != TEAM_A else 0,
    )


def is_game_won(score: int, opponent_score: int) -> bool:
    """True if ``score`` takes the game against ``opponent_score``."""
    if score == RULES.point_cap:
        return True
    return score >= RULES.points_to_win and score - opponent_score >= RULES.win_by


def score_rally(state: MatchState, winner: str) -> MatchState:
    """Award a rally to ``winner`` and return the resulting state.

    A finished match is returned unchanged.
    """
    _check_team(winner)

    if state.is_finished:
        return state

    score_a, score_b = state.score_a, state.score_b
    sets_won_a, sets_won_b = state.sets_won_a, state.sets_won_b
    current_set = state.current_set
    server = state.current_server
    a_in_right = state.team_a_player_in_right
    b_in_right = state.team_b_player_in_right
    match_winner: Optional[str] = None

    is_server_win = winner == server

    if winner == TEAM_A:
        score_a += 1
    else:
        score_b += 1

    if state.game_type == SINGLES:
        # Standing court follows score parity, nothing to store
        if not is_server_win:
            server = winner
    elif is_server_win:
        if server == TEAM_A:
            a_in_right = 1 - a_in_right
        else:
            b_in_right = 1 - b_in_right
    else:
        # Sideout: nobody changes court
        server = winner

    if winner == TEAM_A:
        game_won = is_game_won(score_a, score_b)
    else:
        game_won = is_game_won(score_b, score_a)

    if game_won:
        if winner == TEAM_A:
            sets_won_a += 1
        else:
            sets_won_b += 1

        score_a = score_b = 0
        server = winner
        # Change of ends is not modelled; formations restart with player 0 on the right
        a_in_right = b_in_right = 0

        if max(sets_won_a, sets_won_b) >= RULES.sets_to_win:
            match_winner = winner
        else:
            current_set += 1

    return MatchState(
        score_a=score_a,
        score_b=score_b,
        sets_won_a=sets_won_a,
        sets_won_b=sets_won_b,
        current_set=current_set,
        match_winner=match_winner,
        current_server=server,
        game_type=state.game_type,
        team_a_player_in_right=a_in_right,
        team_b_player_in_right=b_in_right,
    )

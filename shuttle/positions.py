"""Court positions: where the server serves from and where every player stands.

Pure functions of the match state; nothing here is stored. Conventions:
- Team A plays the near (left) half, team B the far (right) half
- The teams face each other, so A's right court is the bottom quadrant
  and B's right court is the top quadrant
- Even score serves from the right court, odd from the left
"""

from typing import Optional, Sequence

from shuttle import court
from shuttle.types import (
    SINGLES,
    TEAM_A,
    TEAM_B,
    CourtAssignment,
    CourtView,
    MatchState,
    PlayerPosition,
    ServiceBox,
)


def _right_court_vertical(team: str, in_right: bool) -> str:
    if team == TEAM_A:
        return "bottom" if in_right else "top"
    return "top" if in_right else "bottom"


def service_court(state: MatchState) -> Optional[str]:
    """Court the serving team serves from: "right", "left" or None after the match."""
    if state.is_finished:
        return None
    return "right" if state.score_of(state.current_server) % 2 == 0 else "left"


def derive_active_service_box(state: MatchState) -> Optional[ServiceBox]:
    """Rectangle of the server's service court, or None once the match is over.

    Singles boxes run to the back line but stop at the singles side line;
    doubles boxes stop at the doubles long service line and use the full width.
    """
    court_side = service_court(state)
    if court_side is None:
        return None

    singles = state.game_type == SINGLES
    server = state.current_server
    is_top = _right_court_vertical(server, court_side == "right") == "top"

    if server == TEAM_A:
        x_start = court.COURT_X if singles else court.COURT_X + court.DOUBLES_LONG_SERVICE_OFFSET
        x_end = court.NET_X - court.SHORT_SERVICE_OFFSET
    else:
        x_start = court.NET_X + court.SHORT_SERVICE_OFFSET
        x_end = court.COURT_X + court.COURT_LENGTH
        if not singles:
            x_end -= court.DOUBLES_LONG_SERVICE_OFFSET

    if is_top:
        y_start = court.COURT_Y
        y_end = court.COURT_Y + court.CENTRE_Y
    else:
        y_start = court.COURT_Y + court.CENTRE_Y
        y_end = court.COURT_Y + court.COURT_WIDTH

    if singles:
        if is_top:
            y_start += court.SINGLES_SIDE_OFFSET
        else:
            y_end -= court.SINGLES_SIDE_OFFSET

    return ServiceBox(x=x_start, y=y_start, w=x_end - x_start, h=y_end - y_start)


def derive_server_name(state: MatchState, team: str, names: Sequence[str]) -> Optional[str]:
    """Name of the player due to serve for ``team`` in doubles.

    None if ``team`` is not serving, or in singles where there is only one
    candidate. Even score means the right-court player serves, odd the partner.
    """
    index = _serving_index(state, team)
    if index is None:
        return None
    return names[index]


def _serving_index(state: MatchState, team: str) -> Optional[int]:
    if state.current_server != team or state.game_type == SINGLES:
        return None
    in_right = state.player_in_right(team)
    return in_right if state.score_of(team) % 2 == 0 else 1 - in_right


def derive_player_court_assignment(team: str, index: int, state: MatchState) -> CourtAssignment:
    """Standing position of doubles player ``index`` of ``team``.

    Reflects the stored right-court pointer only, whoever is serving.
    """
    in_right = index == state.player_in_right(team)
    return CourtAssignment(
        side="near" if team == TEAM_A else "far",
        vertical=_right_court_vertical(team, in_right),
        in_right=in_right,
    )


def derive_singles_court_assignment(team: str, state: MatchState) -> CourtAssignment:
    """Singles players stand by their own score parity (even = right court)."""
    in_right = state.score_of(team) % 2 == 0
    return CourtAssignment(
        side="near" if team == TEAM_A else "far",
        vertical=_right_court_vertical(team, in_right),
        in_right=in_right,
    )


def player_marker_position(assignment: CourtAssignment) -> tuple:
    """(x, y) centre of a player marker for a court assignment."""
    x = court.MARKER_NEAR_X if assignment.side == "near" else court.MARKER_FAR_X
    y = court.MARKER_BOTTOM_Y if assignment.vertical == "bottom" else court.MARKER_TOP_Y
    return (x, y)


def resolve_court(
    state: MatchState,
    team_a_names: Sequence[str],
    team_b_names: Sequence[str],
) -> CourtView:
    """Bundle the service box and every player's position for one render."""
    players = []

    for team, names in ((TEAM_A, team_a_names), (TEAM_B, team_b_names)):
        if state.game_type == SINGLES:
            assignment = derive_singles_court_assignment(team, state)
            players.append(PlayerPosition(
                name=names[0],
                team=team,
                index=0,
                assignment=assignment,
                marker=player_marker_position(assignment),
                is_server=not state.is_finished and state.current_server == team,
            ))
            continue

        server_index = None if state.is_finished else _serving_index(state, team)
        for index in (0, 1):
            assignment = derive_player_court_assignment(team, index, state)
            players.append(PlayerPosition(
                name=names[index],
                team=team,
                index=index,
                assignment=assignment,
                marker=player_marker_position(assignment),
                is_server=index == server_index,
            ))

    return CourtView(
        service_box=derive_active_service_box(state),
        service_court=service_court(state),
        players=tuple(players),
    )

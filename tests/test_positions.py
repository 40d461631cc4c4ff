"""Tests for service box, server and player position derivation."""

import pytest

from shuttle import court
from shuttle.positions import (
    derive_active_service_box,
    derive_player_court_assignment,
    derive_server_name,
    derive_singles_court_assignment,
    player_marker_position,
    resolve_court,
    service_court,
)
from shuttle.rules import create_match, score_rally
from shuttle.types import MatchState, ServiceBox

A_NAMES = ("Lee", "Chia")
B_NAMES = ("Kim", "Seo")


def test_no_box_after_match():
    """Finished match shows no service box."""
    state = MatchState(sets_won_a=2, match_winner="A")
    assert derive_active_service_box(state) is None
    assert service_court(state) is None


@pytest.mark.parametrize("server, score_a, score_b, expected", [
    ("A", 0, 0, "right"),
    ("A", 3, 0, "left"),
    ("B", 5, 8, "right"),
    ("B", 0, 11, "left"),
])
def test_service_court_follows_server_parity(server, score_a, score_b, expected):
    """Even score serves from the right court, odd from the left."""
    state = MatchState(score_a=score_a, score_b=score_b, current_server=server)
    assert service_court(state) == expected


def test_singles_box_team_a_even():
    """A serving on an even score: bottom quadrant, back line to short line."""
    box = derive_active_service_box(MatchState(current_server="A"))
    assert box == ServiceBox(x=50, y=355, w=472, h=259)


def test_singles_box_team_a_odd():
    """A serving on an odd score: top quadrant, inset by the singles side line."""
    box = derive_active_service_box(MatchState(score_a=1, current_server="A"))
    assert box == ServiceBox(x=50, y=96, w=472, h=259)


def test_singles_box_team_b_even():
    """B's right court is the top quadrant of the far half."""
    box = derive_active_service_box(MatchState(current_server="B"))
    assert box == ServiceBox(x=918, y=96, w=472, h=259)


def test_doubles_box_team_a_even():
    """Doubles box stops at the long service line and uses full width."""
    state = MatchState(current_server="A", game_type="doubles")
    box = derive_active_service_box(state)
    assert box == ServiceBox(x=126, y=355, w=396, h=305)


def test_doubles_box_team_b_odd():
    """B serving on an odd score in doubles: bottom quadrant of the far half."""
    state = MatchState(score_b=3, current_server="B", game_type="doubles")
    box = derive_active_service_box(state)
    assert box == ServiceBox(x=918, y=355, w=396, h=305)


def test_boxes_stay_behind_short_service_line():
    """No service box ever crosses the short service line."""
    for server in "AB":
        for game_type in ("singles", "doubles"):
            box = derive_active_service_box(MatchState(current_server=server, game_type=game_type))
            if server == "A":
                assert box.x + box.w == court.NET_X - court.SHORT_SERVICE_OFFSET
            else:
                assert box.x == court.NET_X + court.SHORT_SERVICE_OFFSET


def test_server_name_none_for_receiver():
    """Only the serving team has a live server."""
    state = create_match("A", "doubles")
    assert derive_server_name(state, "B", B_NAMES) is None


def test_server_name_none_in_singles():
    """Singles shows no distinguished server name."""
    state = create_match("A", "singles")
    assert derive_server_name(state, "A", A_NAMES[:1]) is None


def test_server_name_initial_index():
    """The chosen first server serves from the right at 0-0."""
    state = create_match("A", "doubles", initial_server_index=1)
    assert derive_server_name(state, "A", A_NAMES) == "Chia"


def test_server_keeps_serving_after_winning_rally():
    """Server wins → swaps court, same player serves again."""
    state = score_rally(create_match("A", "doubles"), "A")
    assert derive_server_name(state, "A", A_NAMES) == "Lee"
    assert service_court(state) == "left"


def test_server_after_sideout_uses_parity_against_frozen_pointer():
    """After a sideout the new server comes from parity, not from who stands right.

    B's pointer still says Kim stands right, but B's odd score puts Seo on serve.
    This mirrors the observed behaviour of the scoreboard and is kept as is.
    """
    state = score_rally(create_match("A", "doubles"), "B")

    assert state.team_b_player_in_right == 0
    assert derive_server_name(state, "B", B_NAMES) == "Seo"
    assert derive_player_court_assignment("B", 0, state).in_right


def test_player_assignment_team_a():
    """A's right-court player stands bottom, partner top, on the near half."""
    state = MatchState(game_type="doubles", team_a_player_in_right=1)
    right = derive_player_court_assignment("A", 1, state)
    left = derive_player_court_assignment("A", 0, state)

    assert (right.side, right.vertical) == ("near", "bottom")
    assert (left.side, left.vertical) == ("near", "top")


def test_player_assignment_team_b_mirrored():
    """B's right-court player stands top, partner bottom, on the far half."""
    state = MatchState(game_type="doubles", team_b_player_in_right=0)
    right = derive_player_court_assignment("B", 0, state)
    left = derive_player_court_assignment("B", 1, state)

    assert (right.side, right.vertical) == ("far", "top")
    assert (left.side, left.vertical) == ("far", "bottom")


def test_player_assignment_ignores_server():
    """Standing positions do not depend on who serves."""
    a_serves = MatchState(current_server="A", game_type="doubles")
    b_serves = MatchState(current_server="B", game_type="doubles")
    for team in "AB":
        for index in (0, 1):
            assert (derive_player_court_assignment(team, index, a_serves)
                    == derive_player_court_assignment(team, index, b_serves))


def test_singles_assignment_follows_own_score():
    """Singles players stand right on even scores, left on odd."""
    state = MatchState(score_a=2, score_b=7)
    assert derive_singles_court_assignment("A", state).vertical == "bottom"
    assert derive_singles_court_assignment("B", state).vertical == "bottom"


def test_marker_positions():
    """Markers sit a quarter of the court into each half."""
    near_bottom = derive_player_court_assignment("A", 0, MatchState(game_type="doubles"))
    far_top = derive_player_court_assignment("B", 0, MatchState(game_type="doubles"))

    assert player_marker_position(near_bottom) == (385, 507.5)
    assert player_marker_position(far_top) == (1055, 202.5)


def test_resolve_court_doubles():
    """Doubles view lists four players with exactly one server."""
    state = create_match("B", "doubles", initial_server_index=1)
    view = resolve_court(state, A_NAMES, B_NAMES)

    assert len(view.players) == 4
    servers = [p for p in view.players if p.is_server]
    assert [(p.team, p.name) for p in servers] == [("B", "Seo")]
    assert view.service_court == "right"
    assert view.service_box == derive_active_service_box(state)


def test_resolve_court_singles():
    """Singles view has one player per team."""
    state = score_rally(create_match("A", "singles"), "B")
    view = resolve_court(state, ("Axelsen",), ("Momota",))

    assert [p.name for p in view.players] == ["Axelsen", "Momota"]
    assert [p.is_server for p in view.players] == [False, True]
    assert view.players[1].assignment.vertical == "bottom"


def test_resolve_court_finished():
    """No server or box once the match is decided."""
    state = MatchState(sets_won_b=2, match_winner="B", game_type="doubles")
    view = resolve_court(state, A_NAMES, B_NAMES)

    assert view.service_box is None
    assert not any(p.is_server for p in view.players)

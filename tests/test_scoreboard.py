"""Tests for the text scoreboard."""

from datetime import datetime, timezone

from shuttle.history import MatchRecord
from shuttle.lineup import build_setup
from shuttle.rules import create_match, score_rally
from shuttle.scoreboard import render_history, render_scoreboard
from shuttle.types import MatchState


def test_scoreboard_marks_server_and_court():
    """Doubles board names the live server and their service court."""
    setup = build_setup(["Lee", "Chia"], ["Kim", "Seo"], "doubles", "A", 0)
    state = score_rally(create_match("A", "doubles"), "A")

    text = render_scoreboard(state, setup)

    assert text.splitlines()[0] == "GAME 1  [doubles]"
    assert "* Lee & Chia" in text
    assert "serving: Lee (left court)" in text
    assert "WINNER" not in text


def test_singles_scoreboard_has_no_server_name():
    """Singles shows the service court without a player name."""
    setup = build_setup(["Axelsen"], ["Momota"])
    text = render_scoreboard(create_match(), setup)
    assert "serving from the right court" in text


def test_finished_scoreboard():
    """Finished match shows END and the winner."""
    setup = build_setup(["Axelsen"], ["Momota"])
    state = MatchState(sets_won_b=2, sets_won_a=1, current_set=3, match_winner="B",
                       current_server="B")

    text = render_scoreboard(state, setup)

    assert text.startswith("GAME END")
    assert "WINNER: Momota (1-2)" in text
    assert "*" not in text


def test_history_listing():
    """History lines show date, sets and the winner in capitals."""
    record = MatchRecord(
        timestamp=datetime(2026, 5, 4, tzinfo=timezone.utc),
        team_a="Axelsen", team_b="Momota",
        score_a=0, score_b=0, sets_won_a=2, sets_won_b=0,
        match_winner="A", game_type="singles",
    )
    assert render_history([record]) == "  2026-05-04  AXELSEN 2 - 0 Momota  [singles]"


def test_empty_history_listing():
    """No records → friendly placeholder."""
    assert render_history([]) == "  No matches recorded yet."

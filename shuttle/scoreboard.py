"""Text scoreboard for the terminal."""

from typing import Iterable

from shuttle.lineup import MatchSetup
from shuttle.positions import derive_server_name, service_court
from shuttle.types import TEAM_A, TEAM_B, MatchState


def _team_line(state: MatchState, setup: MatchSetup, team: str) -> str:
    serving = not state.is_finished and state.current_server == team
    marker = "*" if serving else " "
    line = (f" {marker} {setup.display_name(team):28s} "
            f"{state.score_of(team):>2d}   sets: {state.sets_won_of(team)}")

    if serving:
        server = derive_server_name(state, team, setup.names(team))
        court = service_court(state)
        if server:
            line += f"   serving: {server} ({court} court)"
        else:
            line += f"   serving from the {court} court"
    return line


def render_scoreboard(state: MatchState, setup: MatchSetup) -> str:
    """Multi-line scoreboard: game number, both teams, server, winner banner."""
    game = "END" if state.is_finished else str(state.current_set)
    lines = [
        f"GAME {game}  [{state.game_type}]",
        _team_line(state, setup, TEAM_A),
        _team_line(state, setup, TEAM_B),
    ]
    if state.is_finished:
        lines.append(f"  WINNER: {setup.display_name(state.match_winner)} "
                     f"({state.sets_won_a}-{state.sets_won_b})")
    return "\n".join(lines)


def render_history(records: Iterable) -> str:
    """One line per stored match, most recent first."""
    lines = []
    for r in records:
        a = f"{r.team_a} {r.sets_won_a}"
        b = f"{r.sets_won_b} {r.team_b}"
        if r.match_winner == TEAM_A:
            a = a.upper()
        else:
            b = b.upper()
        lines.append(f"  {r.timestamp:%Y-%m-%d}  {a} - {b}  [{r.game_type}]")
    if not lines:
        return "  No matches recorded yet."
    return "\n".join(lines)

"""Match simulation: random rallies between two playstyles, scored by the engine.

Each rally is decided by a single weighted coin flip:
- The skill gap between the sides sets the odds (logistic curve)
- Under rally-point scoring the receiver has a slight edge
- The engine does all of the scoring, serve and court bookkeeping
"""

import math
import random
from dataclasses import dataclass, field
from typing import Optional

from shuttle.engine import MatchEngine
from shuttle.types import SINGLES, TEAM_A, TEAM_B, MatchState, other_team

# Playstyle presets
PLAYSTYLES = {
    "attacker": {"label": "Attacker", "skill": 0.80},
    "defender": {"label": "Defender", "skill": 0.75},
    "allround": {"label": "All-Round", "skill": 0.78},
    "beginner": {"label": "Beginner", "skill": 0.45},
    "pro": {"label": "Professional", "skill": 0.95},
}

SKILL_SLOPE = 6.0
RECEIVER_EDGE = 0.03

# Safety net: a best-of-three match cannot run past 3 x 59 rallies
MAX_RALLIES = 3 * 59


@dataclass
class RallyOutcome:
    """One rally and the score it left behind."""
    number: int
    set_number: int
    server: str
    winner: str
    sideout: bool
    score_a: int
    score_b: int


@dataclass
class SimulatedMatch:
    """Full simulated match."""
    state: MatchState
    rallies: list  # list[RallyOutcome]
    style_a: str
    style_b: str
    stats: dict = field(default_factory=dict)


def rally_win_probability(server_skill: float, receiver_skill: float) -> float:
    """Probability that the serving side wins the rally."""
    p = 1.0 / (1.0 + math.exp(-SKILL_SLOPE * (server_skill - receiver_skill)))
    return min(0.99, max(0.01, p - RECEIVER_EDGE))


def simulate_match(
    style_a: str = "allround",
    style_b: str = "allround",
    game_type: str = SINGLES,
    initial_server: str = TEAM_A,
    initial_server_index: int = 0,
    rng: Optional[random.Random] = None,
) -> SimulatedMatch:
    """Play a best-of-three match to completion.

    Returns SimulatedMatch with every rally and summary stats.
    """
    if style_a not in PLAYSTYLES or style_b not in PLAYSTYLES:
        raise ValueError(f"Unknown playstyle: {style_a!r} / {style_b!r}")

    rng = rng or random.Random()
    skills = {TEAM_A: PLAYSTYLES[style_a]["skill"], TEAM_B: PLAYSTYLES[style_b]["skill"]}
    engine = MatchEngine(initial_server, game_type, initial_server_index)
    rallies: list[RallyOutcome] = []

    while not engine.state.is_finished and len(rallies) < MAX_RALLIES:
        before = engine.state
        server = before.current_server
        receiver = other_team(server)

        p_server = rally_win_probability(skills[server], skills[receiver])
        winner = server if rng.random() < p_server else receiver

        after = engine.score(winner)
        rallies.append(RallyOutcome(
            number=len(rallies) + 1,
            set_number=before.current_set,
            server=server,
            winner=winner,
            sideout=winner != server,
            score_a=after.score_a,
            score_b=after.score_b,
        ))

    return SimulatedMatch(
        state=engine.state,
        rallies=rallies,
        style_a=style_a,
        style_b=style_b,
        stats=_compute_match_stats(rallies),
    )


def _longest_run(rallies: list, team: str) -> int:
    best = run = 0
    for r in rallies:
        run = run + 1 if r.winner == team else 0
        best = max(best, run)
    return best


def _compute_match_stats(rallies: list) -> dict:
    """Compute match statistics."""
    a_points = sum(1 for r in rallies if r.winner == TEAM_A)
    b_points = sum(1 for r in rallies if r.winner == TEAM_B)

    return {
        "total_rallies": len(rallies),
        "a_points": a_points,
        "b_points": b_points,
        "sideouts": sum(1 for r in rallies if r.sideout),
        "a_longest_run": _longest_run(rallies, TEAM_A),
        "b_longest_run": _longest_run(rallies, TEAM_B),
        "sets_played": len({r.set_number for r in rallies}),
    }

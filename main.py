#!/usr/bin/env python3
"""CLI entry point for the badminton scorer.

Usage:
    python main.py play              Score a live match from the keyboard
    python main.py game              Simulate a match (text mode) and print stats
    python main.py history           List completed matches
    python main.py test              Run all tests
    python main.py demo              Simulated singles and doubles matches
"""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv


def _history_store():
    from shuttle.config import HistoryConfig
    from shuttle.history import HistoryStore
    return HistoryStore(HistoryConfig.from_env().path)


def _ask(prompt, default=""):
    value = input(f"  {prompt}" + (f" [{default}]" if default else "") + ": ").strip()
    return value or default


def _read_setup():
    from shuttle.lineup import SetupError, build_setup

    while True:
        mode = _ask("Mode (singles/doubles)", "singles").lower()
        count = 2 if mode == "doubles" else 1
        team_a = [_ask(f"Team A player {i + 1}") for i in range(count)]
        team_b = [_ask(f"Team B player {i + 1}") for i in range(count)]
        server = _ask("First server (A/B)", "A").upper()
        index = 0
        if mode == "doubles":
            names = team_a if server == "A" else team_b
            choice = _ask(f"Who serves first ({' / '.join(names)})", names[0])
            index = 1 if choice == names[1] else 0
        try:
            return build_setup(team_a, team_b, mode, server, index)
        except SetupError as e:
            print(f"  {e}, try again.\n")


def cmd_play():
    """Score a live match from the keyboard."""
    from shuttle.scoreboard import render_scoreboard
    from shuttle.session import MatchSession

    print("=" * 60)
    print("  BADMINTON SCORER")
    print("=" * 60)
    setup = _read_setup()
    session = MatchSession(setup, store=_history_store())

    print("\nKeys: a=point A  b=point B  u=undo  r=reset  q=quit")
    print("-" * 60)
    while True:
        print()
        print(render_scoreboard(session.state, setup))
        key = input("> ").strip().lower()
        if key == "a":
            session.score("A")
        elif key == "b":
            session.score("B")
        elif key == "u":
            session.undo()
        elif key == "r":
            session.reset()
        elif key == "q":
            break


def cmd_game():
    """Simulate a match in text mode and print stats."""
    import random
    from shuttle.game import PLAYSTYLES, simulate_match

    print("=" * 60)
    print("  SIMULATED BADMINTON MATCH")
    print("=" * 60)

    styles = list(PLAYSTYLES.keys())
    style_a = sys.argv[2] if len(sys.argv) > 2 and sys.argv[2] in styles else "attacker"
    style_b = sys.argv[3] if len(sys.argv) > 3 and sys.argv[3] in styles else "defender"
    game_type = sys.argv[4] if len(sys.argv) > 4 and sys.argv[4] in ("singles", "doubles") else "singles"

    _print_simulation(simulate_match(style_a, style_b, game_type, rng=random.Random()))

    print("  Available styles: " + ", ".join(styles))
    print("  Usage: python main.py game [style_a] [style_b] [singles|doubles]")
    print("=" * 60)


def _print_simulation(result):
    from shuttle.game import PLAYSTYLES

    s = result.stats
    m = result.state
    print(f"\n  A: {PLAYSTYLES[result.style_a]['label']}  vs  B: {PLAYSTYLES[result.style_b]['label']}"
          f"  [{m.game_type}]\n")

    for r in result.rallies:
        note = "sideout" if r.sideout else ""
        print(f"  Rally {r.number:3d}: game {r.set_number}, {r.server} serves, "
              f"{r.winner} wins  [{r.score_a}-{r.score_b}] {note}")

    print()
    print(f"  GAMES: {m.sets_won_a} - {m.sets_won_b}")
    print(f"  WINNER: Team {m.match_winner}")
    print()
    print(f"  Total rallies: {s['total_rallies']}  |  Games played: {s['sets_played']}")
    print(f"  Points A: {s['a_points']}  |  Points B: {s['b_points']}")
    print(f"  Longest run A: {s['a_longest_run']}  |  Longest run B: {s['b_longest_run']}")
    print(f"  Sideouts: {s['sideouts']}")
    print()


def cmd_history():
    """List completed matches."""
    from shuttle.scoreboard import render_history

    store = _history_store()
    print(f"Match history ({store.path}):")
    print("-" * 60)
    print(render_history(store.load()))


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


def cmd_demo():
    """Simulated singles and doubles matches."""
    from shuttle.game import simulate_match

    print("=" * 60)
    print("  BADMINTON SCORER: SIMULATION DEMO")
    print("=" * 60)

    for game_type, styles in (("singles", ("pro", "allround")), ("doubles", ("attacker", "defender"))):
        print("-" * 60)
        _print_simulation(simulate_match(styles[0], styles[1], game_type))


COMMANDS = {
    "play": cmd_play,
    "game": cmd_game,
    "history": cmd_history,
    "test": cmd_test,
    "demo": cmd_demo,
}


def main():
    load_dotenv()

    from shuttle.config import log_level
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()

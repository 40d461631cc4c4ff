"""
config.py
=========
Central configuration for the badminton scorer.

Rule constants, undo depth and the history file location live here so they
can be adjusted without touching the engine.

Usage:
    from shuttle.config import RULES, ENGINE_CONFIG, HistoryConfig
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RulesConfig:
    """
    BWF rally-point scoring, best of three games.

    Attributes:
        points_to_win: A game is won at this score with a ``win_by`` margin.
        win_by:        Required lead once ``points_to_win`` is reached.
        point_cap:     Hard cap; reaching it wins the game regardless of margin.
        sets_to_win:   Games needed to take the match.
    """
    points_to_win: int = 21
    win_by: int = 2
    point_cap: int = 30
    sets_to_win: int = 2


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EngineConfig:
    """
    Attributes:
        undo_depth: Maximum number of snapshots kept for undo. The oldest
                    snapshot is dropped once the bound is reached. A full
                    best-of-three match never exceeds 177 rallies.
    """
    undo_depth: int = 512


# ---------------------------------------------------------------------------
# Match history
# ---------------------------------------------------------------------------

HISTORY_FILE_ENV = "SHUTTLE_HISTORY_FILE"
LOG_LEVEL_ENV = "SHUTTLE_LOG_LEVEL"


def _default_history_path() -> Path:
    return Path.home() / ".shuttle" / "match_history.json"


@dataclass(frozen=True)
class HistoryConfig:
    """
    Attributes:
        path: JSON file holding completed match records, most recent first.
    """
    path: Path = field(default_factory=_default_history_path)

    @classmethod
    def from_env(cls) -> "HistoryConfig":
        value = (os.getenv(HISTORY_FILE_ENV) or "").strip()
        if not value:
            return cls()
        return cls(path=Path(value).expanduser())


def log_level() -> str:
    return (os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

RULES = RulesConfig()
ENGINE_CONFIG = EngineConfig()

"""Game module for Block Stack.

Exports the falling-block engine and supporting classes:
- FieldGrid: Locked-cell grid, validity checks and line clearing
- ActivePiece: The falling piece with translate/rotate attempts
- PieceKind: Enum of available piece kinds
- ScoringRules, ScoreState: Score and level progression
- GravityCurve: Suggested gravity timer cadence per level
- GameSession: Spawn/move/lock/clear orchestration driven by the shell
"""

from .grid import FieldGrid
from .pieces import ActivePiece, PieceKind, ROTATION_STATES
from .rules import GravityCurve, ScoreState, ScoringRules
from .core import (
    Direction,
    GameConfig,
    GameSession,
    ScoreRecord,
    SessionSnapshot,
    SessionState,
)

__all__ = [
    "FieldGrid",
    "ActivePiece",
    "PieceKind",
    "ROTATION_STATES",
    "GravityCurve",
    "ScoreState",
    "ScoringRules",
    "Direction",
    "GameConfig",
    "GameSession",
    "ScoreRecord",
    "SessionSnapshot",
    "SessionState",
]

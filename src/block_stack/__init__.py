"""Block Stack: a falling-block puzzle engine."""

from .game import GameConfig, GameSession, PieceKind

__all__ = ["GameConfig", "GameSession", "PieceKind"]

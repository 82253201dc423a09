from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .grid import FieldGrid
from .pieces import ActivePiece, PieceKind
from .rules import GravityCurve, ScoreState, ScoringRules


logger = logging.getLogger(__name__)

KindPicker = Callable[[Sequence[PieceKind]], PieceKind]


class Direction(IntEnum):
    LEFT = 0
    RIGHT = 1
    DOWN = 2


class SessionState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    spawn_x: int = 4
    spawn_y: int = -1
    random_seed: Optional[int] = None


@dataclass(frozen=True)
class SessionSnapshot:
    grid: np.ndarray
    active_cells: Tuple[Tuple[int, int], ...]
    active_kind: Optional[PieceKind]
    score: int
    lines_cleared: int
    level: int
    game_over: bool
    paused: bool


@dataclass(frozen=True)
class ScoreRecord:
    score: int
    achieved_at: datetime


class GameSession:
    """Facade the game shell drives.

    The shell calls the command methods from a single thread, from its gravity
    timer (`tick`) and from key presses, and reads the properties or
    `snapshot()` once per frame. Commands that are illegal in the current
    state are ignored.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        gravity: Optional[GravityCurve] = None,
        kind_picker: Optional[KindPicker] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.gravity = gravity or GravityCurve()
        self.rng = random.Random(self.config.random_seed)
        self._pick_kind: KindPicker = kind_picker or self.rng.choice
        self._grid = FieldGrid(self.config.width, self.config.height)
        self._score = ScoreState(rules or ScoringRules())
        self._piece: Optional[ActivePiece] = None
        self._game_over = False
        self._paused = False
        self.pieces_spawned = 0
        self.pieces_locked = 0
        self.new_game()

    # Commands

    def new_game(self) -> None:
        self._grid.reset()
        self._score.reset()
        self._piece = None
        self._game_over = False
        self._paused = False
        self.pieces_spawned = 0
        self.pieces_locked = 0
        logger.debug("new game")
        self.spawn()

    def spawn(self) -> None:
        if self._game_over:
            return
        kind = PieceKind(self._pick_kind(tuple(PieceKind)))
        piece = ActivePiece(kind, self.config.spawn_x, self.config.spawn_y)
        if not self._grid.is_valid(piece.cells()):
            self._piece = None
            self._game_over = True
            logger.info("game over: no room to spawn %s (score=%d, lines=%d)",
                        kind.name, self._score.score, self._score.lines_cleared)
            return
        self._piece = piece
        self.pieces_spawned += 1
        logger.debug("spawned %s", kind.name)

    def move(self, direction: Direction) -> bool:
        if direction not in _DELTAS:
            raise ValueError(f"unknown direction: {direction!r}")
        if self._game_over or self._piece is None:
            return False
        dx, dy = _DELTAS[Direction(direction)]
        if self._piece.attempt_translate(self._grid, dx, dy):
            return True
        if direction == Direction.DOWN:
            self.lock_piece()
        return False

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def soft_drop(self) -> bool:
        return self.move(Direction.DOWN)

    def hard_drop(self) -> None:
        if self._game_over or self._piece is None:
            return
        while self.soft_drop():
            pass

    def rotate(self) -> bool:
        if self._game_over or self._piece is None:
            return False
        return self._piece.attempt_rotate(self._grid)

    def tick(self) -> None:
        if self._paused or self._game_over:
            return
        self.soft_drop()

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        return self._paused

    def lock_piece(self) -> None:
        if self._game_over or self._piece is None:
            return
        piece = self._piece
        self._grid.lock(piece.cells())
        self._piece = None
        self.pieces_locked += 1
        rows = self._grid.clear_full_rows()
        if rows:
            previous_level = self._score.level
            gained = self._score.apply_clear(rows, previous_level)
            logger.debug("cleared %d row(s) for %d points", rows, gained)
            if self._score.level != previous_level:
                logger.info("level up: %d -> %d", previous_level, self._score.level)
        self.spawn()

    # State for the shell

    @property
    def state(self) -> SessionState:
        return SessionState.GAME_OVER if self._game_over else SessionState.PLAYING

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def score(self) -> int:
        return self._score.score

    @property
    def lines_cleared(self) -> int:
        return self._score.lines_cleared

    @property
    def level(self) -> int:
        return self._score.level

    @property
    def grid(self) -> np.ndarray:
        return self._grid.occupancy()

    @property
    def active_kind(self) -> Optional[PieceKind]:
        return self._piece.kind if self._piece is not None else None

    @property
    def active_piece(self) -> Optional[ActivePiece]:
        return self._piece

    @property
    def active_cells(self) -> List[Tuple[int, int]]:
        return self._piece.cells() if self._piece is not None else []

    @property
    def gravity_interval_ms(self) -> int:
        return self.gravity.interval_ms(self._score.level)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            grid=self.grid,
            active_cells=tuple(self.active_cells),
            active_kind=self.active_kind,
            score=self.score,
            lines_cleared=self.lines_cleared,
            level=self.level,
            game_over=self._game_over,
            paused=self._paused,
        )

    def get_state(self) -> np.ndarray:
        # Locked cells are 1, the falling piece is -kind
        state = self._grid.occupancy().astype(np.int8)
        if self._piece is not None:
            for x, y in self._piece.cells():
                if self._grid.is_inside(x, y):
                    state[y, x] = -int(self._piece.kind)
        return state

    def get_game_stats(self) -> dict:
        return {
            "score": self.score,
            "lines_cleared": self.lines_cleared,
            "level": self.level,
            "pieces_spawned": self.pieces_spawned,
            "pieces_locked": self.pieces_locked,
            "game_over": self._game_over,
        }

    def score_record(self) -> ScoreRecord:
        return ScoreRecord(score=self.score, achieved_at=datetime.now())

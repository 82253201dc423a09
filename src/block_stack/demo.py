from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from block_stack.game import GameConfig, GameSession


def format_grid(state: np.ndarray) -> str:
    rows = []
    for row in state:
        rows.append("".join("█" if v > 0 else ("▒" if v < 0 else "·") for v in row))
    return "\n".join(rows)


def play(session: GameSession, pieces: int) -> int:
    """Drop up to `pieces` pieces, sweeping the landing column left to right."""
    dropped = 0
    column_shift = -4
    while dropped < pieces and not session.game_over:
        for _ in range(abs(column_shift)):
            if column_shift < 0:
                session.move_left()
            else:
                session.move_right()
        session.hard_drop()
        dropped += 1
        column_shift = column_shift + 2 if column_shift < 4 else -4
    return dropped


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a headless Block Stack game and print the board")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--pieces", type=int, default=40)
    p.add_argument("--verbose", action="store_true")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = GameSession(GameConfig(random_seed=args.seed))
    dropped = play(session, args.pieces)

    print(format_grid(session.get_state()))
    print(f"\nDropped {dropped} piece(s)")
    for key, value in session.get_game_stats().items():
        print(f"{key}: {value}")


if __name__ == "__main__":  # pragma: no cover
    main()

import pytest

from block_stack.game import ActivePiece, PieceKind, ROTATION_STATES


@pytest.mark.parametrize("kind,count", [(PieceKind.I, 2), (PieceKind.O, 1), (PieceKind.T, 4)])
def test_catalog_rotation_counts(kind, count):
    states = ROTATION_STATES[kind]
    assert len(states) == count
    assert all(len(set(state)) == 4 for state in states)


def test_spawn_cells():
    piece = ActivePiece(PieceKind.T, 4, -1)
    assert piece.cells() == [(5, -1), (4, 0), (5, 0), (6, 0)]


def test_translate(grid):
    piece = ActivePiece(PieceKind.I, 4, 5)
    assert piece.attempt_translate(grid, -1, 0)
    assert piece.anchor == (3, 5)
    assert piece.cells() == [(3, 6), (4, 6), (5, 6), (6, 6)]


def test_translate_into_wall_is_rejected(grid):
    piece = ActivePiece(PieceKind.O, -1, 5)
    assert not piece.attempt_translate(grid, -1, 0)
    assert piece.anchor == (-1, 5)


def test_translate_into_locked_cell_is_rejected(grid):
    grid.lock([(5, 10)])
    piece = ActivePiece(PieceKind.O, 4, 8)
    assert not piece.attempt_translate(grid, 0, 1)
    assert piece.anchor == (4, 8)


def test_o_rotation_keeps_cells(grid):
    piece = ActivePiece(PieceKind.O, 4, 5)
    before = piece.cells()
    piece.attempt_rotate(grid)
    assert piece.cells() == before
    assert piece.rotation == 0


def test_t_rotation_cycles(grid):
    piece = ActivePiece(PieceKind.T, 4, 5)
    seen = []
    for _ in range(4):
        assert piece.attempt_rotate(grid)
        seen.append(piece.rotation)
    assert seen == [1, 2, 3, 0]


def test_i_rotation(grid):
    piece = ActivePiece(PieceKind.I, 4, 5)
    assert piece.attempt_rotate(grid)
    assert piece.cells() == [(6, 5), (6, 6), (6, 7), (6, 8)]


def test_blocked_rotation_is_rejected(grid):
    grid.lock([(6, 8)])
    piece = ActivePiece(PieceKind.I, 4, 5)
    before = piece.cells()
    assert not piece.attempt_rotate(grid)
    assert piece.rotation == 0
    assert piece.cells() == before


def test_rotation_through_floor_is_rejected(grid):
    # Horizontal I resting on the floor has no room to stand up
    piece = ActivePiece(PieceKind.I, 4, 18)
    assert not piece.attempt_rotate(grid)
    assert piece.rotation == 0


def test_cells_at_wraps_rotation():
    piece = ActivePiece(PieceKind.T, 4, 5)
    assert piece.cells_at(4, 5, 5) == piece.cells_at(4, 5, 1)
    assert ActivePiece(PieceKind.O, 0, 0).cells_at(0, 0, 3) == [(1, 0), (2, 0), (1, 1), (2, 1)]

import itertools

import pytest

from block_stack.game import FieldGrid, GameSession, PieceKind


def cycling_picker(*kinds):
    order = itertools.cycle(kinds)

    def pick(available):
        return next(order)

    return pick


@pytest.fixture
def grid():
    return FieldGrid()


@pytest.fixture
def make_session():
    def factory(*kinds):
        return GameSession(kind_picker=cycling_picker(*kinds))

    return factory


@pytest.fixture
def o_session(make_session):
    return make_session(PieceKind.O)

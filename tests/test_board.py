"""
tests/test_board.py

Тесты для доски: построение, сдвиг фигуры, отметка посещённых хешей.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import Board
from core.config import PuzzleConfig
from core.state import Piece
from core.utils import Block, DOWN, LEFT
from klotski_io import create_classic_layout
from utils.error_handling import InvalidLayoutError, StateVisitedError


def test_create_board():
    """Новая доска: один корень в очереди, пустое множество хешей."""
    board = Board.create(create_classic_layout(), 4, 5)

    assert len(board.states) == 1
    assert board.states[0] is board.root
    assert board.root.parent is None
    assert board.root.step == 0
    assert board.root.hash == board.zobrist.compute_hash(board.root.pieces)
    assert board.visited == set()


def test_from_config_uses_seed():
    """Seed из конфигурации попадает в таблицу Zobrist."""
    board = Board.from_config(create_classic_layout(), PuzzleConfig(seed=5))
    assert board.zobrist.seed == 5


def test_move_piece():
    """Сдвиг 'g' вниз: новое состояние с родителем 0 и step 1."""
    board = Board.create(create_classic_layout())

    new_state = board.move_piece(0, 6, DOWN)

    assert new_state.parent == 0
    assert new_state.step == 1
    assert new_state.move_piece.label == 'g'
    assert new_state.move_direction == "down"
    assert new_state.pieces[6].starting_block == Block(1, 4)
    # Исходное состояние не изменилось
    assert board.root.pieces[6].starting_block == Block(1, 3)
    assert len(board.states) == 1


def test_move_piece_visited_already():
    """Повторный сдвиг в уже встреченное состояние - StateVisitedError."""
    board = Board.create(create_classic_layout())

    new_state = board.move_piece(0, 0, DOWN)
    board.mark_visited(new_state.hash)

    with pytest.raises(StateVisitedError):
        board.move_piece(0, 0, DOWN)


def test_add_state_and_reset():
    """add_state отмечает хеш; reset возвращает доску к корню."""
    board = Board.create(create_classic_layout())
    new_state = board.move_piece(0, 9, LEFT)

    assert board.add_state(new_state) == 1
    assert board.is_visited(new_state.hash)

    table = board.zobrist
    board.reset()

    assert board.states == [board.root]
    assert not board.visited
    assert board.zobrist is table


def test_invalid_layouts():
    """Перекрытие, выход за поле и повтор метки отклоняются."""
    with pytest.raises(InvalidLayoutError):
        Board.create([Piece.at('a', 1, 1, 0, 0), Piece.at('b', 1, 1, 0, 0)])

    with pytest.raises(InvalidLayoutError):
        Board.create([Piece.at('a', 1, 2, 0, 4)])

    with pytest.raises(InvalidLayoutError):
        Board.create([Piece.at('a', 1, 1, 0, 0), Piece.at('a', 1, 1, 1, 0)])

    with pytest.raises(InvalidLayoutError):
        Board.create([])


def test_non_rectangular_piece_rejected():
    """Клетки фигуры должны образовывать её прямоугольник."""
    broken = Piece('a', 1, 2, (Block(0, 0), Block(0, 2)))

    with pytest.raises(InvalidLayoutError):
        Board.create([broken])

"""
core - Ядро Klotski

Базовые структуры данных: фигуры, состояния, доска, хеширование.
"""

from .board import Board
from .config import PuzzleConfig, DEFAULT_CONFIG, TARGET_LABEL, TARGET_CELL
from .state import Piece, State, can_move, frontier_cells
from .zobrist import ZobristTable, shape_category, DEFAULT_SEED, HASH_BITS
from .utils import (
    BOARD_WIDTH, BOARD_HEIGHT, EMPTY, WALL, EXIT,
    Block, Move, MOVES, MOVES_BY_NAME, DOWN, RIGHT, UP, LEFT,
    get_moves, move_name
)

__all__ = [
    'Board', 'PuzzleConfig', 'DEFAULT_CONFIG', 'TARGET_LABEL', 'TARGET_CELL',
    'Piece', 'State', 'can_move', 'frontier_cells',
    'ZobristTable', 'shape_category', 'DEFAULT_SEED', 'HASH_BITS',
    'BOARD_WIDTH', 'BOARD_HEIGHT', 'EMPTY', 'WALL', 'EXIT',
    'Block', 'Move', 'MOVES', 'MOVES_BY_NAME', 'DOWN', 'RIGHT', 'UP', 'LEFT',
    'get_moves', 'move_name',
]

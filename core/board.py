"""
core/board.py

Пространство поиска: таблица Zobrist, список всех найденных состояний
и множество уже встреченных хешей.

Список состояний одновременно служит очередью поиска: он только
растёт, родитель состояния хранится как индекс в этом списке.
"""

from typing import List, Optional, Sequence, Set

from .config import PuzzleConfig
from .state import Piece, State
from .utils import BOARD_HEIGHT, BOARD_WIDTH, Move
from .zobrist import DEFAULT_SEED, ZobristTable
from utils.error_handling import StateVisitedError, validate_layout


class Board:
    """
    Доска Klotski с накопленными состояниями поиска.

    Таблица Zobrist создаётся один раз в конструкторе.
    """
    __slots__ = ('width', 'height', 'zobrist', 'root', 'states', 'visited')

    def __init__(self, pieces: Sequence[Piece], width: int = BOARD_WIDTH,
                 height: int = BOARD_HEIGHT, seed: int = DEFAULT_SEED):
        validate_layout(pieces, width, height)

        self.width = width
        self.height = height
        self.zobrist = ZobristTable(rows=height, cols=width, seed=seed)
        self.root = State(pieces, hash=self.zobrist.compute_hash(pieces))
        self.states: List[State] = [self.root]
        self.visited: Set[int] = set()

    @classmethod
    def create(cls, pieces: Sequence[Piece], width: int = BOARD_WIDTH,
               height: int = BOARD_HEIGHT, seed: int = DEFAULT_SEED) -> 'Board':
        """Строит доску: таблица, хеш корня, очередь из одного корня."""
        return cls(pieces, width, height, seed)

    @classmethod
    def from_config(cls, pieces: Sequence[Piece], config: PuzzleConfig) -> 'Board':
        return cls(pieces, config.width, config.height, config.seed)

    def reset(self) -> None:
        """Возвращает доску к корню перед независимым запуском поиска."""
        self.states = [self.root]
        self.visited.clear()

    def is_visited(self, state_hash: int) -> bool:
        return state_hash in self.visited

    def mark_visited(self, state_hash: int) -> None:
        self.visited.add(state_hash)

    def move_piece(self, index: int, piece_index: int, move: Move,
                   step: Optional[int] = None) -> State:
        """
        Сдвигает фигуру состояния states[index] на одну клетку.

        Допустимость хода не проверяется - это делает can_move.

        Args:
            index: индекс исходного состояния
            piece_index: индекс фигуры в состоянии
            move: направление
            step: глубина нового состояния (по умолчанию родитель + 1)

        Returns:
            Новое состояние (ещё не добавленное в список)

        Raises:
            StateVisitedError: хеш нового состояния уже встречался
        """
        state = self.states[index]
        piece = state.pieces[piece_index]

        new_hash = self.zobrist.update_hash(state.hash, piece, move)
        if new_hash in self.visited:
            raise StateVisitedError(f"State visited already: {new_hash:08x}")

        moved = piece.shifted(move)
        pieces = list(state.pieces)
        pieces[piece_index] = moved

        return State(
            pieces,
            hash=new_hash,
            parent=index,
            step=state.step + 1 if step is None else step,
            move_piece=moved,
            move_direction=move.name,
        )

    def add_state(self, state: State) -> int:
        """Отмечает хеш состояния и добавляет его в очередь. Возвращает индекс."""
        self.visited.add(state.hash)
        self.states.append(state)
        return len(self.states) - 1

    def __len__(self) -> int:
        return len(self.states)

    def __repr__(self) -> str:
        return f"Board({self.width}x{self.height}, {len(self.states)} states)"

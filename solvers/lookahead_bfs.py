"""
solvers/lookahead_bfs.py

Поиск в ширину с просмотром на шаг вперёд (двойной шаг).

Очередь - сам список состояний доски: индекс бежит по списку, пока
тот растёт. Кроме обычного сдвига фигуры сразу пробуем второй сдвиг
той же фигуры в том же направлении. Такое состояние записывается на
той же глубине, что и одиночный сдвиг, поэтому порядок обхода -
не строгий обход по уровням. Решение не обязательно кратчайшее.
"""

import time
from typing import List, Optional

from .base import BaseSolver, SolverStats
from .reconstruct import reconstruct_path
from core.board import Board
from core.config import PuzzleConfig
from core.state import State, can_move
from core.utils import MOVES, Move
from utils.error_handling import StateVisitedError, UnsolvableError

# Как часто писать прогресс в лог (в просмотренных состояниях)
PROGRESS_EVERY = 10000


class LookaheadBFSSolver(BaseSolver):
    """
    BFS по списку состояний с отсечением повторов по хешу Zobrist.

    Особенности:
    - очередь без удаления, родители по индексу
    - двойной шаг одной фигурой в одну сторону
    - первая найденная цель сразу завершает поиск
    """

    def __init__(self, config: Optional[PuzzleConfig] = None,
                 lookahead: bool = True, verbose: bool = False):
        """
        Args:
            config: цель и параметры задачи
            lookahead: пробовать двойной шаг
            verbose: писать прогресс в лог
        """
        super().__init__(config=config, verbose=verbose)
        self.lookahead = lookahead

    def solve(self, board: Board) -> List[State]:
        """
        Ищет решение для начальной расстановки доски.

        Returns:
            Список состояний от первого хода до цели (пустой, если
            корень уже целевой)

        Raises:
            UnsolvableError: все достижимые состояния просмотрены
        """
        self.stats = SolverStats()
        board.reset()
        start = time.time()

        self._log(f"Starting lookahead BFS ({self.config})")

        index = 0
        while index < len(board.states):
            state = board.states[index]
            board.mark_visited(state.hash)

            self.stats.nodes_visited += 1
            self.stats.max_depth = max(self.stats.max_depth, state.step)

            if self.is_goal(state):
                path = reconstruct_path(board.states, index)
                self.stats.solution_length = len(path)
                self.stats.time_elapsed = time.time() - start
                self._log(f"Solution found: {len(path)} moves")
                self._log(f"Stats: {self.stats}")
                return path

            self.expand(board, index)

            if self.stats.nodes_visited % PROGRESS_EVERY == 0:
                self._log(f"Visited {self.stats.nodes_visited}, queue {len(board.states)}")

            index += 1

        self.stats.time_elapsed = time.time() - start
        self._log(f"No solution found. Stats: {self.stats}")
        raise UnsolvableError(
            f"Cannot solve: {self.stats.nodes_visited} states explored"
        )

    def expand(self, board: Board, index: int) -> int:
        """
        Добавляет в очередь все новые состояния, достижимые из states[index].

        Фигуры перебираются в порядке индексов, ходы - вниз, вправо,
        вверх, влево.

        Returns:
            Сколько состояний добавлено
        """
        state = board.states[index]
        matrix = state.get_matrix(board.width, board.height)
        added = 0

        for piece_index, piece in enumerate(state.pieces):
            starting_block = state.get_piece_starting_block(piece)

            for move in MOVES:
                if not can_move(piece, matrix, starting_block, move,
                                board.width, board.height):
                    continue

                try:
                    new_state = board.move_piece(index, piece_index, move)
                except StateVisitedError:
                    self.stats.nodes_pruned += 1
                    continue

                new_index = board.add_state(new_state)
                added += 1

                if self.lookahead and self._move_again(board, new_index, piece_index, move):
                    added += 1

        self.stats.nodes_generated += added
        return added

    def _move_again(self, board: Board, index: int, piece_index: int, move: Move) -> bool:
        """
        Второй сдвиг той же фигуры в ту же сторону.

        Родитель нового состояния - одиночный сдвиг states[index], глубина
        та же, что у него.
        """
        state = board.states[index]
        piece = state.pieces[piece_index]
        matrix = state.get_matrix(board.width, board.height)
        starting_block = state.get_piece_starting_block(piece)

        if not can_move(piece, matrix, starting_block, move, board.width, board.height):
            return False

        try:
            double_step = board.move_piece(index, piece_index, move, step=state.step)
        except StateVisitedError:
            self.stats.nodes_pruned += 1
            return False

        board.add_state(double_step)
        return True

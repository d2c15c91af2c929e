"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from core.board import Board
from core.config import DEFAULT_CONFIG, PuzzleConfig
from core.state import State
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_generated: int = 0
    nodes_pruned: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def to_dict(self) -> dict:
        return {
            'nodes_visited': self.nodes_visited,
            'nodes_generated': self.nodes_generated,
            'nodes_pruned': self.nodes_pruned,
            'max_depth': self.max_depth,
            'time_elapsed': round(self.time_elapsed, 4),
            'solution_length': self.solution_length,
        }

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Generated: {self.nodes_generated}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют solve().
    """

    def __init__(self, config: Optional[PuzzleConfig] = None, verbose: bool = False):
        self.config = config or DEFAULT_CONFIG
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, board: Board) -> List[State]:
        """
        Решает головоломку.

        Args:
            board: доска с начальной расстановкой

        Returns:
            Список состояний от первого хода до целевого

        Raises:
            UnsolvableError: решение не найдено
        """
        pass

    def is_goal(self, state: State) -> bool:
        return state.is_final(self.config.target_label, self.config.target_cell)

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог если verbose=True."""
        if self.verbose:
            get_logger("solvers").info(f"[{self.__class__.__name__}] {message}")

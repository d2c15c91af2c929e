"""
solvers - Решатели Klotski

Экспортирует:
- LookaheadBFSSolver: BFS с двойным шагом и хешированием Zobrist
- reconstruct_path: восстановление ходов от цели к корню
"""

from .base import BaseSolver, SolverStats
from .lookahead_bfs import LookaheadBFSSolver
from .reconstruct import reconstruct_path, same_slide

__all__ = [
    'BaseSolver',
    'SolverStats',
    'LookaheadBFSSolver',
    'reconstruct_path',
    'same_slide',
]

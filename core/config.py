"""
core/config.py

Параметры головоломки: размеры поля, цель и seed таблицы Zobrist.
"""

from dataclasses import dataclass

from .utils import BOARD_HEIGHT, BOARD_WIDTH, Block
from .zobrist import DEFAULT_SEED

# Фигура 2×2 должна встать стартовым блоком в строку 3, столбец 1 -
# прямо над выходом в нижней рамке
TARGET_LABEL = 'b'
TARGET_CELL = Block(1, 3)


@dataclass(frozen=True)
class PuzzleConfig:
    """Конфигурация одной задачи."""
    target_label: str = TARGET_LABEL
    target_cell: Block = TARGET_CELL
    seed: int = DEFAULT_SEED
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT

    def __str__(self) -> str:
        return (
            f"target={self.target_label}@({self.target_cell.x}, {self.target_cell.y}), "
            f"seed={self.seed}, size={self.width}x{self.height}"
        )


DEFAULT_CONFIG = PuzzleConfig()

"""
core/utils.py

Общие константы и геометрия ходов для Klotski.
"""

from typing import Dict, List, NamedTuple, Optional

# Размеры поля: 4 столбца × 5 строк
BOARD_WIDTH = 4
BOARD_HEIGHT = 5

# Символы для отображения
EMPTY = '_'     # Свободная клетка
WALL = 'X'      # Рамка
EXIT = 'Z'      # Выход в нижней рамке


class Block(NamedTuple):
    """Клетка поля (x - столбец, y - строка)."""
    x: int
    y: int


class Move(NamedTuple):
    """Единичный сдвиг фигуры."""
    x: int
    y: int

    @property
    def name(self) -> Optional[str]:
        return move_name(self.x, self.y)


def move_name(x: int, y: int) -> Optional[str]:
    """
    Каноническое имя хода по знакам компонент.

    Для нулевого или диагонального вектора имени нет (None) -
    такие ходы движок никогда не создаёт.
    """
    if x == 0 and y > 0:
        return "down"
    if x == 0 and y < 0:
        return "up"
    if x > 0 and y == 0:
        return "right"
    if x < 0 and y == 0:
        return "left"
    return None


# Порядок важен: он определяет порядок обхода при расширении состояния
DOWN = Move(0, 1)
RIGHT = Move(1, 0)
UP = Move(0, -1)
LEFT = Move(-1, 0)

MOVES: List[Move] = [DOWN, RIGHT, UP, LEFT]

MOVES_BY_NAME: Dict[str, Move] = {move.name: move for move in MOVES}


def get_moves() -> List[Move]:
    """Возвращает список возможных ходов: вниз, вправо, вверх, влево."""
    return list(MOVES)


def is_valid_position(x: int, y: int, width: int = BOARD_WIDTH,
                      height: int = BOARD_HEIGHT) -> bool:
    """Проверяет, находится ли клетка в пределах поля."""
    return 0 <= x < width and 0 <= y < height

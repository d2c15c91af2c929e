"""
core/zobrist.py

Zobrist Hashing - инкрементальное хеширование расстановок.

Таблица [row][col][category]:
- category 0 - клетка занята (любой фигурой);
- category 1..4 - форма фигуры, занимающей клетку.

Хеш зависит только от того, какая форма стоит в какой клетке, а не от
того, какая именно фигура. Одинаковые фигуры, поменянные местами, дают
одинаковый хеш - для цели и для отсечения повторов это эквивалентные
позиции.

Коллизии не проверяются: хеш считается идентичностью состояния.
При 31 бите и нескольких десятках тысяч достижимых позиций вероятность
коллизии мала, но не нулевая - это известное приближение.
"""

import random
from typing import Dict, Iterable, List, Tuple

from .utils import BOARD_HEIGHT, BOARD_WIDTH, Move
from utils.error_handling import InvalidLayoutError

# Фиксированный seed по умолчанию для воспроизводимости
DEFAULT_SEED = 42

HASH_BITS = 31

GENERIC_CATEGORY = 0

# (width, height) → категория формы
SHAPE_CATEGORIES: Dict[Tuple[int, int], int] = {
    (1, 2): 1,
    (2, 2): 2,
    (2, 1): 3,
    (1, 1): 4,
}

CATEGORIES = 1 + len(SHAPE_CATEGORIES)


def shape_category(piece) -> int:
    """Категория формы фигуры в таблице Zobrist."""
    try:
        return SHAPE_CATEGORIES[(piece.width, piece.height)]
    except KeyError:
        raise InvalidLayoutError(
            f"Неизвестная форма фигуры {piece.label!r}: {piece.width}x{piece.height}"
        ) from None


class ZobristTable:
    """
    Таблица случайных чисел для хеширования.

    Все значения берутся из одного генератора random.Random(seed),
    созданного один раз. Таблица не меняется за время жизни доски:
    её перегенерация сделала бы недействительными все посчитанные хеши.
    """
    __slots__ = ('rows', 'cols', 'seed', 'table')

    def __init__(self, rows: int = BOARD_HEIGHT, cols: int = BOARD_WIDTH,
                 seed: int = DEFAULT_SEED):
        self.rows = rows
        self.cols = cols
        self.seed = seed

        rng = random.Random(seed)
        self.table: List[List[List[int]]] = [
            [
                [rng.getrandbits(HASH_BITS) for _ in range(CATEGORIES)]
                for _ in range(cols)
            ]
            for _ in range(rows)
        ]

    def cell_key(self, x: int, y: int, category: int) -> int:
        """Вклад клетки (x, y), занятой формой category."""
        cell = self.table[y][x]
        return cell[GENERIC_CATEGORY] ^ cell[category]

    def compute_hash(self, pieces: Iterable) -> int:
        """
        Вычисляет полный хеш расстановки.

        Порядок фигур не важен: XOR коммутативен.
        """
        h = 0
        for piece in pieces:
            category = shape_category(piece)
            for b in piece.blocks:
                h ^= self.cell_key(b.x, b.y, category)
        return h

    def update_hash(self, current_hash: int, piece, move: Move) -> int:
        """
        Инкрементально обновляет хеш после сдвига фигуры.

        piece - фигура в положении ДО хода.
        - убираем вклад каждой текущей клетки: XOR
        - добавляем вклад каждой сдвинутой клетки: XOR

        Результат совпадает с compute_hash для новой расстановки.
        """
        category = shape_category(piece)
        new_hash = current_hash
        for b in piece.blocks:
            new_hash ^= self.cell_key(b.x, b.y, category)                    # убираем
            new_hash ^= self.cell_key(b.x + move.x, b.y + move.y, category)  # добавляем
        return new_hash

    def __repr__(self) -> str:
        return f"ZobristTable({self.rows}x{self.cols}, seed={self.seed})"

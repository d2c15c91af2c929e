"""
klotski_io/parser.py

Начальные расстановки: классическая позиция и парсинг текстового формата.
"""

from typing import Dict, List, Tuple

from core.state import Piece
from core.utils import BOARD_HEIGHT, BOARD_WIDTH, EMPTY, Block
from core.zobrist import SHAPE_CATEGORIES
from utils.error_handling import InvalidLayoutError, validate_layout

CLASSIC_LAYOUT = """
a b b c
a b b c
d e e f
d g h f
i _ _ j
"""


def create_classic_layout() -> List[Piece]:
    """
    Создаёт классическую расстановку из десяти фигур.

    b - квадрат 2×2 в столбцах 1–2, строках 0–1; четыре фигуры 1×2
    (a, c, d, f), одна 2×1 (e), четыре 1×1 (g, h, i, j).
    """
    return [
        Piece.at('a', 1, 2, 0, 0),
        Piece.at('b', 2, 2, 1, 0),
        Piece.at('c', 1, 2, 3, 0),
        Piece.at('d', 1, 2, 0, 2),
        Piece.at('e', 2, 1, 1, 2),
        Piece.at('f', 1, 2, 3, 2),
        Piece.at('g', 1, 1, 1, 3),
        Piece.at('h', 1, 1, 2, 3),
        Piece.at('i', 1, 1, 0, 4),
        Piece.at('j', 1, 1, 3, 4),
    ]


def parse_layout(text: str, width: int = BOARD_WIDTH,
                 height: int = BOARD_HEIGHT) -> List[Piece]:
    """
    Парсит текстовое описание расстановки.

    Формат: по строке на ряд поля, метки через пробел, '_' - пусто::

        a b b c
        a b b c
        d e e f
        d g h f
        i _ _ j

    Args:
        text: описание
        width, height: размеры поля

    Returns:
        Фигуры в порядке первого появления метки (по рядам)

    Raises:
        InvalidLayoutError: неверные размеры, форма или непрямоугольная фигура
    """
    rows = [line.split() for line in text.strip().splitlines() if line.strip()]

    if len(rows) != height:
        raise InvalidLayoutError(
            f"Неверный формат: ожидается {height} строк, получено {len(rows)}"
        )

    cells: Dict[str, List[Block]] = {}
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidLayoutError(
                f"Неверный формат: строка {y + 1} содержит {len(row)} клеток вместо {width}"
            )
        for x, label in enumerate(row):
            if label == EMPTY:
                continue
            if len(label) != 1:
                raise InvalidLayoutError(f"Метка фигуры должна быть одним символом: {label!r}")
            cells.setdefault(label, []).append(Block(x, y))

    pieces = []
    for label, blocks in cells.items():
        piece_width, piece_height = _bounding_size(blocks)
        if (piece_width, piece_height) not in SHAPE_CATEGORIES:
            raise InvalidLayoutError(
                f"Неизвестная форма фигуры {label!r}: {piece_width}x{piece_height}"
            )
        pieces.append(Piece(label, piece_width, piece_height, tuple(blocks)))

    validate_layout(pieces, width, height)
    return pieces


def load_layout(path: str, width: int = BOARD_WIDTH,
                height: int = BOARD_HEIGHT) -> List[Piece]:
    """Читает расстановку из файла."""
    with open(path, 'r', encoding='utf-8') as f:
        return parse_layout(f.read(), width, height)


def _bounding_size(blocks: List[Block]) -> Tuple[int, int]:
    xs = [b.x for b in blocks]
    ys = [b.y for b in blocks]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1

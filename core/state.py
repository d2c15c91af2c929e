"""
core/state.py

Фигуры и состояние поля Klotski.

Состояние хранит все фигуры в фиксированном порядке (индекс фигуры
не меняется за весь поиск), хеш Zobrist, индекс родителя в общем
списке состояний доски и ход, которым состояние получено.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .utils import BOARD_HEIGHT, BOARD_WIDTH, EMPTY, Block, Move, is_valid_position
from utils.error_handling import PieceNotFoundError

Matrix = List[List[str]]


@dataclass(frozen=True)
class Piece:
    """
    Фигура: метка, размер width × height и занимаемые клетки.

    Клетки образуют прямоугольник, левый верхний угол которого -
    стартовый блок (минимальные x и y).
    """
    label: str
    width: int
    height: int
    blocks: Tuple[Block, ...]

    @classmethod
    def at(cls, label: str, width: int, height: int, x: int, y: int) -> 'Piece':
        """Создаёт фигуру с левым верхним углом в (x, y)."""
        blocks = tuple(
            Block(x + dx, y + dy)
            for dy in range(height)
            for dx in range(width)
        )
        return cls(label, width, height, blocks)

    @property
    def starting_block(self) -> Block:
        return Block(min(b.x for b in self.blocks), min(b.y for b in self.blocks))

    def shifted(self, move: Move) -> 'Piece':
        """Возвращает ту же фигуру, сдвинутую на одну клетку."""
        blocks = tuple(Block(b.x + move.x, b.y + move.y) for b in self.blocks)
        return Piece(self.label, self.width, self.height, blocks)


def frontier_cells(piece: Piece, starting_block: Block, move: Move) -> Iterator[Block]:
    """
    Клетки, в которые фигура войдёт при сдвиге на одну клетку.

    Для каждого направления - ряд/столбец сразу за соответствующей
    гранью прямоугольника фигуры.
    """
    x0, y0 = starting_block
    name = move.name
    if name == "down":
        for x in range(x0, x0 + piece.width):
            yield Block(x, y0 + piece.height)
    elif name == "right":
        for y in range(y0, y0 + piece.height):
            yield Block(x0 + piece.width, y)
    elif name == "up":
        for x in range(x0, x0 + piece.width):
            yield Block(x, y0 - 1)
    elif name == "left":
        for y in range(y0, y0 + piece.height):
            yield Block(x0 - 1, y)


def can_move(piece: Piece, matrix: Matrix, starting_block: Block, move: Move,
             width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
    """
    Проверяет, можно ли сдвинуть фигуру на одну клетку в направлении move.

    Каждая клетка за гранью фигуры должна быть внутри поля и свободна.
    """
    cells = list(frontier_cells(piece, starting_block, move))
    if not cells:
        return False

    for x, y in cells:
        if not is_valid_position(x, y, width, height):
            return False
        if matrix[y][x] != EMPTY:
            return False
    return True


class State:
    """
    Расстановка всех фигур на одном шаге поиска.

    После добавления в список состояний доски не изменяется.
    """
    __slots__ = ('pieces', 'hash', 'parent', 'step', 'move_piece', 'move_direction')

    def __init__(self, pieces: Sequence[Piece], hash: int = 0,
                 parent: Optional[int] = None, step: int = 0,
                 move_piece: Optional[Piece] = None,
                 move_direction: Optional[str] = None):
        self.pieces = tuple(pieces)
        self.hash = hash
        self.parent = parent
        self.step = step
        self.move_piece = move_piece
        self.move_direction = move_direction

    def get_matrix(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> Matrix:
        """Матрица поля: метка фигуры в занятых клетках, EMPTY в свободных."""
        matrix = [[EMPTY for _ in range(width)] for _ in range(height)]
        for piece in self.pieces:
            for b in piece.blocks:
                matrix[b.y][b.x] = piece.label
        return matrix

    def get_piece_starting_block(self, piece: Piece) -> Block:
        """
        Стартовый блок фигуры с той же меткой в этом состоянии.

        Raises:
            PieceNotFoundError: метки нет среди фигур состояния
        """
        for p in self.pieces:
            if p.label == piece.label:
                return p.starting_block
        raise PieceNotFoundError(f"Cannot find piece starting block: {piece.label!r}")

    def can_move(self, piece: Piece, matrix: Matrix, starting_block: Block, move: Move,
                 width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
        return can_move(piece, matrix, starting_block, move, width, height)

    def is_final(self, target_label: str, target_cell: Block) -> bool:
        """Целевая фигура стоит стартовым блоком в целевой клетке."""
        for piece in self.pieces:
            if piece.label == target_label:
                return self.get_piece_starting_block(piece) == target_cell
        return False

    def __repr__(self) -> str:
        move = f"{self.move_piece.label} {self.move_direction}" if self.move_piece else "root"
        return f"State(step={self.step}, hash={self.hash:08x}, move={move})"

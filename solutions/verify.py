"""
solutions/verify.py

Проверка решений: повторное применение ходов к начальной расстановке.
"""

from typing import List, Optional, Sequence, Tuple

from core.config import DEFAULT_CONFIG, PuzzleConfig
from core.state import State, can_move
from core.utils import MOVES_BY_NAME, move_name


def _moved_piece_index(before: State, after: State) -> Optional[int]:
    """Индекс единственной фигуры, изменившей положение, или None."""
    changed = [
        i for i, (a, b) in enumerate(zip(before.pieces, after.pieces))
        if a != b
    ]
    if len(changed) != 1 or len(before.pieces) != len(after.pieces):
        return None
    return changed[0]


def slide_offset(before: State, after: State) -> Optional[Tuple[int, int]]:
    """Смещение (dx, dy) единственной сдвинутой фигуры или None."""
    index = _moved_piece_index(before, after)
    if index is None:
        return None

    a, b = before.pieces[index], after.pieces[index]
    if a.label != b.label or (a.width, a.height) != (b.width, b.height):
        return None

    start_a, start_b = a.starting_block, b.starting_block
    return start_b.x - start_a.x, start_b.y - start_a.y


def slide_distance(before: State, after: State) -> Optional[int]:
    """
    На сколько клеток сдвинулась фигура между двумя состояниями решения.

    Returns:
        Число клеток, или None если переход - не прямой сдвиг одной фигуры
        в направлении, записанном в after.move_direction
    """
    offset = slide_offset(before, after)
    if offset is None or after.move_piece is None:
        return None

    dx, dy = offset
    name = move_name(dx, dy)
    if name is None or name != after.move_direction:
        return None

    moved = after.pieces[_moved_piece_index(before, after)]
    if moved.label != after.move_piece.label:
        return None

    return abs(dx) + abs(dy)


def verify_solution(initial: State, steps: Sequence[State],
                    config: PuzzleConfig = DEFAULT_CONFIG) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждое состояние получено из предыдущего сдвигом одной фигуры
      по прямой на одну или несколько клеток;
    - каждый единичный сдвиг допустим (can_move) на текущем поле;
    - после всех ходов выполнено условие цели.
    """
    current = initial

    for step in steps:
        distance = slide_distance(current, step)
        if distance is None:
            return False

        index = _moved_piece_index(current, step)
        move = MOVES_BY_NAME[step.move_direction]
        pieces: List = list(current.pieces)

        for _ in range(distance):
            replay = State(pieces)
            piece = pieces[index]
            matrix = replay.get_matrix(config.width, config.height)
            if not can_move(piece, matrix, piece.starting_block, move,
                            config.width, config.height):
                return False
            pieces[index] = piece.shifted(move)

        if tuple(pieces) != step.pieces:
            return False
        current = State(pieces)

    return current.is_final(config.target_label, config.target_cell)

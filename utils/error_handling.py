"""
utils/error_handling.py

Исключения решателя и валидация начальной расстановки.
"""

from typing import Iterable, Set, Tuple


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class StateVisitedError(SolverError):
    """
    Состояние с таким хешом уже встречалось.

    Ожидаемая ситуация: цикл расширения просто отбрасывает кандидата.
    """
    pass


class UnsolvableError(SolverError):
    """Очередь состояний исчерпана, целевая позиция не найдена."""
    pass


class PieceNotFoundError(SolverError):
    """
    Фигуры с такой меткой нет в состоянии.

    Нарушение инварианта (ошибка программиста), не перехватывается.
    """
    pass


class InvalidLayoutError(SolverError):
    """Ошибка невалидной расстановки фигур."""
    pass


def validate_layout(pieces: Iterable, width: int, height: int) -> bool:
    """
    Валидирует расстановку фигур.

    Args:
        pieces: фигуры (Piece)
        width, height: размеры поля

    Returns:
        True если расстановка валидна

    Raises:
        InvalidLayoutError: если расстановка невалидна
    """
    pieces = list(pieces)
    if not pieces:
        raise InvalidLayoutError("Расстановка не содержит фигур")

    labels: Set[str] = set()
    occupied: Set[Tuple[int, int]] = set()

    for piece in pieces:
        if piece.label in labels:
            raise InvalidLayoutError(f"Повторяющаяся метка фигуры: {piece.label!r}")
        labels.add(piece.label)

        if len(piece.blocks) != piece.width * piece.height:
            raise InvalidLayoutError(
                f"Фигура {piece.label!r}: {len(piece.blocks)} клеток "
                f"вместо {piece.width}x{piece.height}"
            )

        min_x = min(b.x for b in piece.blocks)
        min_y = min(b.y for b in piece.blocks)
        expected = {
            (min_x + dx, min_y + dy)
            for dx in range(piece.width)
            for dy in range(piece.height)
        }
        if {(b.x, b.y) for b in piece.blocks} != expected:
            raise InvalidLayoutError(
                f"Фигура {piece.label!r} не образует прямоугольник "
                f"{piece.width}x{piece.height}"
            )

        for b in piece.blocks:
            if not (0 <= b.x < width and 0 <= b.y < height):
                raise InvalidLayoutError(
                    f"Фигура {piece.label!r} выходит за пределы поля: ({b.x}, {b.y})"
                )
            if (b.x, b.y) in occupied:
                raise InvalidLayoutError(
                    f"Клетка ({b.x}, {b.y}) занята несколькими фигурами"
                )
            occupied.add((b.x, b.y))

    return True

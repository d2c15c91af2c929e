"""
klotski_io/visualizer.py

Визуализация поля и решений.
"""

from typing import List, Sequence

from core.state import State
from core.utils import BOARD_HEIGHT, BOARD_WIDTH, EXIT, WALL

# Столбцы нижней рамки (с учётом левой стенки), где находится выход
EXIT_COLUMNS = (2, 3)


def render_state(state: State, width: int = BOARD_WIDTH,
                 height: int = BOARD_HEIGHT) -> str:
    """
    Текстовое представление поля в рамке.

    Рамка из 'X', в нижней рамке под столбцами 1–2 - выход 'Z'.
    Каждая клетка - метка фигуры или '_'. Строка заканчивается переводом
    строки.

    Пример для классической расстановки::

        X X X X X X
        X a b b c X
        X a b b c X
        X d e e f X
        X d g h f X
        X i _ _ j X
        X X Z Z X X
    """
    matrix = state.get_matrix(width, height)
    lines = [f"{WALL} " * (width + 2)]

    for row in matrix:
        lines.append(f"{WALL} " + "".join(f"{cell} " for cell in row) + f"{WALL} ")

    lines.append("".join(
        f"{EXIT} " if col in EXIT_COLUMNS else f"{WALL} "
        for col in range(width + 2)
    ))

    return "\n".join(lines) + "\n"


def format_move(number: int, state: State) -> str:
    """Строка хода: '1) g moves down'."""
    return f"{number}) {state.move_piece.label} moves {state.move_direction}"


def format_solution(states: Sequence[State], width: int = BOARD_WIDTH,
                    height: int = BOARD_HEIGHT) -> str:
    """
    Форматирует решение для вывода в консоль.

    Args:
        states: состояния решения (без корня)

    Returns:
        Число ходов и поле после каждого хода
    """
    if not states:
        return "Решение пустое: начальная позиция уже целевая"

    lines: List[str] = [f"Ходов до целевой позиции: {len(states)}", ""]
    for number, state in enumerate(states, 1):
        lines.append(format_move(number, state))
        lines.append("")
        lines.append(render_state(state, width, height))

    return "\n".join(lines)

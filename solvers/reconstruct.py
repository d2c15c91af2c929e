"""
solvers/reconstruct.py

Восстановление пути от целевого состояния к корню.
"""

from typing import Dict, List, Sequence

from core.state import State


def same_slide(state: State, parent: State) -> bool:
    """Родитель получен сдвигом той же фигуры в том же направлении."""
    if state.move_piece is None or parent.move_piece is None:
        return False
    return (
        state.move_piece.label == parent.move_piece.label
        and state.move_direction == parent.move_direction
    )


def reconstruct_path(states: Sequence[State], goal_index: int) -> List[State]:
    """
    Восстанавливает ходы от корня до states[goal_index].

    Идём по индексам родителей к корню и запоминаем по одному состоянию
    на каждое значение step. Если состояние и его родитель - сдвиги одной
    фигуры в одну сторону (в том числе двойной шаг, записанный на той же
    глубине), родитель пропускается. Пропускается вся серия таких
    предков, а не только ближайший: три и более сдвигов одной фигуры в
    одну сторону подряд тоже выдаются одним ходом.

    Returns:
        Состояния в порядке возрастания step; корень не включается.
        Каждое отличается от предыдущего (или от корня) сдвигом одной
        фигуры на одну или несколько клеток в одном направлении.
    """
    unique_states: Dict[int, State] = {}

    current = states[goal_index]
    while current.parent is not None:
        unique_states[current.step] = current

        parent = states[current.parent]
        while same_slide(current, parent):
            parent = states[parent.parent]
        current = parent

    return [unique_states[step] for step in sorted(unique_states)]

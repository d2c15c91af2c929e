"""
klotski_io - Ввод/вывод для Klotski

Экспортирует:
- Классическую расстановку и парсинг текстового формата
- Визуализацию поля и решений
"""

from .parser import CLASSIC_LAYOUT, create_classic_layout, parse_layout, load_layout
from .visualizer import render_state, format_move, format_solution

__all__ = [
    'CLASSIC_LAYOUT',
    'create_classic_layout',
    'parse_layout',
    'load_layout',
    'render_state',
    'format_move',
    'format_solution',
]

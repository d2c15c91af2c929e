"""
solutions - Проверка найденных решений.
"""

from .verify import verify_solution, slide_distance, slide_offset

__all__ = [
    'verify_solution',
    'slide_distance',
    'slide_offset',
]

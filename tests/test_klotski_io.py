"""
tests/test_klotski_io.py

Тесты для парсинга расстановок и текстовой визуализации.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.state import State
from core.utils import DOWN, LEFT, Block
from klotski_io import (
    CLASSIC_LAYOUT, create_classic_layout, parse_layout, load_layout,
    render_state, format_move, format_solution
)
from utils.error_handling import InvalidLayoutError


EXPECTED_CLASSIC_RENDER = (
    "X X X X X X \n"
    "X a b b c X \n"
    "X a b b c X \n"
    "X d e e f X \n"
    "X d g h f X \n"
    "X i _ _ j X \n"
    "X X Z Z X X \n"
)


def test_classic_layout():
    """Десять фигур: одна 2×2, четыре 1×2, одна 2×1, четыре 1×1."""
    pieces = create_classic_layout()

    assert [p.label for p in pieces] == list("abcdefghij")
    shapes = sorted((p.width, p.height) for p in pieces)
    assert shapes == sorted([(2, 2)] + [(1, 2)] * 4 + [(2, 1)] + [(1, 1)] * 4)
    assert pieces[1].starting_block == Block(1, 0)


def test_parse_classic_text_matches_literal():
    """Текстовая классическая расстановка совпадает с литералом."""
    assert parse_layout(CLASSIC_LAYOUT) == create_classic_layout()


def test_parse_layout_wrong_row_count():
    """Неверное число строк - InvalidLayoutError."""
    with pytest.raises(InvalidLayoutError):
        parse_layout("a b b c\na b b c")


def test_parse_layout_wrong_row_width():
    """Строка неверной длины - InvalidLayoutError."""
    text = CLASSIC_LAYOUT.replace("i _ _ j", "i _ _")
    with pytest.raises(InvalidLayoutError):
        parse_layout(text)


def test_parse_layout_non_rectangular_piece():
    """Фигура не прямоугольником - InvalidLayoutError."""
    text = """
        a b b c
        a b _ c
        d e e f
        d g h f
        i b _ j
    """
    with pytest.raises(InvalidLayoutError):
        parse_layout(text)


def test_parse_layout_unknown_shape():
    """Фигура 3×1 не поддерживается."""
    text = """
        a a a c
        _ b b c
        d b b f
        d g h f
        i _ _ j
    """
    with pytest.raises(InvalidLayoutError):
        parse_layout(text)


def test_load_layout(tmp_path):
    """Расстановка читается из файла."""
    path = tmp_path / "layout.txt"
    path.write_text(CLASSIC_LAYOUT, encoding="utf-8")

    assert load_layout(str(path)) == create_classic_layout()


def test_render_classic():
    """Рамка из X, выход ZZ под столбцами 1–2."""
    assert render_state(State(create_classic_layout())) == EXPECTED_CLASSIC_RENDER


def test_format_solution():
    """Число ходов и строка каждого хода."""
    root = State(create_classic_layout())
    pieces = list(root.pieces)
    pieces[6] = pieces[6].shifted(DOWN)
    moved = State(pieces, parent=0, step=1, move_piece=pieces[6], move_direction="down")

    text = format_solution([moved])

    assert "1) g moves down" in text
    assert ": 1" in text.splitlines()[0]


def test_format_empty_solution():
    """Пустое решение - отдельное сообщение."""
    assert format_solution([])


def test_format_move():
    """Единственный форматтер хода: номер, метка и направление."""
    root = State(create_classic_layout())
    pieces = list(root.pieces)
    pieces[9] = pieces[9].shifted(LEFT)
    moved = State(pieces, parent=0, step=1, move_piece=pieces[9], move_direction="left")

    assert format_move(3, moved) == "3) j moves left"

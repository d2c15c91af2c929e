"""
web/app.py

Flask веб-приложение для Klotski Solver.

Решаемая задача берётся из app.config:
- KLOTSKI_LAYOUT - список фигур (None - классическая расстановка);
- KLOTSKI_CONFIG - PuzzleConfig (цель, seed, размеры поля).
main.py заполняет их из аргументов командной строки.
"""

import os
import sys

from flask import Flask, current_app, render_template, jsonify
from markupsafe import Markup, escape

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from core.config import DEFAULT_CONFIG
from core.state import State
from klotski_io import create_classic_layout, render_state
from solvers import LookaheadBFSSolver
from utils.error_handling import UnsolvableError
from utils.logging import get_logger

TITLE = "Klotski"

app = Flask(__name__)
app.config.setdefault('KLOTSKI_LAYOUT', None)
app.config.setdefault('KLOTSKI_CONFIG', DEFAULT_CONFIG)

logger = get_logger("web")


@app.template_filter('nl2br')
def nl2br(text):
    """Заменяет переводы строк на <br> (текст экранируется)."""
    return Markup("<br>".join(escape(line) for line in text.split("\n")))


def configure(pieces=None, config=DEFAULT_CONFIG):
    """Задаёт расстановку и параметры задачи для всех запросов."""
    app.config['KLOTSKI_LAYOUT'] = list(pieces) if pieces is not None else None
    app.config['KLOTSKI_CONFIG'] = config


def _puzzle():
    pieces = current_app.config['KLOTSKI_LAYOUT']
    if pieces is None:
        pieces = create_classic_layout()
    return pieces, current_app.config['KLOTSKI_CONFIG']


def solve_puzzle():
    """
    Решает настроенную расстановку.

    Каждый запрос строит свою доску: поиск не разделяет состояние
    между запросами.

    Returns:
        (board, results, solver)

    Raises:
        UnsolvableError: решение не найдено
    """
    pieces, config = _puzzle()
    board = Board.from_config(pieces, config)
    solver = LookaheadBFSSolver(config=config)
    results = solver.solve(board)
    logger.info(f"Solved in {len(results)} moves ({solver.stats})")
    return board, results, solver


def _moves_payload(results, config):
    return [
        {
            'step': number,
            'piece': state.move_piece.label,
            'direction': state.move_direction,
            'grid': render_state(state, config.width, config.height),
        }
        for number, state in enumerate(results, 1)
    ]


@app.route('/')
def index():
    """Начальная позиция и полное решение."""
    pieces, config = _puzzle()
    initial_state = State(pieces)
    error = None
    moves = []

    try:
        _, results, _ = solve_puzzle()
        moves = _moves_payload(results, config)
    except UnsolvableError as e:
        logger.error(f"Solve failed: {e}")
        error = str(e)

    return render_template(
        'index.html',
        title=TITLE,
        initial_state=render_state(initial_state, config.width, config.height),
        moves=moves,
        error=error,
    )


@app.route('/solution')
def solution():
    """Только число ходов."""
    try:
        _, results, _ = solve_puzzle()
    except UnsolvableError as e:
        logger.error(f"Solve failed: {e}")
        return render_template('solution.html', title=TITLE, moves_count=None, error=str(e)), 422

    return render_template('solution.html', title=TITLE, moves_count=len(results), error=None)


@app.route('/api/solve', methods=['GET'])
def api_solve():
    """Решение в JSON."""
    config = current_app.config['KLOTSKI_CONFIG']
    try:
        board, results, solver = solve_puzzle()
    except UnsolvableError as e:
        logger.error(f"Solve failed: {e}")
        return jsonify({'success': False, 'error': str(e)}), 422

    return jsonify({
        'success': True,
        'initial_state': render_state(board.root, config.width, config.height),
        'moves_count': len(results),
        'moves': _moves_payload(results, config),
        'stats': solver.stats.to_dict(),
    })


if __name__ == '__main__':
    print("=" * 50)
    print("Klotski Solver - Web UI")
    print("=" * 50)
    print("\nOpen http://localhost:8000 in your browser")
    print()

    app.run(debug=True, host='0.0.0.0', port=8000)

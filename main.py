#!/usr/bin/env python3
"""
main.py

Точка входа для Klotski Solver.

Использование:
    python main.py                          # решить классическую позицию
    python main.py --layout my_layout.txt   # своя расстановка
    python main.py --seed 7                 # другой seed таблицы Zobrist
    python main.py --mode http --port 8000  # веб-интерфейс
"""

import sys
import argparse
import logging

from core.board import Board
from core.config import DEFAULT_CONFIG, PuzzleConfig
from core.zobrist import DEFAULT_SEED
from klotski_io import create_classic_layout, load_layout, render_state, format_solution
from solutions.verify import verify_solution
from solvers import LookaheadBFSSolver
from utils.error_handling import InvalidLayoutError, UnsolvableError
from utils.logging import get_logger, set_level


def solve_board(pieces, config: PuzzleConfig, verbose: bool = False) -> int:
    """
    Решает расстановку и печатает решение.

    Returns:
        Код выхода: 0 - решение найдено, 1 - нет
    """
    board = Board.from_config(pieces, config)
    initial_state = board.root
    solver = LookaheadBFSSolver(config=config, verbose=verbose)

    try:
        results = solver.solve(board)
    except UnsolvableError as e:
        print(f"\n❌ Решение не найдено: {e}")
        print(f"⏱ Время: {solver.stats.time_elapsed:.3f}с")
        return 1

    print("\nНачальная позиция:\n")
    print(render_state(initial_state, config.width, config.height))
    print(format_solution(results, config.width, config.height))

    if not verify_solution(initial_state, results, config):
        print("❌ Найдено некорректное решение (проверка не пройдена)")
        return 1

    print(f"⏱ Время: {solver.stats.time_elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")
    return 0


def run_server(port: int, pieces=None, config: PuzzleConfig = DEFAULT_CONFIG) -> None:
    """Запускает веб-интерфейс для заданной расстановки."""
    from web.app import app, configure

    configure(pieces, config)
    get_logger("cli").info(f"Listening on port {port}. Open http://localhost:{port}")
    app.run(host='0.0.0.0', port=port)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Klotski Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Формат файла расстановки (5 строк по 4 метки, '_' - пусто):
  a b b c
  a b b c
  d e e f
  d g h f
  i _ _ j
        """
    )
    parser.add_argument(
        '--mode', '-m', choices=['cli', 'http'], default='cli',
        help='Режим запуска (default: cli)'
    )
    parser.add_argument(
        '--layout', '-l',
        help='Файл с начальной расстановкой (по умолчанию классическая)'
    )
    parser.add_argument(
        '--seed', type=int, default=DEFAULT_SEED,
        help=f'Seed таблицы Zobrist (default: {DEFAULT_SEED})'
    )
    parser.add_argument(
        '--port', type=int, default=8000,
        help='Порт веб-интерфейса (default: 8000)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог поиска'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)

    try:
        pieces = load_layout(args.layout) if args.layout else None
    except (InvalidLayoutError, OSError) as e:
        print(f"❌ Ошибка: {e}")
        return 1

    config = PuzzleConfig(seed=args.seed)

    if args.mode == 'http':
        run_server(args.port, pieces, config)
        return 0

    print("=" * 50)
    print("🧩 Klotski Solver")
    print("=" * 50)

    if pieces is None:
        pieces = create_classic_layout()
    return solve_board(pieces, config, verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())

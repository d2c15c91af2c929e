"""
tests/test_web.py

Тесты веб-интерфейса (Flask test client) и CLI.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

import main as cli
from core.config import PuzzleConfig
from core.utils import Block
from klotski_io import create_classic_layout, parse_layout
from web.app import app, configure, nl2br


@pytest.fixture(scope="module")
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_index_page(client):
    """Главная страница: начальная позиция и ходы решения."""
    response = client.get('/')

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Number of moves needed to reach final state" in html
    assert "X a b b c X <br>" in html
    assert "moves <strong>" in html


def test_solution_page(client):
    """Страница /solution показывает число ходов."""
    response = client.get('/solution')

    assert response.status_code == 200
    assert "Number of moves:" in response.get_data(as_text=True)


def test_api_solve(client):
    """JSON: успех, ходы и статистика."""
    response = client.get('/api/solve')

    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['moves_count'] == len(data['moves']) > 0
    assert data['moves'][0]['step'] == 1
    assert data['moves'][0]['direction'] in ('down', 'right', 'up', 'left')
    assert data['stats']['solution_length'] == data['moves_count']


def test_nl2br_escapes():
    """Переводы строк заменяются на <br>, текст экранируется."""
    assert str(nl2br("a<b\nc")) == "a&lt;b<br>c"


def test_cli_unsolvable_layout(tmp_path, capsys):
    """CLI: нерешаемая расстановка - код 1."""
    path = tmp_path / "stuck.txt"
    path.write_text("a b b c\na b b c\nd e e f\nd g h f\ni _ k j\n", encoding="utf-8")

    assert cli.main(['--layout', str(path)]) == 1
    assert "Решение не найдено" in capsys.readouterr().out


def test_cli_invalid_layout(tmp_path, capsys):
    """CLI: невалидная расстановка - код 1 и сообщение об ошибке."""
    path = tmp_path / "broken.txt"
    path.write_text("a b\n", encoding="utf-8")

    assert cli.main(['--layout', str(path)]) == 1
    assert "Ошибка" in capsys.readouterr().out


def test_cli_solves_one_move_layout(tmp_path, capsys):
    """CLI: квадрат в одном ходе от цели - решение из одного хода."""
    path = tmp_path / "near.txt"
    path.write_text("a g h c\na _ _ c\nd b b f\nd b b f\ni _ _ j\n", encoding="utf-8")

    code = cli.main(['--layout', str(path)])
    out = capsys.readouterr().out

    assert code == 0
    assert "1) b moves down" in out
    assert "X X Z Z X X" in out


def test_api_uses_configured_puzzle(client):
    """Цель и расстановка берутся из конфигурации приложения."""
    config = PuzzleConfig(target_label='g', target_cell=Block(1, 4))
    configure(create_classic_layout(), config)
    try:
        data = client.get('/api/solve').get_json()
    finally:
        configure()

    assert data['success'] is True
    assert data['moves_count'] == 1
    assert data['moves'][0]['piece'] == 'g'
    assert data['moves'][0]['direction'] == 'down'


def test_api_unsolvable_configured_layout(client):
    """Нерешаемая расстановка - 422 и сообщение об ошибке."""
    pieces = parse_layout("a b b c\na b b c\nd e e f\nd g h f\ni _ k j\n")
    configure(pieces)
    try:
        response = client.get('/api/solve')
    finally:
        configure()

    assert response.status_code == 422
    assert response.get_json()['success'] is False


def test_cli_http_mode_passes_layout_and_seed(tmp_path, monkeypatch):
    """В режиме http расстановка и seed из аргументов попадают в приложение."""
    path = tmp_path / "near.txt"
    path.write_text("a g h c\na _ _ c\nd b b f\nd b b f\ni _ _ j\n", encoding="utf-8")

    started = {}
    monkeypatch.setattr(app, 'run', lambda **kwargs: started.update(kwargs))
    try:
        code = cli.main(['--mode', 'http', '--layout', str(path), '--seed', '7', '--port', '8123'])
        layout = app.config['KLOTSKI_LAYOUT']
        config = app.config['KLOTSKI_CONFIG']
    finally:
        configure()

    assert code == 0
    assert started['port'] == 8123
    assert config.seed == 7
    assert [p.label for p in layout] == list("aghcdbfij")


def test_setup_declares_markupsafe():
    """markupsafe импортируется напрямую и объявлен в зависимостях."""
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    with open(os.path.join(root, "setup.py"), encoding="utf-8") as f:
        setup_text = f.read()

    assert '"markupsafe' in setup_text

"""
utils/logging.py

Логирование решателя.

Все логгеры проекта - потомки "klotski": "klotski.solvers",
"klotski.web", "klotski.cli". Обработчик вывода вешается один раз
на корневой логгер проекта, потомки пишут через него.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "klotski"

LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _project_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Логгер компонента.

    Args:
        component: имя подсистемы ("solvers", "web", ...); None - корневой
                   логгер проекта
    """
    root = _project_logger()
    if component is None:
        return root
    return root.getChild(component)


def set_level(level: int) -> None:
    """Меняет уровень корневого логгера проекта."""
    _project_logger().setLevel(level)


def setup_file_logging(log_file: str = "klotski.log",
                       level: int = logging.INFO) -> logging.Handler:
    """
    Дублирует лог проекта в файл.

    Returns:
        Добавленный handler (чтобы его можно было снять)
    """
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    _project_logger().addHandler(handler)
    return handler

"""
utils - Логирование и обработка ошибок.
"""

from .logging import get_logger, set_level, setup_file_logging
from .error_handling import (
    SolverError, StateVisitedError, UnsolvableError,
    PieceNotFoundError, InvalidLayoutError, validate_layout
)

__all__ = [
    'get_logger', 'set_level', 'setup_file_logging',
    'SolverError', 'StateVisitedError', 'UnsolvableError',
    'PieceNotFoundError', 'InvalidLayoutError', 'validate_layout',
]

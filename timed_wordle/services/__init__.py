"""
Services Package

Contains all business logic and service classes.
"""

from .word_bank import WordBank, ConfigurationError
from .scorer import score
from .timer import CountdownTimer, format_time
from .game_engine import GameEngine
from .game_service import GameService, get_game_service, initialize_game_service, load_word_bank

__all__ = [
    'WordBank', 'ConfigurationError',
    'score',
    'CountdownTimer', 'format_time',
    'GameEngine',
    'GameService', 'get_game_service', 'initialize_game_service', 'load_word_bank'
]

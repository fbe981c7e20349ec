"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, TIMER_START_SECONDS, INVALID_WORD_PENALTY_SECONDS,
    load_word_text, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'TIMER_START_SECONDS', 'INVALID_WORD_PENALTY_SECONDS',
    'load_word_text', 'get_word_statistics'
]

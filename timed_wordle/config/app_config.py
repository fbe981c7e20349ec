"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv
from .game_settings import WORD_LENGTH, TIMER_START_SECONDS, INVALID_WORD_PENALTY_SECONDS

CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Load environment variables from config.env (optional)
load_dotenv(os.path.join(CONFIG_DIR, 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', WORD_LENGTH))
    TIMER_START_SECONDS = float(os.getenv('TIMER_START_SECONDS', TIMER_START_SECONDS))
    INVALID_WORD_PENALTY_SECONDS = float(os.getenv('INVALID_WORD_PENALTY_SECONDS', INVALID_WORD_PENALTY_SECONDS))
    TICK_INTERVAL_SECONDS = float(os.getenv('TICK_INTERVAL_SECONDS', 0.1))

    # Word List Settings
    VALID_WORDS_FILE = os.getenv('VALID_WORDS_FILE', os.path.join(CONFIG_DIR, 'words', 'valid_words.txt'))
    SOLUTIONS_FILE = os.getenv('SOLUTIONS_FILE', os.path.join(CONFIG_DIR, 'words', 'solutions.txt'))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

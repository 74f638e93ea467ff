"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    BONUS_INTERVAL,
    BONUS_POINTS,
    DEFAULT_WORD_LIST_PATH,
    FALLBACK_ROOT_WORD,
    get_rules,
    get_word_pool_statistics,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'BONUS_INTERVAL', 'BONUS_POINTS', 'DEFAULT_WORD_LIST_PATH', 'FALLBACK_ROOT_WORD',
    'get_rules', 'get_word_pool_statistics'
]

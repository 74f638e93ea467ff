"""
Services Package

Contains all business logic and service classes.
"""

from .game_session import GameSession
from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import FileWordSource, WordPoolUnavailableError, WordSource, load_word_pool

__all__ = [
    'GameSession',
    'GameService', 'get_game_service', 'initialize_game_service',
    'FileWordSource', 'WordPoolUnavailableError', 'WordSource', 'load_word_pool'
]

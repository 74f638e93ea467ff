"""
Game Service

Keeps every active word-scramble session and routes player actions to it.
"""

import random
import uuid
from typing import Dict, List, Optional

from ..models.game import GameState, SubmissionResult
from ..utils.game_logger import game_logger
from .game_session import GameSession
from .word_source import WordSourceLike, load_word_pool


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Loading the root-word pool once, at startup
    - Game session management with unique game IDs
    - Forwarding typed input, submissions, restarts and alert dismissals
      to the right session
    """

    def __init__(self, word_source: WordSourceLike, rng: Optional[random.Random] = None):
        """
        Args:
            word_source: WordSource or zero-argument callable returning words
            rng: Random source shared by all sessions (seed it in tests)

        Raises:
            WordPoolUnavailableError: If the word pool cannot be loaded
        """
        self.word_source = word_source
        self.rng = rng if rng is not None else random.Random()
        self.word_pool: List[str] = load_word_pool(word_source)
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected root word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        session = GameSession(rng=self.rng)
        session.start_game(self.word_pool)

        self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.snapshot(game_id)

    def update_input(self, game_id: str, text: str) -> Optional[GameState]:
        session = self.games.get(game_id)
        if session is None:
            return None
        session.update_input(text)
        return session.snapshot(game_id)

    def submit_word(self, game_id: str, word: Optional[str] = None) -> Optional[SubmissionResult]:
        """
        Submits a word (or the pending input) to a session.

        Args:
            game_id: Unique game identifier
            word: Raw text; None submits whatever the player has typed

        Returns:
            SubmissionResult or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.submit(word)

    def restart_game(self, game_id: str) -> Optional[GameState]:
        """
        Restarts a session with a fresh root word, clearing words and score.

        Args:
            game_id: Unique game identifier

        Returns:
            Updated GameState or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        session.start_game(self.word_pool)
        return session.snapshot(game_id)

    def acknowledge_error(self, game_id: str) -> Optional[GameState]:
        session = self.games.get(game_id)
        if session is None:
            return None
        session.acknowledge_error()
        return session.snapshot(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSourceLike, rng: Optional[random.Random] = None) -> GameService:
    """
    Initialize the global game service instance.

    Raises:
        WordPoolUnavailableError: If the word pool cannot be loaded
    """
    global _game_service
    _game_service = GameService(word_source, rng=rng)
    game_logger.logger.info(
        f"Game service initialized with {len(_game_service.word_pool)} root words from {word_source!r}"
    )
    return _game_service

"""
Game Session

Contains the core game logic: one root word, the words the player has made
from it, and the score.
"""

import random
from typing import List, Optional, Sequence

from ..config.game_settings import (
    ALREADY_USED_ERROR,
    BONUS_INTERVAL,
    BONUS_POINTS,
    FALLBACK_ROOT_WORD,
    IS_ROOT_WORD_ERROR,
    NOT_POSSIBLE_ERROR,
)
from ..models.game import (
    ErrorState,
    GameState,
    Rejection,
    RejectionKind,
    SubmissionResult,
    SubmissionStatus,
)
from .word_source import WordPoolUnavailableError


class GameSession:
    """
    State and rules for a single word-building session.

    This class handles:
    - Root word selection from a word pool
    - The submission pipeline: normalize, originality, feasibility,
      root-word identity, accept and score
    - The pending input and the last rejection shown to the player

    A session is uninitialized until start_game is called; after that,
    submit and start_game may be called any number of times.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.root_word: str = ""
        self.used_words: List[str] = []  # Most recent first
        self.score: int = 0
        self.pending_input: str = ""
        self.error = ErrorState()

    @property
    def started(self) -> bool:
        return bool(self.root_word)

    def start_game(self, word_pool: Sequence[str]) -> str:
        """
        Starts (or restarts) the session with a random root word.

        Args:
            word_pool: Candidate root words from a word source

        Returns:
            str: The chosen root word

        Raises:
            WordPoolUnavailableError: If no word pool was supplied at all
        """
        if word_pool is None:
            raise WordPoolUnavailableError("Could not load the root word list")

        self.score = 0
        self.used_words = []

        candidates = [w.strip().lower() for w in word_pool if w and w.strip()]
        self.root_word = self.rng.choice(candidates) if candidates else FALLBACK_ROOT_WORD
        return self.root_word

    def update_input(self, text: str) -> None:
        """Records what the player is currently typing."""
        self.pending_input = text if text is not None else ""

    def submit(self, raw_input: Optional[str] = None) -> SubmissionResult:
        """
        Processes a submitted word and updates the session.

        Checks run in a fixed order: already used, then possible from the
        root word's letters, then equal to the root word. Blank input is
        ignored without raising an error.

        Args:
            raw_input: Text to submit; defaults to the pending input

        Returns:
            SubmissionResult describing what happened
        """
        if not self.started:
            raise RuntimeError("start_game must be called before submitting words")

        if raw_input is None:
            raw_input = self.pending_input

        answer = self.normalize(raw_input)
        if not answer:
            return SubmissionResult(status=SubmissionStatus.IGNORED)

        if not self.is_original(answer):
            return self._reject(answer, RejectionKind.ALREADY_USED, *ALREADY_USED_ERROR)

        if not self.is_possible(answer):
            title, message = NOT_POSSIBLE_ERROR
            return self._reject(answer, RejectionKind.NOT_POSSIBLE, title, message.format(root_word=self.root_word))

        if self.is_root_word(answer):
            return self._reject(answer, RejectionKind.IS_ROOT_WORD, *IS_ROOT_WORD_ERROR)

        self.used_words.insert(0, answer)
        points = self._add_score(answer)
        self.pending_input = ""

        return SubmissionResult(status=SubmissionStatus.ACCEPTED, word=answer, points=points)

    def acknowledge_error(self) -> None:
        """Dismisses the rejection alert; title and message are kept."""
        self.error.visible = False

    @staticmethod
    def normalize(raw_input: str) -> str:
        return (raw_input or "").lower().strip()

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        return self.remaining_letters(word) is not None

    def is_root_word(self, word: str) -> bool:
        return word == self.root_word

    def remaining_letters(self, word: str) -> Optional[str]:
        """
        Spends the root word's letters on `word`, left to right.

        Each letter of `word` uses up the leftmost unused matching letter of
        the root word.

        Returns:
            The root word's unused letters in their original order, or None
            if `word` needs a letter the root word does not have left
        """
        letters = list(self.root_word)
        for letter in word:
            try:
                letters.remove(letter)
            except ValueError:
                return None
        return "".join(letters)

    def snapshot(self, game_id: str) -> GameState:
        """Returns the renderable state of this session."""
        return GameState(
            game_id=game_id,
            root_word=self.root_word,
            used_words=[{"word": word, "length": len(word)} for word in self.used_words],
            score=self.score,
            pending_input=self.pending_input,
            error=ErrorState(self.error.title, self.error.message, self.error.visible)
        )

    def _reject(self, word: str, kind: RejectionKind, title: str, message: str) -> SubmissionResult:
        self.error = ErrorState(title=title, message=message, visible=True)
        return SubmissionResult(
            status=SubmissionStatus.REJECTED,
            word=word,
            rejection=Rejection(kind=kind, title=title, message=message)
        )

    def _add_score(self, word: str) -> int:
        # Called after the word is inserted, so the count includes it
        points = len(word)
        if len(self.used_words) % BONUS_INTERVAL == 0:
            points += BONUS_POINTS
        self.score += points
        return points

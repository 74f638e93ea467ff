"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RejectionKind(Enum):
    """Reasons a submitted word can be turned down."""
    ALREADY_USED = "ALREADY_USED"
    NOT_POSSIBLE = "NOT_POSSIBLE"
    IS_ROOT_WORD = "IS_ROOT_WORD"


class SubmissionStatus(Enum):
    """Outcome of a single submission."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    IGNORED = "IGNORED"


@dataclass
class Rejection:
    """A user-facing rejection: the kind plus the alert title and message."""
    kind: RejectionKind
    title: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'kind': self.kind.value,
            'title': self.title,
            'message': self.message
        }


@dataclass
class SubmissionResult:
    """
    Result of GameSession.submit.

    Exactly one of: ignored (blank input), rejected (with a Rejection),
    or accepted (with the points it earned).
    """
    status: SubmissionStatus
    word: str = ""
    points: int = 0
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.status is SubmissionStatus.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.status is SubmissionStatus.REJECTED

    @property
    def ignored(self) -> bool:
        return self.status is SubmissionStatus.IGNORED

    def to_dict(self) -> Dict:
        return {
            'status': self.status.value,
            'word': self.word,
            'points': self.points,
            'rejection': self.rejection.to_dict() if self.rejection else None
        }


@dataclass
class ErrorState:
    """Last rejection shown to the player; hidden again once acknowledged."""
    title: str = ""
    message: str = ""
    visible: bool = False


@dataclass
class GameState:
    """Snapshot of one session as handed to a renderer."""
    game_id: str
    root_word: str
    used_words: List[Dict[str, object]]  # [{"word": ..., "length": ...}], most recent first
    score: int
    pending_input: str = ""
    error: ErrorState = field(default_factory=ErrorState)

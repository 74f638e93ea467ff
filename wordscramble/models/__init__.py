"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    ErrorState,
    GameState,
    Rejection,
    RejectionKind,
    SubmissionResult,
    SubmissionStatus,
)

__all__ = [
    'ErrorState', 'GameState', 'Rejection', 'RejectionKind',
    'SubmissionResult', 'SubmissionStatus'
]

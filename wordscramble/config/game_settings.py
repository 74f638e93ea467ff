"""
Game Configuration Constants Module

This module defines all game configuration constants: scoring rules,
rejection messages, the rules panel text and the location of the bundled
root-word list. All game parameters are centralized here to enable easy
modification.
"""

import os
from typing import Dict, Final, List, Sequence

FALLBACK_ROOT_WORD: Final[str] = "silkworm"
"""
Root word used when the word pool yields nothing to choose from.
Only covers an empty selection, never a missing word list.
"""

BONUS_INTERVAL: Final[int] = 5
"""Every BONUS_INTERVAL-th accepted word earns BONUS_POINTS on top of its length."""

BONUS_POINTS: Final[int] = 5

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'start.txt'
)
"""Newline-delimited root-word list shipped with the package."""

# Alert copy for each rejection, as (title, message). NOT_POSSIBLE is
# formatted with the root word.
ALREADY_USED_ERROR: Final[tuple] = ("Word used already", "Be more original!")
NOT_POSSIBLE_ERROR: Final[tuple] = ("Word not possible", "You can't spell that word from '{root_word}'!")
IS_ROOT_WORD_ERROR: Final[tuple] = ("Word is the rootword", "You can't use your answer because it is the rootword!")

RULES: Final[List[str]] = [
    "You must make new words using the letters of the root word at the top.",
    "Every five words you get an extra 5 points.",
]


def get_rules() -> Dict:
    """Static content for the rules panel."""
    return {
        "title": "Rules:",
        "rules": list(RULES)
    }


def get_word_pool_statistics(word_pool: Sequence[str]) -> dict:
    """
    Analyzes a word pool and returns statistical information.

    Args:
        word_pool: Root-word candidates as loaded by a word source

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the pool
            - avg_word_length: Average characters per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not word_pool:
        return {"error": "Word pool is empty"}

    letter_frequency = {}
    for word in word_pool:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    total_letters = sum(len(word) for word in word_pool)

    return {
        "total_words": len(word_pool),
        "avg_word_length": round(total_letters / len(word_pool), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }

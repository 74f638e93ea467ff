"""
Word Source

Supplies the pool of candidate root words. The game only needs something it
can call to get a list of words; a missing list is fatal.
"""

import os
from typing import Callable, List, Protocol, Sequence, Union


class WordPoolUnavailableError(RuntimeError):
    """Raised when the root-word list cannot be obtained at all."""


class WordSource(Protocol):
    def load_word_pool(self) -> List[str]:
        ...


class FileWordSource:
    """
    Reads root words from a newline-delimited UTF-8 text file.

    Blank lines are dropped so a trailing newline never yields an empty
    root word.
    """

    def __init__(self, path: str):
        self.path = path

    def load_word_pool(self) -> List[str]:
        """
        Load the word list from disk.

        Returns:
            List[str]: Words in file order, stripped and lowercased

        Raises:
            WordPoolUnavailableError: If the file is missing or unreadable
        """
        if not os.path.isfile(self.path):
            raise WordPoolUnavailableError(f"Could not load word list: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return [w for w in (line.strip().lower() for line in f) if w]
        except (OSError, UnicodeDecodeError) as e:
            raise WordPoolUnavailableError(f"Could not load word list: {self.path}: {e}") from e

    def __repr__(self) -> str:
        return f"FileWordSource({self.path!r})"


WordSourceLike = Union[WordSource, Callable[[], Sequence[str]]]


def load_word_pool(source: WordSourceLike) -> List[str]:
    """
    Load a word pool from a WordSource or a plain zero-argument callable.

    Raises:
        WordPoolUnavailableError: If the source fails or returns nothing usable
    """
    loader = getattr(source, 'load_word_pool', source)
    if not callable(loader):
        raise WordPoolUnavailableError(f"Not a word source: {source!r}")

    try:
        pool = loader()
    except OSError as e:
        raise WordPoolUnavailableError(f"Could not load word list from {source!r}: {e}") from e

    if pool is None:
        raise WordPoolUnavailableError(f"Word source returned no word list: {source!r}")
    return list(pool)

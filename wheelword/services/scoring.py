"""
Guess Scoring

Normalizes guesses, checks them against the accepted-word dictionary and
scores them against the target with the two-pass Wordle evaluation.
"""

import json
import unicodedata
from collections import Counter
from typing import Iterable, List, Optional

from ..exceptions import ConfigurationError, InvalidGuessCharacters, InvalidGuessLength
from ..models.game import LetterFeedback


def normalize_word(raw: str) -> str:
    """
    Uppercase a word and strip its diacritics (Ñ -> N, Á -> A).

    Raises:
        InvalidGuessCharacters: If anything other than A-Z remains
    """
    decomposed = unicodedata.normalize('NFD', raw.strip().upper())
    word = ''.join(char for char in decomposed if not unicodedata.combining(char))
    if not word or not (word.isascii() and word.isalpha()):
        raise InvalidGuessCharacters("The word can only contain letters")
    return word


def score_guess(target: str, guess: str) -> List[LetterFeedback]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are claimed first, so a letter that appears once in the
    target is never reported as PRESENT at a second position.
    """
    if len(guess) != len(target):
        raise InvalidGuessLength(f"The word must have {len(target)} letters")

    feedback: List[Optional[LetterFeedback]] = [None] * len(guess)
    remaining = Counter(target)

    # First pass: exact position matches
    for i, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            feedback[i] = LetterFeedback.CORRECT
            remaining[guessed] -= 1

    # Second pass: misplaced letters consume what the first pass left over
    for i, guessed in enumerate(guess):
        if feedback[i] is not None:
            continue
        if remaining[guessed] > 0:
            feedback[i] = LetterFeedback.PRESENT
            remaining[guessed] -= 1
        else:
            feedback[i] = LetterFeedback.ABSENT

    return feedback  # type: ignore[return-value]


class Dictionary:
    """Set of accepted guesses, stored normalized."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(self._normalize_entry(word) for word in words)

    @staticmethod
    def _normalize_entry(word: str) -> str:
        try:
            return normalize_word(word)
        except InvalidGuessCharacters:
            raise ConfigurationError(f"Dictionary entry '{word}' is not a plain word")

    @classmethod
    def from_file(cls, path: str, extra_words: Iterable[str] = ()) -> "Dictionary":
        """
        Load a dictionary file: a JSON array of words, or one word per line.
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read dictionary file {path}: {e}")

        if path.endswith('.json'):
            try:
                words = json.loads(content)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in dictionary file {path}: {e}")
        else:
            words = [line.strip() for line in content.splitlines() if line.strip()]
        return cls(list(words) + list(extra_words))

    def __contains__(self, word: str) -> bool:
        try:
            return normalize_word(word) in self._words
        except InvalidGuessCharacters:
            return False

    def __len__(self) -> int:
        return len(self._words)

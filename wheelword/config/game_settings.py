"""
Game Configuration Constants Module

This module defines the WheelWord game rules and loads the static word data.
All game parameters are centralized here so the selector, scorer and stats
share a single definition of the rules.
"""

import json
import os
from typing import Dict, Final, FrozenSet, List

from ..exceptions import ConfigurationError
from ..models.game import WordEntry

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per daily game.
Type: Final[int] - Immutable to prevent accidental modification
"""

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 11

WORD_CATEGORIES: Final[FrozenSet[str]] = frozenset({'marca', 'modelo', 'general'})

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))


def _read_json(file_name: str):
    json_file_path = os.path.join(_CONFIG_DIR, file_name)
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Word data file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {file_name}: {e}")


def _load_word_bank() -> List[WordEntry]:
    """
    Load the daily word bank from words.json.

    Returns:
        List[WordEntry]: Entries in file order. The order is part of the
        game: it decides which word belongs to which game number.

    Raises:
        ConfigurationError: If the file is missing, malformed or fails
            validate_word_bank_integrity
    """
    raw_entries = _read_json('words.json')
    if not isinstance(raw_entries, list):
        raise ConfigurationError("words.json must contain an array of word entries")

    word_bank = []
    for raw in raw_entries:
        if not isinstance(raw, dict) or 'word' not in raw:
            raise ConfigurationError(f"Malformed word entry: {raw!r}")
        word = str(raw['word'])
        word_bank.append(WordEntry(word=word, length=len(word), category=raw.get('category', 'general')))

    validate_word_bank_integrity(word_bank)
    return word_bank


def _load_accepted_words() -> List[str]:
    """Load the extra accepted guesses from accepted_words.json."""
    words = _read_json('accepted_words.json')
    if not isinstance(words, list):
        raise ConfigurationError("accepted_words.json must contain an array of words")
    return [str(word) for word in words]


def validate_word_bank_integrity(word_bank: List[WordEntry]) -> bool:
    """
    Validates the integrity and consistency of a word bank.

    This function performs validation to ensure:
    1. Length validation: every word is between MIN_WORD_LENGTH and MAX_WORD_LENGTH
    2. Character validation: only A-Z allowed
    3. Format validation: consistent uppercase formatting
    4. Uniqueness validation: no duplicate entries
    5. Category validation: every category is a known one

    Returns:
        bool: True if the bank passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    if not word_bank:
        raise ConfigurationError("Word bank cannot be empty")

    for index, entry in enumerate(word_bank):
        word = entry.word
        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise ConfigurationError(
                f"Word at index {index} '{word}' must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters long"
            )

        if not (word.isascii() and word.isalpha()):
            raise ConfigurationError(f"Word at index {index} '{word}' contains non A-Z characters")

        if not word.isupper():
            raise ConfigurationError(f"Word at index {index} '{word}' is not in uppercase format")

        if entry.length != len(word):
            raise ConfigurationError(f"Word at index {index} '{word}' has a wrong length field")

        if entry.category not in WORD_CATEGORIES:
            raise ConfigurationError(f"Word at index {index} '{word}' has unknown category '{entry.category}'")

    words = [entry.word for entry in word_bank]
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ConfigurationError(f"Duplicate words found in word bank: {duplicates}")

    return True


def get_word_statistics(word_bank: List[WordEntry]) -> Dict:
    """
    Summarizes a word bank for health reporting.

    Returns:
        dict: total_words, words per length, words per category and the
        five most common letters
    """
    if not word_bank:
        return {"error": "Word bank is empty"}

    by_length: Dict[int, int] = {}
    by_category: Dict[str, int] = {}
    letter_frequency: Dict[str, int] = {}
    for entry in word_bank:
        by_length[entry.length] = by_length.get(entry.length, 0) + 1
        by_category[entry.category] = by_category.get(entry.category, 0) + 1
        for char in entry.word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_bank),
        "by_length": {str(length): count for length, count in sorted(by_length.items())},
        "by_category": by_category,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Curated word data loaded from JSON files
WORD_BANK: Final[List[WordEntry]] = _load_word_bank()
ACCEPTED_WORDS: Final[List[str]] = _load_accepted_words()

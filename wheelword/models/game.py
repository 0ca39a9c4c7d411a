"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterFeedback(Enum):
    """Per-letter classification of a guess relative to the target."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @classmethod
    def parse(cls, value: str) -> "LetterFeedback":
        """Accepts an enum name or its emoji rendering."""
        value = value.replace("\ufe0f", "")
        for feedback, symbol in _EMOJI.items():
            if value == symbol:
                return feedback
        return cls(value.upper())


_EMOJI = {
    LetterFeedback.CORRECT: "🟩",
    LetterFeedback.PRESENT: "🟨",
    LetterFeedback.ABSENT: "⬜",
}

# Keyboard status only ever upgrades: ABSENT < PRESENT < CORRECT
FEEDBACK_PRIORITY = {
    LetterFeedback.ABSENT: 0,
    LetterFeedback.PRESENT: 1,
    LetterFeedback.CORRECT: 2,
}


class SessionStatus(Enum):
    """Lifecycle of one player's daily game."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.WON, SessionStatus.LOST)


@dataclass(frozen=True)
class WordEntry:
    """A candidate daily word."""
    word: str
    length: int
    category: str = "general"


@dataclass(frozen=True)
class DailyGame:
    """Public description of a day's game. Never carries the word."""
    game_number: int
    word_length: int
    game_date: date

    def to_dict(self) -> Dict:
        return {
            'gameNumber': self.game_number,
            'wordLength': self.word_length,
            'gameDate': self.game_date.isoformat()
        }


@dataclass(frozen=True)
class GuessFeedback:
    """A scored guess."""
    guess: str
    feedback: Tuple[LetterFeedback, ...]

    @property
    def is_correct(self) -> bool:
        return all(status == LetterFeedback.CORRECT for status in self.feedback)

    def values(self) -> List[str]:
        return [status.value for status in self.feedback]


@dataclass
class GameState:
    """Player-facing snapshot of a daily game."""
    game_number: int
    word_length: int
    game_date: date
    attempts: List[str]
    feedbacks: List[List[str]]
    game_over: bool
    won: bool
    letter_status: Dict[str, str] = field(default_factory=dict)
    correct_word: Optional[str] = None  # Only included when game is over

    def to_dict(self) -> Dict:
        data = {
            'gameNumber': self.game_number,
            'wordLength': self.word_length,
            'gameDate': self.game_date.isoformat(),
            'attempts': list(self.attempts),
            'feedbacks': [list(row) for row in self.feedbacks],
            'gameOver': self.game_over,
            'won': self.won,
            'letterStatus': dict(self.letter_status)
        }
        if self.game_over:
            data['correctWord'] = self.correct_word
        return data


@dataclass
class GuessResult:
    """Response to one accepted guess. game_number is for logging only."""
    game_number: int
    guess: str
    feedback: List[str]
    is_correct: bool
    attempts_used: int
    game_over: bool
    won: bool
    correct_word: Optional[str] = None
    stats: Optional[Dict] = None

    def to_dict(self) -> Dict:
        data = {
            'guess': self.guess,
            'feedback': list(self.feedback),
            'isCorrect': self.is_correct,
            'attemptsUsed': self.attempts_used,
            'gameOver': self.game_over,
            'won': self.won
        }
        if self.game_over:
            data['correctWord'] = self.correct_word
        if self.stats is not None:
            data['stats'] = self.stats
        return data

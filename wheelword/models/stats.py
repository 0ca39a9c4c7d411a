"""
Player Statistics Model

Accumulates completed daily games into win/loss counts, streaks and a
win-distribution histogram.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass
class WheelwordStats:
    """
    Per-player WheelWord statistics.

    win_distribution[i] counts wins that took i + 1 attempts. The win
    percentage is always derived from games_played and games_won.

    record_result does not deduplicate: the caller records each completed
    game exactly once.
    """
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    win_distribution: List[int] = field(default_factory=list)
    last_played_date: Optional[date] = None

    @classmethod
    def empty(cls, max_attempts: int) -> "WheelwordStats":
        return cls(win_distribution=[0] * max_attempts)

    @classmethod
    def from_document(cls, document: Optional[Dict], max_attempts: int) -> "WheelwordStats":
        """Build stats from the persisted sub-document (None means a new player)."""
        if not document:
            return cls.empty(max_attempts)

        distribution = list(document.get('win_distribution') or [])
        # Pad or trim so the histogram always has one slot per attempt
        distribution = (distribution + [0] * max_attempts)[:max_attempts]

        last_played = document.get('last_played_date')
        return cls(
            games_played=document.get('games_played', 0),
            games_won=document.get('games_won', 0),
            current_streak=document.get('current_streak', 0),
            max_streak=document.get('max_streak', 0),
            win_distribution=distribution,
            last_played_date=date.fromisoformat(last_played) if last_played else None
        )

    @property
    def win_percentage(self) -> int:
        if self.games_played == 0:
            return 0
        # Halves round up
        return (self.games_won * 200 + self.games_played) // (2 * self.games_played)

    def record_result(self, won: bool, attempts_used: int,
                      played_on: Optional[date] = None) -> "WheelwordStats":
        """
        Fold one completed game into the statistics.

        Args:
            won: Whether the game was won
            attempts_used: Attempts the game took (1-based)
            played_on: Day the game belongs to. When given, a win that comes
                more than one day after the previous result starts a new streak.

        Returns:
            self, updated in place
        """
        if won and not 1 <= attempts_used <= len(self.win_distribution):
            raise ValueError(
                f"attempts_used must be between 1 and {len(self.win_distribution)}, got {attempts_used}"
            )

        self.games_played += 1
        if won:
            if (played_on is not None and self.last_played_date is not None
                    and (played_on - self.last_played_date).days > 1):
                self.current_streak = 0
            self.games_won += 1
            self.current_streak += 1
            self.max_streak = max(self.max_streak, self.current_streak)
            self.win_distribution[attempts_used - 1] += 1
        else:
            self.current_streak = 0

        if played_on is not None:
            self.last_played_date = played_on
        return self

    def to_document(self) -> Dict:
        """Persisted form. win_percentage is not stored."""
        return {
            'games_played': self.games_played,
            'games_won': self.games_won,
            'current_streak': self.current_streak,
            'max_streak': self.max_streak,
            'win_distribution': list(self.win_distribution),
            'last_played_date': self.last_played_date.isoformat() if self.last_played_date else None
        }

    def to_dict(self) -> Dict:
        return {
            'gamesPlayed': self.games_played,
            'gamesWon': self.games_won,
            'winPercentage': self.win_percentage,
            'currentStreak': self.current_streak,
            'maxStreak': self.max_streak,
            'winDistribution': list(self.win_distribution)
        }

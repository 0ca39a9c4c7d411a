"""
Daily Selector

Maps a UTC calendar day to a game number and a target word. The mapping is a
pure function of the date and the static word bank, so every process and
every player agree on the day's word without shared state.
"""

from datetime import date, datetime, timezone
from typing import Callable, Optional, Sequence, Tuple

from ..config.game_settings import validate_word_bank_integrity
from ..exceptions import ConfigurationError
from ..models.game import DailyGame, WordEntry


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class DailySelector:
    """Deterministic daily word selection."""

    def __init__(self, word_bank: Sequence[WordEntry], epoch: date,
                 today_fn: Optional[Callable[[], date]] = None):
        # An empty or malformed bank must stop the game, not serve a wrong word
        validate_word_bank_integrity(list(word_bank))
        self.word_bank = tuple(word_bank)
        self.epoch = epoch
        self.today_fn = today_fn or utc_today

    def game_number_for(self, day: date) -> int:
        """Day offset from the epoch, starting at 1."""
        game_number = (day - self.epoch).days + 1
        if game_number < 1:
            raise ConfigurationError(
                f"Date {day.isoformat()} is before the game epoch {self.epoch.isoformat()}"
            )
        return game_number

    def word_for(self, game_number: int) -> WordEntry:
        """The bank is reused cyclically once game numbers pass its size."""
        return self.word_bank[game_number % len(self.word_bank)]

    def puzzle_for(self, day: date) -> Tuple[DailyGame, WordEntry]:
        game_number = self.game_number_for(day)
        entry = self.word_for(game_number)
        return DailyGame(game_number=game_number, word_length=entry.length, game_date=day), entry

    def todays_puzzle(self) -> Tuple[DailyGame, WordEntry]:
        """Today's game together with its target. Server-side use only."""
        return self.puzzle_for(self.today_fn())

    def get_todays_game(self) -> DailyGame:
        """Today's public game description."""
        game, _ = self.todays_puzzle()
        return game

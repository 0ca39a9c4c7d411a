import datetime

import pytest

from conftest import MISSES, STABLE_BANK, TARGET, TEST_DAY, TEST_GAME_NUMBER
from wheelword.config import TestingConfig
from wheelword.exceptions import (
    ConcurrentUpdateError, ConfigurationError, DuplicateGuess, GameAlreadyFinished, InvalidGuessLength,
    InvalidRequest, PersistenceUnavailable, WordNotInDictionary
)
from wheelword.models.game import LetterFeedback
from wheelword.services.daily_selector import DailySelector
from wheelword.services.player_repository import PlayerRepository
from wheelword.services.wheelword_service import WheelwordService

USER = '42'


def players(database):
    return database.wheelword_players


class RacingRepository(PlayerRepository):
    """Lets a competing request write between this request's read and its write."""

    def __init__(self, database, competitor):
        super().__init__(database)
        self.competitor = competitor
        self.raced = False

    def find_player(self, user_id):
        document = super().find_player(user_id)
        if not self.raced:
            self.raced = True
            self.competitor()
        return document


class AlwaysStaleRepository(PlayerRepository):
    def save_player(self, user_id, expected_version, game, stats=None):
        return False


# --- anonymous players ---

def test_anonymous_guess_is_scored_but_not_stored(service, database):
    result = service.submit_guess('turbo')

    assert result.guess == 'TURBO'
    assert result.feedback == ['PRESENT', 'ABSENT', 'PRESENT', 'ABSENT', 'PRESENT']
    assert result.attempts_used == 1
    assert not result.game_over
    assert result.correct_word is None
    assert players(database).count_documents({}) == 0


def test_anonymous_progress_comes_from_session_attempts(service):
    result = service.submit_guess('MOTOR', session_attempts=['TURBO', 'PEDAL'])

    assert result.won and result.game_over
    assert result.attempts_used == 3
    assert result.correct_word == TARGET
    assert result.stats is None


def test_anonymous_duplicate_and_finished_games_are_rejected(service):
    with pytest.raises(DuplicateGuess):
        service.submit_guess('pedal', session_attempts=['PEDAL'])
    with pytest.raises(GameAlreadyFinished):
        service.submit_guess('RALLY', session_attempts=MISSES[:6])


@pytest.mark.parametrize('session_attempts', [['TURB0'], ['SKYLINE']])
def test_bad_session_attempts_are_a_request_error(service, session_attempts):
    with pytest.raises(InvalidRequest, match="sessionAttempts"):
        service.submit_guess('MOTOR', session_attempts=session_attempts)


# --- registered players ---

def test_first_guess_starts_todays_game(service):
    assert service.get_user_game_state(USER) is None

    service.submit_guess('TURBO', USER)
    state = service.get_user_game_state(USER)

    assert state.game_number == TEST_GAME_NUMBER
    assert state.attempts == ['TURBO']
    assert not state.game_over
    assert state.correct_word is None


def test_win_in_three_records_stats_once(service):
    service.submit_guess('TURBO', USER)
    service.submit_guess('PEDAL', USER)
    result = service.submit_guess('MOTOR', USER)

    assert result.won and result.game_over and result.is_correct
    assert result.stats['winDistribution'] == [0, 0, 1, 0, 0, 0]
    assert result.stats['gamesPlayed'] == 1

    stats = service.get_user_stats(USER)
    assert stats.win_distribution == [0, 0, 1, 0, 0, 0]
    assert stats.current_streak == 1
    assert stats.last_played_date == TEST_DAY


def test_six_misses_lose_reveal_word_and_reset_streak(service, database):
    players(database).insert_one({
        'user_id': USER, 'version': 0, 'game': None,
        'stats': {'games_played': 2, 'games_won': 2, 'current_streak': 2, 'max_streak': 2,
                  'win_distribution': [0, 1, 1, 0, 0, 0], 'last_played_date': '2025-01-04'}
    })

    for guess in MISSES[:5]:
        assert not service.submit_guess(guess, USER).game_over
    result = service.submit_guess(MISSES[5], USER)

    assert result.game_over and not result.won
    assert result.correct_word == TARGET
    stats = service.get_user_stats(USER)
    assert stats.current_streak == 0
    assert stats.max_streak == 2
    assert stats.games_played == 3
    assert stats.win_distribution == [0, 1, 1, 0, 0, 0]


def test_finished_game_stays_finished(service):
    service.submit_guess('MOTOR', USER)

    for _ in range(3):
        with pytest.raises(GameAlreadyFinished):
            service.submit_guess('TURBO', USER)

    assert service.get_user_game_state(USER).attempts == ['MOTOR']
    assert service.get_user_stats(USER).games_played == 1


@pytest.mark.parametrize('guess, error', [
    ('TURBOS', InvalidGuessLength),
    ('ZZZZZ', WordNotInDictionary),
    ('TURBO', DuplicateGuess),
])
def test_rejected_guess_leaves_stored_game_untouched(service, database, guess, error):
    service.submit_guess('TURBO', USER)
    before = players(database).find_one({'user_id': USER}, {'_id': 0})

    with pytest.raises(error):
        service.submit_guess(guess, USER)

    assert players(database).find_one({'user_id': USER}, {'_id': 0}) == before


def test_yesterdays_game_is_not_todays_state(service, database):
    service.submit_guess('TURBO', USER)
    players(database).update_one({'user_id': USER}, {'$set': {'game.game_number': TEST_GAME_NUMBER - 1}})

    assert service.get_user_game_state(USER) is None

    result = service.submit_guess('PEDAL', USER)
    assert result.attempts_used == 1
    assert service.get_user_game_state(USER).attempts == ['PEDAL']


def test_rejected_first_guess_creates_no_player(service, database):
    with pytest.raises(WordNotInDictionary):
        service.submit_guess('ZZZZZ', USER)

    assert players(database).count_documents({}) == 0
    assert service.get_user_game_state(USER) is None


@pytest.mark.parametrize('changed_bank', [
    STABLE_BANK[:3],  # game 5 now lands on SKYLINE
    STABLE_BANK[:5],  # game 5 now lands on TURBO
])
def test_word_bank_change_mid_game_is_a_configuration_error(service, changed_bank):
    service.submit_guess('PEDAL', USER)
    service.selector = DailySelector(changed_bank, TestingConfig.WHEELWORD_EPOCH, today_fn=lambda: TEST_DAY)

    with pytest.raises(ConfigurationError):
        service.get_user_game_state(USER)
    with pytest.raises(ConfigurationError):
        service.submit_guess('HONDA', USER)


# --- concurrency ---

def test_racing_guesses_never_share_an_attempt_number(service, database):
    service.submit_guess('TURBO', USER)
    service.repository = RacingRepository(database, lambda: service.submit_guess('PEDAL', USER))

    result = service.submit_guess('HONDA', USER)

    assert result.attempts_used == 3
    assert service.get_user_game_state(USER).attempts == ['TURBO', 'PEDAL', 'HONDA']
    assert players(database).find_one({'user_id': USER})['version'] == 3


def test_racing_winning_guesses_count_the_game_once(service, database):
    service.submit_guess('TURBO', USER)
    service.repository = RacingRepository(database, lambda: service.submit_guess('MOTOR', USER))

    with pytest.raises(GameAlreadyFinished):
        service.submit_guess('PEDAL', USER)

    stats = service.get_user_stats(USER)
    assert stats.games_played == 1
    assert stats.win_distribution == [0, 1, 0, 0, 0, 0]


def test_racing_first_guesses_of_a_new_player(service, database):
    service.repository = RacingRepository(database, lambda: service.submit_guess('TURBO', USER))

    result = service.submit_guess('PEDAL', USER)

    assert result.attempts_used == 2
    assert service.get_user_game_state(USER).attempts == ['TURBO', 'PEDAL']
    assert players(database).count_documents({'user_id': USER}) == 1


def test_persistent_write_conflicts_give_up(service, database):
    service.repository = AlwaysStaleRepository(database)

    with pytest.raises(ConcurrentUpdateError):
        service.submit_guess('TURBO', USER)


# --- configuration and formatting ---

def test_without_storage_only_anonymous_play_works():
    selector = DailySelector(STABLE_BANK, TestingConfig.WHEELWORD_EPOCH, today_fn=lambda: TEST_DAY)
    service = WheelwordService(selector)

    assert service.submit_guess('ROTOM').feedback == ['PRESENT', 'CORRECT', 'CORRECT', 'CORRECT', 'PRESENT']
    with pytest.raises(PersistenceUnavailable):
        service.submit_guess('TURBO', USER)
    with pytest.raises(PersistenceUnavailable):
        service.get_user_stats(USER)


def test_stats_for_a_new_player_are_empty(service):
    stats = service.get_user_stats('nobody').to_dict()
    assert stats == {
        'gamesPlayed': 0, 'gamesWon': 0, 'winPercentage': 0,
        'currentStreak': 0, 'maxStreak': 0, 'winDistribution': [0, 0, 0, 0, 0, 0]
    }


def test_share_text_for_win_and_loss(service):
    C, P, A = LetterFeedback.CORRECT, LetterFeedback.PRESENT, LetterFeedback.ABSENT

    won = service.generate_share_text(12, ['TURBO', 'MOTOR'], [[P, A, P, A, P], [C] * 5], True)
    assert won == (
        "🏎️ WheelWord #12 2/6\n"
        "\n"
        "🟨⬜🟨⬜🟨\n"
        "🟩🟩🟩🟩🟩\n"
        "\n"
        "https://wheelshouse.com/wheelword"
    )

    lost = service.generate_share_text(13, MISSES[:6], [[A] * 5] * 6, False)
    assert lost.splitlines()[0] == "🏎️ WheelWord #13 X/6"
    assert lost.count("⬜⬜⬜⬜⬜") == 6


def test_share_url_is_configurable():
    selector = DailySelector(STABLE_BANK, datetime.date(2025, 1, 1))
    service = WheelwordService(selector, share_url='https://example.test/play')
    assert service.generate_share_text(1, [], [], False).endswith('https://example.test/play')

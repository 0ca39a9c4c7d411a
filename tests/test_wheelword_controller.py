import datetime

from conftest import MISSES, STABLE_BANK, TARGET, TEST_GAME_NUMBER, make_token
from wheelword import create_app
from wheelword.config import TestingConfig
from wheelword.services import wheelword_service as wheelword_service_module
from wheelword.services.wheelword_service import initialize_wheelword_service


def test_today_returns_public_game_only(client):
    response = client.get('/wheelword/today')

    assert response.status_code == 200
    assert response.get_json() == {'gameNumber': TEST_GAME_NUMBER, 'wordLength': 5, 'gameDate': '2025-01-05'}
    assert TARGET not in response.get_data(as_text=True)


def test_anonymous_guess(client, database):
    response = client.post('/wheelword/guess', json={'guess': 'turbo', 'sessionAttempts': []})
    body = response.get_json()

    assert response.status_code == 200
    assert body['guess'] == 'TURBO'
    assert body['feedback'] == ['PRESENT', 'ABSENT', 'PRESENT', 'ABSENT', 'PRESENT']
    assert body['attemptsUsed'] == 1
    assert body['gameOver'] is False
    assert 'correctWord' not in body
    assert 'stats' not in body
    assert database.wheelword_players.count_documents({}) == 0


def test_anonymous_win_reveals_word_without_stats(client):
    response = client.post('/wheelword/guess', json={'guess': 'MOTOR', 'sessionAttempts': ['TURBO']})
    body = response.get_json()

    assert body['won'] is True and body['isCorrect'] is True
    assert body['correctWord'] == TARGET
    assert 'stats' not in body


def test_invalid_token_on_guess_plays_anonymously(client, database):
    headers = {'Authorization': f"Bearer {make_token(secret='some-other-secret-that-is-long-enough')}"}
    response = client.post('/wheelword/guess', json={'guess': 'TURBO'}, headers=headers)

    assert response.status_code == 200
    assert database.wheelword_players.count_documents({}) == 0


def test_guess_validation_errors(client):
    cases = [
        (None, 'invalid_request'),
        ({'guess': ''}, 'invalid_request'),
        ({'guess': 'TURBO', 'sessionAttempts': 'TURBO'}, 'invalid_request'),
        ({'guess': 'MOTOR', 'sessionAttempts': ['TURB0']}, 'invalid_request'),
        ({'guess': 'TURBOS'}, 'invalid_guess_length'),
        ({'guess': 'ZZZZZ'}, 'word_not_in_dictionary'),
        ({'guess': 'GT-40'}, 'invalid_guess_characters'),
        ({'guess': 'PEDAL', 'sessionAttempts': ['PEDAL']}, 'duplicate_guess'),
    ]
    for body, code in cases:
        response = client.post('/wheelword/guess', json=body)
        assert response.status_code == 400, body
        assert response.get_json()['code'] == code
        assert response.get_json()['success'] is False


def test_registered_player_full_flow(client, auth_headers):
    headers = auth_headers('7')

    assert client.get('/wheelword/state', headers=headers).get_json() is None

    client.post('/wheelword/guess', json={'guess': 'TURBO'}, headers=headers)
    state = client.get('/wheelword/state', headers=headers).get_json()
    assert state['attempts'] == ['TURBO']
    assert state['gameOver'] is False
    assert 'correctWord' not in state
    assert state['letterStatus']['T'] == 'PRESENT'

    response = client.post('/wheelword/guess', json={'guess': 'MOTOR'}, headers=headers)
    body = response.get_json()
    assert body['won'] is True
    assert body['stats']['winDistribution'] == [0, 1, 0, 0, 0, 0]
    assert body['stats']['winPercentage'] == 100

    finished = client.get('/wheelword/state', headers=headers).get_json()
    assert finished['gameOver'] is True
    assert finished['correctWord'] == TARGET

    again = client.post('/wheelword/guess', json={'guess': 'PEDAL'}, headers=headers)
    assert again.status_code == 409
    assert again.get_json()['code'] == 'game_already_finished'

    stats = client.get('/wheelword/stats', headers=headers).get_json()
    assert stats['gamesPlayed'] == 1
    assert stats['currentStreak'] == 1


def test_registered_loss(client, auth_headers):
    headers = auth_headers('8')
    for guess in MISSES[:6]:
        body = client.post('/wheelword/guess', json={'guess': guess}, headers=headers).get_json()

    assert body['gameOver'] is True and body['won'] is False
    assert body['correctWord'] == TARGET
    assert body['stats']['currentStreak'] == 0


def test_protected_endpoints_require_a_valid_token(client):
    expired = {'Authorization': f"Bearer {make_token(expires_in=-60)}"}
    for path in ('/wheelword/state', '/wheelword/stats'):
        assert client.get(path).status_code == 401
        assert client.get(path, headers=expired).status_code == 401
    assert client.post('/wheelword/share', json={}).status_code == 401


def test_share(client, auth_headers):
    response = client.post('/wheelword/share', headers=auth_headers(), json={
        'gameNumber': 5,
        'attempts': ['TURBO', 'MOTOR'],
        'feedbacks': [['🟨', '⬜', '🟨', '⬜', '🟨'], ['CORRECT'] * 5],
        'won': True
    })

    assert response.status_code == 200
    lines = response.get_json()['text'].splitlines()
    assert lines[0].endswith('WheelWord #5 2/6')
    assert lines[2] == '🟨⬜🟨⬜🟨'
    assert lines[3] == '🟩🟩🟩🟩🟩'


def test_share_validation(client, auth_headers):
    bad_bodies = [
        {'gameNumber': 0, 'attempts': [], 'feedbacks': [], 'won': True},
        {'gameNumber': True, 'attempts': [], 'feedbacks': [], 'won': True},
        {'gameNumber': 5, 'attempts': [], 'feedbacks': [], 'won': 'yes'},
        {'gameNumber': 5, 'attempts': [], 'feedbacks': [['PURPLE']], 'won': False},
        {'gameNumber': 5, 'attempts': [], 'feedbacks': 'CORRECT', 'won': False},
    ]
    for body in bad_bodies:
        response = client.post('/wheelword/share', headers=auth_headers(), json=body)
        assert response.status_code == 400, body
        assert response.get_json()['code'] == 'invalid_request'


def test_health(client):
    body = client.get('/wheelword/health').get_json()

    assert body['status'] == 'healthy'
    assert body['persistence_available'] is True
    assert body['word_bank']['total_words'] == len(STABLE_BANK)
    assert body['dictionary_size'] > len(STABLE_BANK)


def test_configuration_error_stops_serving_today(database):
    initialize_wheelword_service(
        TestingConfig, database=database, word_bank=STABLE_BANK,
        today_fn=lambda: datetime.date(2024, 12, 31)
    )
    try:
        client = create_app(TestingConfig).test_client()
        response = client.get('/wheelword/today')
        assert response.status_code == 503
        assert response.get_json()['code'] == 'configuration_error'

        guess = client.post('/wheelword/guess', json={'guess': 'TURBO'})
        assert guess.status_code == 503
    finally:
        wheelword_service_module._wheelword_service = None


def test_missing_service_is_reported():
    wheelword_service_module._wheelword_service = None
    client = create_app(TestingConfig).test_client()

    response = client.get('/wheelword/today')
    assert response.status_code == 500
    assert response.get_json()['success'] is False

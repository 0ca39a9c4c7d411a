"""
WheelWord Controller

Handles all WheelWord HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import get_word_statistics
from ..exceptions import WheelwordError
from ..models.requests import GuessRequest, ShareRequest
from ..services.wheelword_service import get_wheelword_service
from ..utils.decorators import optional_auth, require_auth
from ..utils.game_logger import wheelword_logger
from ..utils.helpers import current_user_id

wheelword_bp = Blueprint('wheelword', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'WheelWord service unavailable'
    }), 500


def _error_response(action: str, error: Exception):
    """Log a failed request and build its JSON response."""
    if isinstance(error, WheelwordError):
        error_response = error.to_dict()
        status = error.status_code
        if status >= 500:
            wheelword_logger.log_error(request, error, action)
    else:
        wheelword_logger.log_error(request, error, action)
        error_response = {
            'success': False,
            'error': str(error)
        }
        status = 500

    wheelword_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status


@wheelword_bp.route('/today', methods=['GET'])
def get_todays_game():
    """Get today's game number, word length and date."""
    try:
        wheelword_service = get_wheelword_service()
        if not wheelword_service:
            return _service_unavailable()

        wheelword_logger.log_user_action(request, 'get_today')

        game = wheelword_service.get_todays_game()
        response_data = game.to_dict()

        wheelword_logger.log_server_response(request, 'get_today', True, response_data, game.game_number)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_today', e)


@wheelword_bp.route('/guess', methods=['POST'])
@optional_auth
def submit_guess():
    """Submit a guess for today's game. Progress is saved for logged-in players."""
    try:
        wheelword_service = get_wheelword_service()
        if not wheelword_service:
            return _service_unavailable()

        guess_request = GuessRequest.from_json(request.get_json(silent=True))
        user_id = current_user_id(request)

        # Log user action
        wheelword_logger.log_user_action(
            request, 'submit_guess',
            guess_length=len(guess_request.guess), authenticated=user_id is not None
        )

        result = wheelword_service.submit_guess(
            guess_request.guess, user_id, guess_request.session_attempts
        )
        response_data = result.to_dict()

        wheelword_logger.log_server_response(
            request, 'submit_guess', True, response_data, result.game_number,
            attempts_used=result.attempts_used, game_over=result.game_over
        )

        # Log special game events
        if result.game_over:
            wheelword_logger.log_game_event(
                request, 'game_won' if result.won else 'game_lost', result.game_number,
                attempts_used=result.attempts_used, target_word=result.correct_word
            )

        return jsonify(response_data)

    except Exception as e:
        return _error_response('submit_guess', e)


@wheelword_bp.route('/state', methods=['GET'])
@require_auth
def get_user_game_state():
    """Get the logged-in player's game for today (null if not started)."""
    try:
        wheelword_service = get_wheelword_service()
        if not wheelword_service:
            return _service_unavailable()

        wheelword_logger.log_user_action(request, 'get_state')

        state = wheelword_service.get_user_game_state(current_user_id(request))
        response_data = state.to_dict() if state else None

        wheelword_logger.log_server_response(
            request, 'get_state', True, response_data,
            state.game_number if state else None
        )
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_state', e)


@wheelword_bp.route('/stats', methods=['GET'])
@require_auth
def get_user_stats():
    """Get the logged-in player's statistics."""
    try:
        wheelword_service = get_wheelword_service()
        if not wheelword_service:
            return _service_unavailable()

        wheelword_logger.log_user_action(request, 'get_stats')

        response_data = wheelword_service.get_user_stats(current_user_id(request)).to_dict()

        wheelword_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('get_stats', e)


@wheelword_bp.route('/share', methods=['POST'])
@require_auth
def generate_share_text():
    """Build the shareable emoji grid for a game."""
    try:
        wheelword_service = get_wheelword_service()
        if not wheelword_service:
            return _service_unavailable()

        share_request = ShareRequest.from_json(request.get_json(silent=True))

        wheelword_logger.log_user_action(request, 'share', share_request.game_number)

        text = wheelword_service.generate_share_text(
            share_request.game_number, share_request.attempts,
            share_request.feedbacks, share_request.won
        )
        response_data = {'text': text}

        wheelword_logger.log_server_response(request, 'share', True, response_data, share_request.game_number)
        return jsonify(response_data)

    except Exception as e:
        return _error_response('share', e)


@wheelword_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        wheelword_service = get_wheelword_service()

        wheelword_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if wheelword_service else 'degraded',
            'persistence_available': bool(wheelword_service and wheelword_service.repository),
            'dictionary_size': len(wheelword_service.dictionary)
            if wheelword_service and wheelword_service.dictionary else None,
            'word_bank': get_word_statistics(list(wheelword_service.selector.word_bank))
            if wheelword_service else None,
            'log_stats': wheelword_logger.get_log_stats()
        }

        wheelword_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        wheelword_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        wheelword_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500

"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_letter

game_bp = Blueprint('game', __name__)


def _state_response(action, game_id, state, **log_details):
    """Build the JSON reply for an action on an existing game."""
    if state is None:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, action, False, error_response, game_id)
        return jsonify(error_response), 404

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        phase=state.phase, game_over=state.game_over, **log_details
    )
    return jsonify(response_data)


def _error_response(action, error, game_id=None, status=500):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session and start its clock."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, timer=state.timer_display
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response('new_game', e, status=400)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Start the same word over with a full clock."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)
        state = game_service.restart_game(game_id)
        return _state_response('restart_game', game_id, state)

    except Exception as e:
        return _error_response('restart_game', e, game_id)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)
        state = game_service.get_game_state(game_id)
        return _state_response('get_state', game_id, state)

    except Exception as e:
        return _error_response('get_state', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game_service
def type_letter(game_id, game_service):
    """Type one letter into the active row."""
    try:
        data = request.get_json(silent=True)
        if not data or 'letter' not in data:
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'letter_typed', False, error_response, game_id)
            return jsonify(error_response), 400

        letter = parse_letter(data['letter'])
        if letter is None:
            error_response = {
                'success': False,
                'error': 'Letter must be a single character A-Z'
            }
            game_logger.log_server_response(request, 'letter_typed', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'letter_typed', game_id, letter=letter)
        state = game_service.type_letter(game_id, letter)
        return _state_response('letter_typed', game_id, state, cursor=state.cursor if state else None)

    except Exception as e:
        return _error_response('letter_typed', e, game_id)


@game_bp.route('/game/<game_id>/backspace', methods=['POST'])
@require_game_service
def backspace(game_id, game_service):
    """Remove the last typed letter from the active row."""
    try:
        game_logger.log_user_action(request, 'backspace', game_id)
        state = game_service.backspace(game_id)
        return _state_response('backspace', game_id, state)

    except Exception as e:
        return _error_response('backspace', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game_service
def submit(game_id, game_service):
    """
    Submit the active row for validation and scoring.

    An invalid word is not an HTTP error: the returned state carries
    invalid_word_shown and, after the first guess, the time penalty.
    """
    try:
        game_logger.log_user_action(request, 'submit', game_id)
        state = game_service.submit(game_id)
        return _state_response(
            'submit', game_id, state,
            attempts=state.attempts if state else None,
            invalid_word=state.invalid_word_shown if state else None
        )

    except Exception as e:
        return _error_response('submit', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        return _error_response('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'games': len(game_service.games),
            'active_games': game_service.active_game_count(),
            'solutions': get_word_statistics(game_service.word_bank.solutions),
            'valid_word_count': len(game_service.word_bank.valid_words),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500

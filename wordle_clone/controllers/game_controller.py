"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import KEYBOARD_ROWS
from ..services.game_engine import InvalidGuessError
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def log_game_outcome(game_id, was_over, state, user_ip):
    """Log a game event when this operation ended the game."""
    if was_over or not state.game_over:
        return

    filled = [g for g in state.guesses if g]
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, user_ip,
        rounds_used=len(filled), target_word=state.answer, final_guess=filled[-1]
    )


def game_not_found_response(game_id, action):
    """The game was removed while the request was being handled."""
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def invalid_guess_response(game_service, game_id, error):
    """Rejected submission: a notification alongside the unchanged state."""
    state = game_service.get_game_state(game_id)
    return {
        'success': False,
        'notification': {
            'type': 'invalid_guess',
            'message': error.message
        },
        'state': asdict(state) if state is not None else None
    }


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state),
            'keyboard': KEYBOARD_ROWS
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id, status=state.status
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game
def press_key(game_id, game_service=None):
    """Apply a single key press (letter, ENTER or BACKSPACE)."""
    try:
        data = request.get_json(silent=True)
        if not data or 'key' not in data:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        engine = game_service.get_engine(game_id)
        was_over = engine is not None and engine.is_over()
        try:
            state = game_service.press_key(game_id, key)
        except InvalidGuessError as error:
            error_response = invalid_guess_response(game_service, game_id, error)
            game_logger.log_server_response(
                request, 'key_press', False, error_response, game_id,
                validation_error=error.message, attempted_guess=error.guess
            )
            return jsonify(error_response), 422

        if state is None:
            return game_not_found_response(game_id, 'key_press')

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'key_press', True, response_data, game_id, status=state.status)
        log_game_outcome(game_id, was_over, state, request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game_service=None):
    """Submit a whole composed word as the next guess."""
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        engine = game_service.get_engine(game_id)
        was_over = engine is not None and engine.is_over()
        try:
            state = game_service.submit_word(game_id, guess)
        except InvalidGuessError as error:
            error_response = invalid_guess_response(game_service, game_id, error)
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error.message, attempted_guess=error.guess
            )
            return jsonify(error_response), 422

        if state is None:
            return game_not_found_response(game_id, 'submit_guess')

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, status=state.status
        )
        log_game_outcome(game_id, was_over, state, request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game
def restart_game(game_id, game_service=None):
    """Start a brand-new game under the same session ID."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
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

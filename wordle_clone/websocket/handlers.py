"""
WebSocket Event Handlers

Lets a client drive its game with key events over a socket connection.
Key presses arrive here and go through the same service operations as the
HTTP endpoints.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_engine import InvalidGuessError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_state(game_id, state):
        socketio.emit('game_state_update', {
            'game_id': game_id,
            'state': asdict(state)
        }, room=game_room(game_id))

    def notify_invalid_guess(game_id, error):
        # Only the sender sees the notification; the state did not change
        emit('invalid_guess', {
            'game_id': game_id,
            'message': error.message,
            'guess': error.guess
        })

    def log_outcome(game_id, was_over, state):
        if was_over or not state.game_over:
            return
        event = 'game_won' if state.won else 'game_lost'
        game_logger.log_game_event(
            game_id, event, request.remote_addr,
            rounds_used=len([g for g in state.guesses if g]), target_word=state.answer
        )

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Subscribe to state updates for a game and receive its current state."""
        game_id = data['game_id']
        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'game_id': game_id,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Stop receiving updates for a game."""
        game_id = (data or {}).get('game_id')
        if game_id:
            leave_room(game_room(game_id))

    @socketio.on('key_press')
    @websocket_game_required
    def handle_key_press(data, game_service=None):
        """Apply one key press: a letter, ENTER or BACKSPACE."""
        game_id = data['game_id']
        key = data.get('key')

        game_logger.log_user_action(request, 'key_press', game_id, key=key, transport='websocket')

        engine = game_service.get_engine(game_id)
        was_over = engine is not None and engine.is_over()
        try:
            state = game_service.press_key(game_id, key)
        except InvalidGuessError as error:
            game_logger.log_server_response(
                request, 'key_press', False, {'success': False}, game_id,
                validation_error=error.message, attempted_guess=error.guess
            )
            notify_invalid_guess(game_id, error)
            return

        if state is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        join_room(game_room(game_id))
        broadcast_state(game_id, state)
        log_outcome(game_id, was_over, state)

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None):
        """Submit a whole composed word."""
        game_id = data['game_id']
        guess = data.get('guess')
        if not isinstance(guess, str):
            emit('error', {'error': 'Guess is required', 'game_id': game_id})
            return

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        engine = game_service.get_engine(game_id)
        was_over = engine is not None and engine.is_over()
        try:
            state = game_service.submit_word(game_id, guess)
        except InvalidGuessError as error:
            game_logger.log_server_response(
                request, 'submit_guess', False, {'success': False}, game_id,
                validation_error=error.message, attempted_guess=error.guess
            )
            notify_invalid_guess(game_id, error)
            return

        if state is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        join_room(game_room(game_id))
        broadcast_state(game_id, state)
        log_outcome(game_id, was_over, state)

"""
WebSocket Event Handlers

Handles real-time input events and pushes board, timer and outcome
notifications to the players watching a game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_letter


def game_room(game_id):
    return f"game_{game_id}"


def make_event_sink(socketio):
    """Forward engine notifications to the game's Socket.IO room."""
    def sink(game_id, event):
        socketio.emit(event.name, {'game_id': game_id, **event.payload}, room=game_room(game_id))
    return sink


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    game_service = get_game_service()
    if game_service:
        game_service.set_event_sink(make_event_sink(socketio))

    def emit_state(state):
        if state is None:
            emit('error', {'error': 'Game not found'})
            return
        emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room for real-time updates."""
        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)
        emit_state(state)

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        leave_room(game_room(game_id))
        game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('letter_typed')
    @websocket_game_required
    def handle_letter_typed(data, game_service=None, game_id=None):
        """Type one letter into the active row."""
        letter = parse_letter(data.get('letter'))
        if letter is None:
            emit('error', {'error': 'Letter must be a single character A-Z'})
            return

        game_logger.log_user_action(request, 'letter_typed', game_id, letter=letter)
        state = game_service.type_letter(game_id, letter)
        emit_state(state)

    @socketio.on('backspace')
    @websocket_game_required
    def handle_backspace(data, game_service=None, game_id=None):
        """Remove the last typed letter."""
        game_logger.log_user_action(request, 'backspace', game_id)
        state = game_service.backspace(game_id)
        emit_state(state)

    @socketio.on('submit')
    @websocket_game_required
    def handle_submit(data, game_service=None, game_id=None):
        """Submit the active row."""
        try:
            game_logger.log_user_action(request, 'submit', game_id)
            state = game_service.submit(game_id)
            emit_state(state)
        except Exception as e:
            game_logger.log_error(request, e, 'submit', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('restart_game')
    @websocket_game_required
    def handle_restart_game(data, game_service=None, game_id=None):
        """Start the same word over."""
        game_logger.log_user_action(request, 'restart_game', game_id)
        state = game_service.restart_game(game_id)
        emit_state(state)

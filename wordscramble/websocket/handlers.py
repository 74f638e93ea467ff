"""
WebSocket Event Handlers

Handles all WebSocket events for real-time game clients. Every client
watching a game joins the room `game_<game_id>` and receives its state
updates.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        emit('connected', {'sid': request.sid})

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room and receive its current state."""
        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'state': asdict(game_service.get_game_state(game_id))
        })

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Leave a game room."""
        data = data if isinstance(data, dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")
        emit('left_game', {'game_id': game_id})

    @socketio.on('update_input')
    @websocket_game_required
    def handle_update_input(data, game_service=None, game_id=None):
        """Record the text the player is typing."""
        text = data.get('text')
        if not isinstance(text, str):
            emit('error', {'error': 'Text is required'})
            return

        game_service.update_input(game_id, text)
        broadcast_game_state_update(game_id, socketio, game_service)

    @socketio.on('submit_word')
    @websocket_game_required
    def handle_submit_word(data, game_service=None, game_id=None):
        """Submit a word (or the pending input) via WebSocket."""
        word = data.get('word')
        if word is not None and not isinstance(word, str):
            emit('error', {'error': 'Word must be a string'})
            return

        result = game_service.submit_word(game_id, word)

        if result.rejected:
            emit('word_rejected', {
                'game_id': game_id,
                'word': result.word,
                **result.rejection.to_dict()
            })
            game_logger.log_game_event(
                game_id, 'word_rejected', request.remote_addr,
                word=result.word, reason=result.rejection.kind.value
            )
        elif result.accepted:
            game_logger.log_game_event(
                game_id, 'word_accepted', request.remote_addr,
                word=result.word, points=result.points
            )

        emit('submit_result', {'game_id': game_id, 'result': result.to_dict()})
        broadcast_game_state_update(game_id, socketio, game_service)

    @socketio.on('restart_game')
    @websocket_game_required
    def handle_restart_game(data, game_service=None, game_id=None):
        """Start over with a new root word."""
        state = game_service.restart_game(game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr, root_word=state.root_word)
        broadcast_game_state_update(game_id, socketio, game_service)

    @socketio.on('acknowledge_error')
    @websocket_game_required
    def handle_acknowledge_error(data, game_service=None, game_id=None):
        """Dismiss the rejection alert."""
        game_service.acknowledge_error(game_id)
        broadcast_game_state_update(game_id, socketio, game_service)


def broadcast_game_state_update(game_id, socketio, game_service):
    """Broadcast game state update to every client in the game's room."""
    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state_update', {
        'success': True,
        'state': asdict(state)
    }, room=game_room(game_id))

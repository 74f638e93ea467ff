"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..config.game_settings import get_rules, get_word_pool_statistics
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_payload

game_bp = Blueprint('game', __name__)


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _bad_request(action, message, game_id=None):
    error_response = {
        'success': False,
        'error': message
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 400


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
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
            root_word=state.root_word
        )
        game_logger.log_game_event(game_id, 'game_started', request.remote_addr, root_word=state.root_word)

        return jsonify(response_data), 201

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            score=state.score, used_words_count=len(state.used_words)
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/input', methods=['PUT'])
@require_game_service
def update_input(game_id, game_service):
    """Record the text the player is typing."""
    try:
        data = get_json_payload()
        if data is None:
            return _bad_request('update_input', 'Malformed JSON payload', game_id)
        text = data.get('text')
        if not isinstance(text, str):
            return _bad_request('update_input', 'Text is required', game_id)

        state = game_service.update_input(game_id, text)
        if state is None:
            return _game_not_found('update_input', game_id)

        return jsonify({
            'success': True,
            'state': asdict(state)
        })

    except Exception as e:
        return _server_error('update_input', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game_service
def submit_word(game_id, game_service):
    """
    Submit a word for validation and scoring.

    The body may carry `word`; without it the pending input is submitted.
    A rejected word is a normal outcome, reported with `success: false`
    and the alert to show, but still answered with 200.
    """
    try:
        data = get_json_payload()
        if data is None:
            return _bad_request('submit_word', 'Malformed JSON payload', game_id)
        word = data.get('word')
        if word is not None and not isinstance(word, str):
            return _bad_request('submit_word', 'Word must be a string', game_id)

        game_logger.log_user_action(request, 'submit_word', game_id, word=word)

        result = game_service.submit_word(game_id, word)
        if result is None:
            return _game_not_found('submit_word', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': not result.rejected,
            'result': result.to_dict(),
            'state': asdict(state)
        }
        if result.rejected:
            response_data['error'] = result.rejection.to_dict()

        game_logger.log_server_response(
            request, 'submit_word', True, response_data, game_id,
            status=result.status.value, score=state.score
        )

        if result.accepted:
            game_logger.log_game_event(
                game_id, 'word_accepted', request.remote_addr,
                word=result.word, points=result.points, score=state.score
            )
        elif result.rejected:
            game_logger.log_game_event(
                game_id, 'word_rejected', request.remote_addr,
                word=result.word, reason=result.rejection.kind.value
            )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_word', e, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Start over with a new root word."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        if state is None:
            return _game_not_found('restart_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr, root_word=state.root_word)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('restart_game', e, game_id)


@game_bp.route('/game/<game_id>/acknowledge', methods=['POST'])
@require_game_service
def acknowledge_error(game_id, game_service):
    """Dismiss the rejection alert."""
    try:
        state = game_service.acknowledge_error(game_id)
        if state is None:
            return _game_not_found('acknowledge_error', game_id)

        return jsonify({
            'success': True,
            'state': asdict(state)
        })

    except Exception as e:
        return _server_error('acknowledge_error', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        if not success:
            return _game_not_found('delete_game', game_id)

        response_data = {
            'success': True
        }

        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/rules', methods=['GET'])
def rules():
    """Static rules panel."""
    return jsonify({
        'success': True,
        **get_rules()
    })


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'word_pool': get_word_pool_statistics(game_service.word_pool),
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

import random

from wordscramble.models.game import RejectionKind
from wordscramble.services.game_service import GameService, get_game_service


def test_initialize_sets_global_service(game_service):
    assert get_game_service() is game_service
    assert game_service.word_pool == ['silkworm']


def test_create_and_get_state(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    assert state.game_id == game_id
    assert state.root_word == 'silkworm'
    assert state.used_words == []
    assert state.score == 0
    assert state.error.visible is False


def test_games_are_independent(game_service):
    first = game_service.create_new_game()
    second = game_service.create_new_game()

    game_service.submit_word(first, 'silk')

    assert game_service.get_game_state(first).score == 4
    assert game_service.get_game_state(second).score == 0


def test_submit_pending_input(game_service):
    game_id = game_service.create_new_game()
    game_service.update_input(game_id, 'worm')

    result = game_service.submit_word(game_id)

    assert result.accepted
    assert game_service.get_game_state(game_id).pending_input == ''


def test_rejection_and_acknowledge(game_service):
    game_id = game_service.create_new_game()

    result = game_service.submit_word(game_id, 'silkworm')
    assert result.rejection.kind is RejectionKind.IS_ROOT_WORD
    assert game_service.get_game_state(game_id).error.visible is True

    state = game_service.acknowledge_error(game_id)
    assert state.error.visible is False


def test_restart_keeps_game_id(game_service):
    game_id = game_service.create_new_game()
    game_service.submit_word(game_id, 'silk')

    state = game_service.restart_game(game_id)

    assert state.game_id == game_id
    assert state.score == 0
    assert state.used_words == []


def test_restart_draws_from_cached_pool():
    pool = ['silkworm', 'elephant', 'treasure']
    service = GameService(lambda: pool, rng=random.Random(3))
    game_id = service.create_new_game()

    roots = {service.restart_game(game_id).root_word for _ in range(20)}

    assert roots <= set(pool)


def test_unknown_game(game_service):
    assert game_service.get_game_state('missing') is None
    assert game_service.submit_word('missing', 'silk') is None
    assert game_service.update_input('missing', 'silk') is None
    assert game_service.restart_game('missing') is None
    assert game_service.acknowledge_error('missing') is None
    assert game_service.delete_game('missing') is False


def test_delete_game(game_service):
    game_id = game_service.create_new_game()

    assert game_service.delete_game(game_id) is True
    assert game_service.get_game_state(game_id) is None

import random

import pytest

from wordscramble.models.game import RejectionKind, SubmissionStatus
from wordscramble.services.game_session import GameSession
from wordscramble.services.word_source import WordPoolUnavailableError


class LastChoice:
    """Deterministic stand-in for random.Random: always picks the last item."""

    def choice(self, seq):
        return seq[-1]


@pytest.mark.parametrize('blank', ['', '   ', '\n', ' \t\n '])
def test_blank_input_is_ignored(session, blank):
    session.update_input('silk')
    result = session.submit(blank)

    assert result.status is SubmissionStatus.IGNORED
    assert result.rejection is None
    assert session.score == 0
    assert session.used_words == []
    assert session.pending_input == 'silk'
    assert session.error.visible is False


def test_word_from_root_letters_is_accepted(session):
    result = session.submit('silk')

    assert result.accepted
    assert result.word == 'silk'
    assert result.points == 4
    assert session.score == 4
    assert session.used_words == ['silk']


def test_input_is_lowercased_and_trimmed(session):
    result = session.submit('  SiLK\n')

    assert result.accepted
    assert session.used_words == ['silk']


@pytest.mark.parametrize('word', ['silks', 'wormss', 'milky', 'zoo'])
def test_word_needing_unavailable_letters_is_not_possible(session, word):
    result = session.submit(word)

    assert result.rejected
    assert result.rejection.kind is RejectionKind.NOT_POSSIBLE
    assert result.rejection.title == 'Word not possible'
    assert result.rejection.message == "You can't spell that word from 'silkworm'!"
    assert session.score == 0
    assert session.used_words == []


def test_anagram_using_each_letter_once_is_possible(session):
    # silkworm has exactly one of each of w, o, r, m, s
    assert session.is_possible('worms')
    assert session.submit('worms').accepted


def test_root_word_is_rejected_on_first_submission(session):
    result = session.submit('silkworm')

    assert result.rejection.kind is RejectionKind.IS_ROOT_WORD
    assert result.rejection.title == 'Word is the rootword'
    assert result.rejection.message == "You can't use your answer because it is the rootword!"
    assert session.used_words == []


def test_repeated_word_is_already_used(session):
    session.submit('silk')
    result = session.submit(' Silk ')

    assert result.rejection.kind is RejectionKind.ALREADY_USED
    assert result.rejection.title == 'Word used already'
    assert result.rejection.message == 'Be more original!'
    assert session.score == 4
    assert session.used_words == ['silk']


def test_already_used_is_reported_before_not_possible(session):
    session.used_words = ['zzz']

    result = session.submit('zzz')

    assert result.rejection.kind is RejectionKind.ALREADY_USED


def test_every_fifth_word_earns_bonus(session):
    scores = []
    for word in ['ilk', 'owl', 'row', 'sir', 'mow']:
        result = session.submit(word)
        assert result.accepted
        scores.append(session.score)

    assert scores == [3, 6, 9, 12, 20]
    assert session.used_words == ['mow', 'sir', 'row', 'owl', 'ilk']


def test_bonus_applies_to_fifth_word_points(session):
    for word in ['ilk', 'owl', 'row', 'sir']:
        session.submit(word)

    assert session.submit('milk').points == 9


def test_rejections_do_not_count_towards_bonus(session):
    for word in ['ilk', 'owl', 'ilk', 'silkworm', 'row', 'sir']:
        session.submit(word)

    assert session.score == 12
    assert session.submit('mow').points == 8


def test_accepting_clears_pending_input(session):
    session.update_input('  silk ')
    result = session.submit()

    assert result.accepted
    assert result.word == 'silk'
    assert session.pending_input == ''


def test_rejection_keeps_pending_input(session):
    session.update_input('silks')
    result = session.submit()

    assert result.rejected
    assert session.pending_input == 'silks'


def test_rejection_shows_error_until_acknowledged(session):
    session.submit('silkworm')
    assert session.error.visible is True
    assert session.error.title == 'Word is the rootword'

    session.acknowledge_error()
    assert session.error.visible is False
    assert session.error.title == 'Word is the rootword'

    session.submit('xyz')
    assert session.error.visible is True
    assert session.error.title == 'Word not possible'


def test_restart_resets_words_and_score():
    pool = ['silkworm', 'elephant', 'treasure']
    game = GameSession(rng=random.Random(7))
    game.start_game(pool)
    root = game.root_word
    for word in (root[:2], root[1:3], root):
        game.submit(word)

    new_root = game.start_game(pool)

    assert new_root in pool
    assert game.root_word == new_root
    assert game.score == 0
    assert game.used_words == []


def test_root_word_is_picked_from_pool():
    game = GameSession(rng=LastChoice())

    assert game.start_game(['silkworm', 'Elephant\n']) == 'elephant'


def test_blank_pool_entries_are_never_chosen():
    game = GameSession(rng=LastChoice())

    assert game.start_game(['treasure', '', '  ']) == 'treasure'


def test_empty_pool_falls_back_to_silkworm():
    game = GameSession()

    assert game.start_game([]) == 'silkworm'
    assert game.start_game(['', '\n']) == 'silkworm'


def test_missing_pool_is_fatal():
    with pytest.raises(WordPoolUnavailableError):
        GameSession().start_game(None)


def test_submit_before_start_raises():
    with pytest.raises(RuntimeError):
        GameSession().submit('silk')


def test_remaining_letters_consume_leftmost_match():
    game = GameSession()
    game.start_game(['banana'])

    assert game.remaining_letters('an') == 'bana'
    assert game.remaining_letters('nab') == 'ana'
    assert game.remaining_letters('aaaa') is None
    assert game.remaining_letters('') == 'banana'


def test_snapshot_lists_words_with_lengths(session):
    session.submit('silk')
    session.submit('or')

    state = session.snapshot('abc')

    assert state.game_id == 'abc'
    assert state.root_word == 'silkworm'
    assert state.used_words == [{'word': 'or', 'length': 2}, {'word': 'silk', 'length': 4}]
    assert state.score == 6

import json

import pytest

from tichu.services.games.codec import (
    CodecError,
    decode_bet,
    decode_game,
    decode_turn,
    encode_game,
    encode_turn,
)
from tichu.services.games.scoring import game_from_turns, new_game
from tichu.services.games.types import NO_BET, BetLevel, CalledBet, Consecutive, Turn


GRAND_TURN = {
    'takenPoints': 50,
    'consecutive': 'none',
    'ourBets': [{'level': 'grand', 'successful': True}, 'none'],
    'theirBets': ['none', 'none'],
}


def test_encode_turn_uses_wire_names():
    turn = Turn(50, Consecutive.NONE, (CalledBet(BetLevel.GRAND, True), NO_BET))
    assert encode_turn(turn) == GRAND_TURN


def test_encode_new_game():
    assert encode_game(new_game()) == {'ourScore': 0, 'theirScore': 0, 'history': []}


def test_decode_turn():
    turn = decode_turn(GRAND_TURN)
    assert turn.taken_points == 50
    assert turn.consecutive is Consecutive.NONE
    assert turn.our_bets == (CalledBet(BetLevel.GRAND, True), NO_BET)
    assert turn.their_bets == (NO_BET, NO_BET)


@pytest.mark.parametrize('bad', [
    'tichu',
    {'level': 'small', 'successful': True},
    {'level': 'tichu', 'successful': 'yes'},
    {'level': 'tichu'},
    None,
])
def test_decode_bet_rejects_malformed(bad):
    with pytest.raises(CodecError):
        decode_bet(bad)


@pytest.mark.parametrize('patch', [
    {'takenPoints': '50'},
    {'takenPoints': True},
    {'consecutive': 'both'},
    {'ourBets': ['none']},
    {'theirBets': 'none'},
])
def test_decode_turn_rejects_malformed(patch):
    with pytest.raises(CodecError):
        decode_turn({**GRAND_TURN, **patch})


def test_decode_game_from_json_text():
    game = decode_game(json.dumps({'ourScore': 250, 'theirScore': 50, 'history': [GRAND_TURN]}))
    assert game == game_from_turns([decode_turn(GRAND_TURN)])
    assert game.our_score == 250


@pytest.mark.parametrize('stored', [None, '', '{not json', '[]', json.dumps({'history': [{'takenPoints': 1}]})])
def test_decode_game_returns_none_for_missing_or_malformed(stored):
    assert decode_game(stored) is None


def test_decode_game_rebuilds_inconsistent_scores():
    game = decode_game({'ourScore': 9999, 'theirScore': 0, 'history': [GRAND_TURN]})
    assert (game.our_score, game.their_score) == (250, 50)


def test_decode_game_without_history_is_new_game():
    assert decode_game({'ourScore': 0, 'theirScore': 0}) == new_game()

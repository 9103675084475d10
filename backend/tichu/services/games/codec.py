"""Conversion between scoring types and their JSON shape.

    Bet  = "none" | {"level": "tichu" | "grand", "successful": bool}
    Turn = {"takenPoints", "consecutive", "ourBets": [Bet, Bet], "theirBets": [Bet, Bet]}
    Game = {"ourScore", "theirScore", "history": [Turn, ...]}
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .scoring import game_from_turns
from .types import NO_BET, Bet, BetLevel, CalledBet, Consecutive, Game, NoBet, Turn

logger = logging.getLogger(__name__)


class CodecError(ValueError):
    pass


def encode_bet(bet: Bet) -> Any:
    if isinstance(bet, NoBet):
        return 'none'
    return {'level': bet.level.value, 'successful': bet.successful}


def encode_turn(turn: Turn) -> Dict[str, Any]:
    return {
        'takenPoints': turn.taken_points,
        'consecutive': turn.consecutive.value,
        'ourBets': [encode_bet(b) for b in turn.our_bets],
        'theirBets': [encode_bet(b) for b in turn.their_bets],
    }


def encode_game(game: Game) -> Dict[str, Any]:
    return {
        'ourScore': game.our_score,
        'theirScore': game.their_score,
        'history': [encode_turn(t) for t in game.history],
    }


def _int(value: Any, field: str) -> int:
    # bool is an int subclass; reject it so `true` never scores as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise CodecError(f'{field} must be an integer')
    return value


def decode_bet(data: Any) -> Bet:
    if data == 'none':
        return NO_BET
    if not isinstance(data, dict):
        raise CodecError(f'invalid bet: {data!r}')
    try:
        level = BetLevel(data.get('level'))
    except ValueError:
        raise CodecError(f"invalid bet level: {data.get('level')!r}")
    successful = data.get('successful')
    if not isinstance(successful, bool):
        raise CodecError('bet.successful must be a boolean')
    return CalledBet(level=level, successful=successful)


def decode_bets(data: Any, field: str) -> tuple:
    if not isinstance(data, list) or len(data) != 2:
        raise CodecError(f'{field} must be a list of two bets')
    return (decode_bet(data[0]), decode_bet(data[1]))


def decode_turn(data: Any) -> Turn:
    if not isinstance(data, dict):
        raise CodecError('turn must be an object')
    try:
        consecutive = Consecutive(data.get('consecutive'))
    except ValueError:
        raise CodecError(f"invalid consecutive value: {data.get('consecutive')!r}")
    return Turn(
        taken_points=_int(data.get('takenPoints'), 'takenPoints'),
        consecutive=consecutive,
        our_bets=decode_bets(data.get('ourBets'), 'ourBets'),
        their_bets=decode_bets(data.get('theirBets'), 'theirBets'),
    )


def decode_turns(data: Any) -> List[Turn]:
    if not isinstance(data, list):
        raise CodecError('history must be a list of turns')
    return [decode_turn(item) for item in data]


def decode_game(data: Any) -> Optional[Game]:
    """Decode a stored snapshot, returning None when it is missing or malformed.

    Accepts either the parsed object or its JSON text. Scores are rebuilt from
    the history; stored totals that disagree are replaced.
    """
    if data is None:
        return None
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError:
            logger.warning('[snapshot] stored state is not valid JSON; ignoring')
            return None
    if not isinstance(data, dict):
        return None
    try:
        game = game_from_turns(decode_turns(data.get('history', [])))
    except CodecError as exc:
        logger.warning(f'[snapshot] stored history rejected: {exc}')
        return None
    stored = (data.get('ourScore'), data.get('theirScore'))
    if stored != (game.our_score, game.their_score):
        logger.warning(
            f'[snapshot] stored scores {stored} disagree with history '
            f'({game.our_score}, {game.their_score}); using history'
        )
    return game

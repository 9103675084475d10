from flask import Blueprint, jsonify, request, current_app, abort
from tichu import socketio
from tichu.socketio_events import TRACKER_ROOM
from tichu.services.games.codec import CodecError, decode_turns, encode_game
from tichu.services.games.forms import TakenPointsRange, TurnFormError, parse_taken_points_form, parse_turn
from tichu.services.games.scoring import calculate_taken_points, game_from_turns, new_game, score, undo
from tichu.services.games.storage import load_or_new_game, save_game
from tichu.services.games.types import Game


games = Blueprint('games', __name__)


class InjectedFault(RuntimeError):
    """Raised on purpose by the crash endpoint."""


def _limits() -> TakenPointsRange:
    return TakenPointsRange.from_config(current_app.config)


def _game_payload(game: Game) -> dict:
    payload = encode_game(game)
    payload['takenPointsRange'] = _limits().to_dict()
    return payload


def _publish(game: Game) -> None:
    socketio.emit('state_update', encode_game(game), to=TRACKER_ROOM, namespace='/ws')


def _store_and_publish(game: Game) -> Game:
    save_game(game)
    _publish(game)
    return game


@games.route('/state', methods=['GET'])
def get_state():
    return jsonify(_game_payload(load_or_new_game()))


@games.route('/new', methods=['POST'])
def start_new_game():
    game = _store_and_publish(new_game())
    current_app.logger.info("[new_game] tracker reset to 0:0")
    return jsonify(_game_payload(game)), 201


@games.route('/preview', methods=['POST'])
def preview_taken_points():
    data = request.get_json(silent=True) or {}
    try:
        form = parse_taken_points_form(data, _limits())
    except TurnFormError as exc:
        return jsonify({'error': str(exc)}), 400
    taken = calculate_taken_points(form)
    return jsonify({'us': taken.us, 'them': taken.them})


@games.route('/turns', methods=['POST'])
def submit_turn():
    data = request.get_json(silent=True)
    try:
        turn = parse_turn(data, _limits())
    except TurnFormError as exc:
        return jsonify({'error': str(exc)}), 400

    # Single writer assumed: load-score-save is not locked against concurrent submissions
    previous = load_or_new_game()
    game = _store_and_publish(score(turn, previous))
    current_app.logger.info(
        f"[score] turn={len(game.history)} consecutive={turn.consecutive.value} "
        f"us={game.our_score - previous.our_score:+d} them={game.their_score - previous.their_score:+d} "
        f"total={game.our_score}:{game.their_score}"
    )
    return jsonify(_game_payload(game)), 201


@games.route('/undo', methods=['POST'])
def undo_turn():
    game = load_or_new_game()
    if not game.history:
        current_app.logger.info("[undo] no turns to undo")
        return jsonify(_game_payload(game))
    game = _store_and_publish(undo(game))
    current_app.logger.info(f"[undo] removed turn {len(game.history) + 1}, total={game.our_score}:{game.their_score}")
    return jsonify(_game_payload(game))


@games.route('/state', methods=['PUT'])
def replay_history():
    data = request.get_json(silent=True)
    history = data.get('history') if isinstance(data, dict) else data
    if history is None:
        return jsonify({'error': 'history is required'}), 400
    try:
        turns = decode_turns(history)
    except CodecError as exc:
        return jsonify({'error': str(exc)}), 400
    game = _store_and_publish(game_from_turns(turns))
    current_app.logger.info(f"[replay] rebuilt {len(turns)} turns, total={game.our_score}:{game.their_score}")
    return jsonify(_game_payload(game))


@games.route('/crash', methods=['POST'])
def crash():
    if not current_app.config.get('CRASH_ENDPOINT_ENABLED'):
        abort(404)
    raise InjectedFault('Intentional crash requested')

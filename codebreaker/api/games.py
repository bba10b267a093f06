from flask import Blueprint, jsonify, request, current_app
from codebreaker import socketio, get_registry
from codebreaker.services.games import GameError


games = Blueprint('games', __name__)


def _int_or_none(value):
    # bools are ints in Python; a JSON true is not a size
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@games.errorhandler(GameError)
def handle_game_error(exc):
    try:
        current_app.logger.info(f"[game_error] {type(exc).__name__}: {exc}")
    except Exception:
        pass
    return jsonify({'error': str(exc)}), exc.status_code


@games.route('/new', methods=['POST'])
def new_game():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    game_id, view = get_registry().create_game(
        code_length=_int_or_none(data.get('codeLength')),
        colors=_int_or_none(data.get('colors')),
        attempts=_int_or_none(data.get('attempts')),
    )
    return jsonify({'id': game_id, **view})


@games.route('/guess', methods=['POST'])
def submit_guess():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    game_id = data.get('id')
    guess = data.get('guess')
    if not game_id or not isinstance(game_id, str):
        return jsonify({'error': 'Game id is required'}), 400
    if not isinstance(guess, list) or any(_int_or_none(c) is None for c in guess):
        return jsonify({'error': 'Guess must be a list of integers'}), 400

    outcome = get_registry().submit_guess(game_id, guess)
    result = outcome.to_dict()

    # Let anyone watching this game know about the new guess
    socketio.emit('guess_scored', {'id': game_id, **result}, to=f"game:{game_id}", namespace='/ws')

    return jsonify(result)


@games.route('/games/<string:game_id>', methods=['GET'])
def get_game(game_id):
    return jsonify({'id': game_id, **get_registry().get_game(game_id)})

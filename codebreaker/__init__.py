from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from codebreaker.config import Config
from codebreaker.services.games import GameRegistry

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config, registry=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    # Each app owns its registry; tests may hand in their own
    if registry is None:
        registry = GameRegistry.from_config(flask_app.config)
    flask_app.extensions['game_registry'] = registry

    origins = flask_app.config.get('CORS_ORIGINS', [])
    CORS(flask_app, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from codebreaker.main import main
    flask_app.register_blueprint(main)

    from codebreaker.api.games import games
    # Keep the /api/new and /api/guess paths the browser client uses
    flask_app.register_blueprint(games, url_prefix='/api')

    from codebreaker.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    return flask_app


def get_registry(flask_app=None) -> GameRegistry:
    from flask import current_app
    return (flask_app or current_app).extensions['game_registry']

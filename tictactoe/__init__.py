from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config
from tictactoe.services.shared_game import SharedGame

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config, shared_game=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or ['http://localhost:3000']
    CORS(
        flask_app,
        resources={r'/api/*': {'origins': allowed_origins}},
        methods=['GET', 'POST', 'OPTIONS'],
        allow_headers=['Content-Type'],
    )

    # One game per process; routes and socket handlers reach it via app.extensions
    shared_game = shared_game or SharedGame()
    shared_game.init_app(flask_app)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from tictactoe.routes import main
    flask_app.register_blueprint(main)

    from tictactoe.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api')

    from tictactoe.socketio_events import broadcast_state, register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))
    shared_game.on_change(broadcast_state)

    from tictactoe.console import play_command
    flask_app.cli.add_command(play_command)

    return flask_app

from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Ensure models are registered on the metadata before create_all/migrate
    import tichu.models  # noqa: F401

    from tichu.api.games import games
    # Mount tracker routes under /api to match frontend API client
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from tichu.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return jsonify({'error': exc.description}), exc.code
        flask_app.logger.exception(f"[error] unhandled {type(exc).__name__}: {exc}")
        return jsonify({'error': 'Internal server error'}), 500

    @click.command('tracker-reset')
    def tracker_reset_command():
        """Clears the stored game slot and stores a fresh game."""
        from tichu.services.games.scoring import new_game
        from tichu.services.games.storage import clear_game, save_game
        with flask_app.app_context():
            db.create_all()
            if clear_game():
                click.echo('Removed stored game.')
            save_game(new_game())
            click.echo('Tracker has been reset!')

    flask_app.cli.add_command(tracker_reset_command)

    return flask_app

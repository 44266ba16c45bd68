from flask import Flask, jsonify, current_app
from flask_cors import CORS
from config import Config
from candyboard.services.store import LeaderboardStore
import logging

STORE_KEY = 'leaderboard_store'


def get_store():
    """Return the store owned by the current application"""
    return current_app.extensions[STORE_KEY]


def create_app(config_class=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Set up logging
    handlers = [logging.StreamHandler()]
    if app.config.get('LOG_FILE'):
        handlers.append(logging.FileHandler(app.config['LOG_FILE'], mode='a'))
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )
    logging.getLogger('candyboard').setLevel(app.config['LOG_LEVEL'])
    logging.getLogger('werkzeug').setLevel(logging.INFO)
    logger = logging.getLogger(__name__)
    logger.info("Starting application initialization")

    # Configure CORS
    CORS(
        app,
        resources={
            r"/*": {
                "origins": app.config['CORS_ORIGINS'],
                "send_wildcard": True,
                "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization"]
            }
        })

    app.extensions[STORE_KEY] = store if store is not None else LeaderboardStore()

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"success": False, "message": "Endpoint not found"}), 404

    # Wrong method on a known path is reported like an unknown endpoint
    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({"success": False, "message": "Endpoint not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled server error: {error}", exc_info=True)
        return jsonify({"success": False, "message": "Internal server error"}), 500

    try:
        from candyboard.routes import main, auth, game, stats
        from candyboard.routes.commands import register_commands
        app.register_blueprint(main.bp)
        app.register_blueprint(auth.bp, url_prefix='/api/users')
        app.register_blueprint(game.bp, url_prefix='/api/games')
        app.register_blueprint(stats.bp, url_prefix='/api')
        register_commands(app)
        logger.info("Successfully registered all blueprints")

    except Exception as e:
        logger.error(f"Error during application initialization: {str(e)}")
        raise

    logger.info("Application initialization completed successfully")
    return app

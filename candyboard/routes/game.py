from flask import Blueprint, jsonify, request
from candyboard import get_store
from candyboard.errors import LeaderboardError, ValidationError
from candyboard.routes import get_json_body, error_response
import logging

# Set up logging
logger = logging.getLogger(__name__)

bp = Blueprint('game', __name__)


@bp.route('', methods=['POST'])
def submit_game():
    """Record a finished game"""
    try:
        data = get_json_body()
        game = get_store().submit_game(data.get('username'),
                                       data.get('score'),
                                       moves_used=data.get('moves_used'),
                                       duration=data.get('duration'))
        return jsonify({"success": True, "data": game.to_dict()}), 201

    except LeaderboardError as e:
        logger.warning(f"Game submission rejected: {e.message}")
        return error_response(e)


@bp.route('/upload', methods=['POST'])
def upload_game():
    """Record a finished game from an uploaded JSON game data file"""
    try:
        upload = request.files.get('gameData')
        username = request.form.get('username')
        if upload is None or not username:
            raise ValidationError("Missing required fields")

        logger.debug(f"Received game data file {upload.filename} from {username}")
        game = get_store().submit_game_file(username, upload.read())
        return jsonify({"success": True, "data": game.to_dict()}), 201

    except LeaderboardError as e:
        logger.warning(f"Game upload rejected: {e.message}")
        return error_response(e)

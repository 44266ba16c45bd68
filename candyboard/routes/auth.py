from flask import Blueprint, jsonify
from candyboard import get_store
from candyboard.errors import LeaderboardError
from candyboard.routes import get_json_body, error_response
import logging

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__)


@bp.route('/register', methods=['POST'])
def register():
    try:
        data = get_json_body()
        user = get_store().register(data.get('username'))
        return jsonify({"success": True, "data": user.to_dict()}), 201

    except LeaderboardError as e:
        logger.warning(f"Registration rejected: {e.message}")
        return error_response(e)


@bp.route('/login', methods=['POST'])
def login():
    try:
        data = get_json_body()
        user = get_store().login(data.get('username'))
        logger.info(f"Successful login for user: {user.username}")
        return jsonify({"success": True, "data": user.to_dict()}), 200

    except LeaderboardError as e:
        logger.warning(f"Login rejected: {e.message}")
        return error_response(e)


@bp.route('', methods=['GET'])
def list_users():
    users = get_store().list_users()
    return jsonify({
        "success": True,
        "data": [user.to_dict() for user in users]
    }), 200

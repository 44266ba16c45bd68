from flask import Blueprint, jsonify
from candyboard import get_store

bp = Blueprint('stats', __name__)


@bp.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    """Per-user best score, game count and average, best first"""
    return jsonify({"success": True, "data": get_store().leaderboard()}), 200


@bp.route('/stats', methods=['GET'])
def get_stats():
    return jsonify({"success": True, "data": get_store().stats()}), 200

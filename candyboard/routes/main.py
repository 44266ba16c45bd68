from flask import Blueprint, jsonify

bp = Blueprint('main', __name__)


@bp.route('/api/health', methods=['GET', 'POST', 'PUT', 'DELETE'])
def health_check():
    """API health check endpoint, answers any method"""
    return jsonify({"status": "ok", "message": "Candy game backend is running"})

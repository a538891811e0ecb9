from datetime import datetime, timezone

from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)

@main_bp.route('/healthcheck')
def healthcheck():
    return jsonify({'status': 'ok', 'timestamp': datetime.now(timezone.utc).isoformat()})

@main_bp.app_errorhandler(404)
def page_not_found(e):
    return jsonify({'error': 'Not found'}), 404

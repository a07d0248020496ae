"""Blueprint for service metadata and health checks"""
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return jsonify({
        'name': current_app.config.get('API_NAME'),
        'version': current_app.config.get('API_VERSION'),
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@main_bp.route('/api/health')
def health():
    return jsonify({'status': 'ok'})

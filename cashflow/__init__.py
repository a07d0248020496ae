"""Flask application for the CashFlow Manager budget API"""
import logging
import os

from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import HTTPException

from cashflow.config import config

# Global instances
db = SQLAlchemy()


def create_app(config_name='default'):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.json.sort_keys = False

    log_level = app.config.get('LOG_LEVEL', 'INFO')
    app.logger.setLevel(log_level)
    logging.getLogger('cashflow').setLevel(log_level)

    # Initialize extensions
    db.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    # Create missing tables on startup so local runs and tests need no migration step
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:///') and db_uri != 'sqlite:///:memory:':
        os.makedirs(os.path.dirname(db_uri[len('sqlite:///'):]), exist_ok=True)
    with app.app_context():
        import cashflow.models  # noqa: F401 - registers the tables
        db.create_all()

    return app


def register_blueprints(app):
    from cashflow.views.main import main_bp
    from cashflow.views.categories import categories_bp
    from cashflow.views.budget import budget_bp
    from cashflow.views.transactions import transactions_bp
    from cashflow.views.accounts import accounts_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(categories_bp, url_prefix='/api/categories')
    app.register_blueprint(budget_bp, url_prefix='/api/budget')
    app.register_blueprint(transactions_bp, url_prefix='/api/transactions')
    app.register_blueprint(accounts_bp, url_prefix='/api/accounts')


def register_error_handlers(app):
    from cashflow.exceptions import CashFlowException, NotFound

    @app.errorhandler(CashFlowException)
    def handle_cashflow_exception(e):
        if e.status_code >= 500:
            app.logger.exception('Unhandled %s: %s', type(e).__name__, e.message)
        db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(404)
    def handle_not_found(e):
        return jsonify({'error': NotFound.error}), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({'error': e.name, 'message': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        app.logger.exception('Error: %s', e)
        db.session.rollback()
        return jsonify({'error': 'Internal Server Error', 'message': str(e)}), 500


def register_hooks(app):

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get('Origin')
        if origin and origin in app.config.get('CORS_ORIGINS', []):
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Credentials'] = 'true'
            response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
            response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
            response.headers['Vary'] = 'Origin'
        return response

    @app.after_request
    def log_request(response):
        app.logger.info('%s %s %s', request.method, request.path, response.status_code)
        return response

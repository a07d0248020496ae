"""Entry point for the API.

Starts the Flask dev server. When the `INIT_DB` environment variable is set
(INIT_DB=1) the default categories and sample account are seeded first.
`FLASK_CONFIG` selects the configuration (default, development, testing).
"""

import os

from cashflow import create_app


def init_database(app):
    """Seed default data. Only runs with INIT_DB=1 to avoid unwanted side effects."""
    from cashflow.services.seed_service import seed_defaults

    with app.app_context():
        return seed_defaults(default_alert_threshold=app.config.get('DEFAULT_ALERT_THRESHOLD', 0.8))


def main():
    app = create_app(os.environ.get('FLASK_CONFIG', 'default'))

    # Optional DB seed (provisioning only)
    if os.environ.get('INIT_DB') == '1':
        result = init_database(app)
        app.logger.info('Database initialized: %s', result)

    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 8787),
            debug=app.config.get('DEBUG', False))


if __name__ == '__main__':
    main()

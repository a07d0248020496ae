#!/usr/bin/env python3
"""Seed the default categories and the sample FNB account (idempotent)."""
from cashflow import create_app


def main():
    app = create_app()
    with app.app_context():
        from cashflow.services.seed_service import seed_defaults
        print('Seeding database...')
        res = seed_defaults(default_alert_threshold=app.config.get('DEFAULT_ALERT_THRESHOLD', 0.8))
        print(f"Created {res['categories_created']} categories")
        if res['account_created']:
            print('Created sample account')
        print('Seeding complete')


if __name__ == '__main__':
    main()

from datetime import date

import pytest

from cashflow import create_app, db
from cashflow.services.seed_service import seed_defaults


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Default categories plus the sample account"""
    return seed_defaults()


@pytest.fixture
def account_id(client, seeded):
    accounts = client.get('/api/accounts').get_json()['accounts']
    return accounts[0]['id']


@pytest.fixture
def post_debit(client, account_id):
    """POST a categorized DEBIT, dated in September 2025 unless told otherwise"""
    def _post(category, amount, day=date(2025, 9, 10), vendor='Shop'):
        return client.post('/api/transactions', json={
            'accountId': account_id,
            'date': day.isoformat() + 'T08:00:00Z',
            'amount': amount,
            'type': 'DEBIT',
            'vendor': vendor,
            'description': '',
            'category': category,
        })
    return _post

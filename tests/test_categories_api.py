"""API tests for the category overview and category management"""
import pytest

from cashflow.services.categories.category_service import MAX_ID_LENGTH, category_slug


def _by_id(rows):
    return {row['id']: row for row in rows}


def test_overview_reports_spend_and_percent(client, post_debit):
    assert post_debit('cat-groceries', 4200).status_code == 201
    assert post_debit('cat-transport', 2800).status_code == 201
    assert post_debit('cat-uncategorized', 350).status_code == 201

    body = client.get('/api/categories?month=2025-09').get_json()
    assert body['month'] == '2025-09'
    assert len(body['categories']) == 12
    assert body['categories'][0]['id'] == 'cat-groceries'

    rows = _by_id(body['categories'])
    assert rows['cat-groceries'] == {
        'id': 'cat-groceries',
        'name': 'Groceries',
        'icon': '🛒',
        'color': '#10b981',
        'monthlyBudget': 6000,
        'actualSpend': 4200,
        'transactionCount': 1,
        'percentUsed': 70,
    }
    assert rows['cat-transport']['percentUsed'] == 93
    # zero budget with spend still reads 0%
    assert rows['cat-uncategorized']['percentUsed'] == 0
    assert rows['cat-uncategorized']['actualSpend'] == 350
    assert rows['cat-education']['transactionCount'] == 0


def test_overview_defaults_to_current_month(client, seeded):
    body = client.get('/api/categories').get_json()
    assert len(body['month']) == 7
    assert all(row['actualSpend'] == 0 for row in body['categories'])


@pytest.mark.parametrize('url', [
    '/api/categories?month=2025-13',
    '/api/categories?month=0000-05',
    '/api/budget/status?month=0000-05',
])
def test_overview_rejects_bad_month(client, seeded, url):
    resp = client.get(url)
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Invalid Input'


def test_budget_change_keeps_open_period_snapshot(client, post_debit):
    post_debit('cat-groceries', 4200)

    resp = client.put('/api/categories/cat-groceries/budget',
                      json={'monthlyBudget': 8000, 'alertThreshold': 0.9})
    assert resp.status_code == 200
    assert resp.get_json()['monthlyBudget'] == 8000
    assert resp.get_json()['alertThreshold'] == 0.9

    september = _by_id(client.get('/api/categories?month=2025-09').get_json()['categories'])
    assert september['cat-groceries']['monthlyBudget'] == 6000
    october = _by_id(client.get('/api/categories?month=2025-10').get_json()['categories'])
    assert october['cat-groceries']['monthlyBudget'] == 8000


def test_create_category(client, seeded):
    resp = client.post('/api/categories', json={
        'name': 'Pets', 'icon': '🐶', 'color': '#AABBCC', 'monthlyBudget': 750.5,
    })
    assert resp.status_code == 201
    body = resp.get_json()
    assert body['id'] == 'cat-pets'
    assert body['monthlyBudget'] == 750.5
    assert body['alertThreshold'] == 0.8
    assert body['order'] == 12

    dup = client.post('/api/categories', json={'name': 'Pets', 'icon': '🐶', 'color': '#AABBCC'})
    assert dup.status_code == 400


def test_non_ascii_names_get_distinct_ids(client, seeded):
    first = client.post('/api/categories', json={'name': 'Пища', 'icon': '🍞', 'color': '#AABBCC'})
    second = client.post('/api/categories', json={'name': '食品', 'icon': '🍚', 'color': '#AABBCC'})
    assert first.status_code == 201
    assert second.status_code == 201
    assert first.get_json()['id'] == 'cat-category'
    assert second.get_json()['id'] == 'cat-category-2'

    dup = client.post('/api/categories', json={'name': '食品', 'icon': '🍚', 'color': '#AABBCC'})
    assert dup.status_code == 400


def test_long_name_id_fits_column(client, seeded):
    resp = client.post('/api/categories', json={'name': 'x' * 100, 'icon': '📦', 'color': '#AABBCC'})
    assert resp.status_code == 201
    assert len(resp.get_json()['id']) == 64


def test_category_slug_limits():
    assert category_slug('Health & Medical') == 'cat-health-medical'
    assert len(category_slug('x' * 100)) == MAX_ID_LENGTH
    assert category_slug('x' * 100, 12).endswith('x-12')
    assert len(category_slug('x' * 100, 12)) == MAX_ID_LENGTH


def test_create_category_validation_error(client, seeded):
    resp = client.post('/api/categories', json={'name': 'Pets', 'icon': '🐶', 'color': 'blue'})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['error'] == 'Invalid Input'
    assert 'color' in body['message']


def test_create_category_without_body(client, seeded):
    resp = client.post('/api/categories', data='not json', content_type='text/plain')
    assert resp.status_code == 400


def test_deactivate_is_soft(client, post_debit):
    post_debit('cat-education', 100)
    resp = client.delete('/api/categories/cat-education')
    assert resp.status_code == 200
    assert resp.get_json() == {'id': 'cat-education', 'isActive': False}

    rows = client.get('/api/categories?month=2025-09').get_json()['categories']
    assert 'cat-education' not in _by_id(rows)
    # the transaction keeps its category
    txs = client.get('/api/transactions?month=2025-09').get_json()['transactions']
    assert txs[0]['category'] == 'cat-education'

    again = post_debit('cat-education', 50)
    assert again.status_code == 400


def test_unknown_category(client, seeded):
    resp = client.put('/api/categories/cat-nope/budget', json={'monthlyBudget': 1, 'alertThreshold': 0.5})
    assert resp.status_code == 404
    assert resp.get_json()['error'] == 'Not Found'
    assert client.delete('/api/categories/cat-nope').status_code == 404

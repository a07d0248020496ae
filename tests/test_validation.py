from datetime import date
from decimal import Decimal

import pytest

from cashflow.exceptions import InvalidInput
from cashflow.utils.validation import (
    validate_account_create, validate_budget_update, validate_category_create, validate_transaction,
)


def _category(**overrides):
    payload = {'name': 'Groceries', 'icon': '🛒', 'color': '#10b981'}
    payload.update(overrides)
    return payload


def test_category_defaults():
    data = validate_category_create(_category())
    assert data['monthly_budget'] == Decimal('0')
    assert data['alert_threshold'] == 0.8
    assert data['parent_category_id'] is None


@pytest.mark.parametrize('overrides', [
    {'name': ''},
    {'name': 'x' * 101},
    {'icon': 'x' * 11},
    {'color': '10b981'},
    {'color': '#10b98'},
    {'monthlyBudget': -1},
    {'monthlyBudget': 1000001},
    {'monthlyBudget': '500'},
    {'monthlyBudget': True},
    {'monthlyBudget': 99.999},
    {'alertThreshold': 1.01},
])
def test_category_rejects(overrides):
    with pytest.raises(InvalidInput):
        validate_category_create(_category(**overrides))


def test_category_reports_fields_in_order():
    with pytest.raises(InvalidInput) as excinfo:
        validate_category_create(_category(name='', icon='', color='blue'))
    assert excinfo.value.field == 'name'
    with pytest.raises(InvalidInput) as excinfo:
        validate_category_create(_category(icon='', color='blue'))
    assert excinfo.value.field == 'icon'


def test_body_must_be_object():
    with pytest.raises(InvalidInput):
        validate_category_create(None)
    with pytest.raises(InvalidInput):
        validate_category_create(['Groceries'])


def test_budget_update():
    data = validate_budget_update({'monthlyBudget': 1000000, 'alertThreshold': 0})
    assert data == {'monthly_budget': Decimal('1000000'), 'alert_threshold': 0.0}
    with pytest.raises(InvalidInput):
        validate_budget_update({'monthlyBudget': 100})


def _transaction(**overrides):
    payload = {
        'accountId': 1,
        'date': '2025-09-10T08:00:00Z',
        'amount': 120.5,
        'type': 'DEBIT',
        'vendor': 'Checkers',
        'description': 'weekly shop',
        'category': 'cat-groceries',
    }
    payload.update(overrides)
    return payload


def test_transaction_ok():
    data = validate_transaction(_transaction())
    assert data['date'] == date(2025, 9, 10)
    assert data['amount'] == Decimal('120.5')
    assert data['category_id'] == 'cat-groceries'
    assert data['notes'] is None


@pytest.mark.parametrize('overrides', [
    {'amount': 0},
    {'amount': 1000000.01},
    {'amount': 0.001},
    {'amount': 10.005},
    {'type': 'TRANSFER'},
    {'vendor': ''},
    {'description': 'x' * 501},
    {'date': 'yesterday'},
    {'accountId': None},
    {'category': ''},
])
def test_transaction_rejects(overrides):
    with pytest.raises(InvalidInput):
        validate_transaction(_transaction(**overrides))


def test_account():
    data = validate_account_create({
        'bankName': 'FNB', 'accountType': 'CHECKING',
        'accountName': 'Cheque', 'accountNumber': '1234',
    })
    assert data['currency'] == 'ZAR'
    with pytest.raises(InvalidInput):
        validate_account_create({
            'bankName': 'FNB', 'accountType': 'CHECKING',
            'accountName': 'Cheque', 'accountNumber': '12345',
        })
    with pytest.raises(InvalidInput):
        validate_account_create({
            'bankName': 'ABSA', 'accountType': 'CHECKING',
            'accountName': 'Cheque', 'accountNumber': '1234',
        })

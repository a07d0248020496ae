import pytest

from cashflow.exceptions import InvalidInput
from cashflow.services.budget.policy import BudgetPolicy


def test_default_bands():
    policy = BudgetPolicy()
    assert policy.band(70) == 'ok'
    assert policy.band(80) == 'ok'
    assert policy.band(81) == 'warning'
    assert policy.band(100) == 'warning'
    assert policy.band(101) == 'exceeded'


def test_colors():
    policy = BudgetPolicy()
    assert policy.color_for(policy.band(10)) == 'green'
    assert policy.color_for(policy.band(93)) == 'amber'
    assert policy.color_for(policy.band(107)) == 'red'


def test_from_config():
    policy = BudgetPolicy.from_config({'BUDGET_WARNING_RATIO': 0.5, 'BUDGET_EXCEEDED_RATIO': 1.2})
    assert policy.band(60) == 'warning'
    assert policy.band(110) == 'warning'
    assert policy.band(121) == 'exceeded'


def test_from_app_config(app):
    app.config['BUDGET_WARNING_RATIO'] = 0.9
    assert BudgetPolicy.from_config().band(85) == 'ok'


def test_warning_above_exceeded_is_rejected():
    with pytest.raises(InvalidInput):
        BudgetPolicy(warning_ratio=1.2, exceeded_ratio=1.0)

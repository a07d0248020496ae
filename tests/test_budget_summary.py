from datetime import date
from decimal import Decimal

from cashflow.services.budget.status import compute_budget_status
from cashflow.services.budget.summary import summarize_period

END = date(2025, 9, 30)


def _statuses():
    return [
        compute_budget_status(6000, 4200, END, category_id='cat-groceries', today=END),
        compute_budget_status(3000, 2800, END, category_id='cat-transport', today=END),
        compute_budget_status(1500, 1600, END, category_id='cat-entertainment', today=END),
    ]


def test_three_categories_totals():
    summary = summarize_period(_statuses(), '2025-09')
    assert summary.total_budget == Decimal('10500')
    assert summary.total_spend == Decimal('8600')
    assert summary.total_remaining == Decimal('1900')
    assert summary.overall_percent_used == 82
    assert summary.month == '2025-09'


def test_order_is_preserved():
    statuses = list(reversed(_statuses()))
    summary = summarize_period(statuses, '2025-09')
    assert [s.category_id for s in summary.categories] == [
        'cat-entertainment', 'cat-transport', 'cat-groceries',
    ]


def test_empty_input_gives_zero_totals():
    summary = summarize_period([], '2025-09')
    assert summary.total_budget == 0
    assert summary.total_spend == 0
    assert summary.total_remaining == 0
    assert summary.overall_percent_used == 0
    assert summary.categories == []


def test_zero_total_budget_with_spend():
    summary = summarize_period([compute_budget_status(0, 350, END, today=END)], '2025-09')
    assert summary.overall_percent_used == 0
    assert summary.total_remaining == Decimal('-350')


def test_to_dict():
    data = summarize_period(_statuses(), '2025-09').to_dict(include_categories=True)
    assert data['totalBudget'] == 10500
    assert data['overallPercentUsed'] == 82
    assert len(data['categories']) == 3

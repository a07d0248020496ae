"""
Budget status computation.

Turns a category's (budget, spend) pair for one period into a BudgetStatus:
remaining amount, integer percentage used, alert level and days left in the
period. Everything here is pure: no database, no clock unless `today` is
omitted, no logging.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from cashflow.exceptions import InvalidInput
from cashflow.services import days_remaining as _days_remaining
from cashflow.services.budget.policy import DEFAULT_POLICY, BudgetPolicy
from cashflow.utils import json_number, round_half_up, to_decimal

ALERT_OK = 'ok'
ALERT_WARNING = 'warning'
ALERT_CRITICAL = 'critical'
ALERT_EXCEEDED = 'exceeded'

ALERT_LEVELS = (ALERT_OK, ALERT_WARNING, ALERT_CRITICAL, ALERT_EXCEEDED)

DEFAULT_ALERT_THRESHOLD = Decimal('0.8')


@dataclass(frozen=True)
class BudgetStatus:
    """Spend against budget for one category in one period (never persisted)"""

    category_id: Optional[str]
    category_name: Optional[str]
    budget_amount: Decimal
    actual_spend: Decimal
    remaining: Decimal
    percent_used: int
    alert_level: str
    days_remaining: int
    alert_threshold: Decimal = DEFAULT_ALERT_THRESHOLD

    def to_dict(self):
        return {
            'categoryId': self.category_id,
            'categoryName': self.category_name,
            'budgetAmount': json_number(self.budget_amount),
            'actualSpend': json_number(self.actual_spend),
            'remaining': json_number(self.remaining),
            'percentUsed': self.percent_used,
            'alertLevel': self.alert_level,
            'daysRemaining': self.days_remaining,
        }


def percent_of(part, whole):
    """Integer percentage of `part` over `whole`, half-up; 0 when whole is 0"""
    if whole == 0:
        return 0
    return round_half_up(part * 100 / whole)


def alert_level_for(percent_used, alert_threshold, policy=DEFAULT_POLICY):
    """Alert level from the percentage and the category threshold.

    Only ok / critical / exceeded come out of here; `warning` is a display
    band (see BudgetPolicy.band).
    """
    if policy.is_exceeded(percent_used):
        return ALERT_EXCEEDED
    if percent_used > to_decimal(alert_threshold) * 100:
        return ALERT_CRITICAL
    return ALERT_OK


def _validate_threshold(alert_threshold):
    if alert_threshold is None:
        return DEFAULT_ALERT_THRESHOLD
    threshold = to_decimal(alert_threshold, field='alert_threshold')
    if not 0 <= threshold <= 1:
        raise InvalidInput(
            f'alert_threshold must be between 0 and 1, got {alert_threshold}',
            field='alert_threshold',
        )
    return threshold


def compute_budget_status(budget_amount, actual_spend, period_end,
                          alert_threshold=None, today=None,
                          category_id=None, category_name=None,
                          policy: BudgetPolicy = DEFAULT_POLICY) -> BudgetStatus:
    """Compute the BudgetStatus of a category for a period ending on `period_end`.

    Raises InvalidInput when an amount is negative or not numeric, or when
    `alert_threshold` is outside [0, 1].
    """
    budget = to_decimal(budget_amount, field='budget_amount')
    spend = to_decimal(actual_spend, field='actual_spend')
    if budget < 0:
        raise InvalidInput(f'budget_amount must be >= 0, got {budget_amount}', field='budget_amount')
    if spend < 0:
        raise InvalidInput(f'actual_spend must be >= 0, got {actual_spend}', field='actual_spend')
    threshold = _validate_threshold(alert_threshold)

    if today is None:
        today = date.today()

    percent_used = percent_of(spend, budget)
    return BudgetStatus(
        category_id=category_id,
        category_name=category_name,
        budget_amount=budget,
        actual_spend=spend,
        remaining=budget - spend,
        percent_used=percent_used,
        alert_level=alert_level_for(percent_used, threshold, policy),
        days_remaining=_days_remaining(period_end, today),
        alert_threshold=threshold,
    )

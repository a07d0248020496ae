"""Period-level totals over a list of category statuses"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from cashflow.services.budget.status import BudgetStatus, percent_of
from cashflow.utils import json_number


@dataclass(frozen=True)
class PeriodSummary:
    month: str
    total_budget: Decimal
    total_spend: Decimal
    total_remaining: Decimal
    overall_percent_used: int
    categories: List[BudgetStatus] = field(default_factory=list)

    def to_dict(self, include_categories=False):
        data = {
            'month': self.month,
            'totalBudget': json_number(self.total_budget),
            'totalSpend': json_number(self.total_spend),
            'totalRemaining': json_number(self.total_remaining),
            'overallPercentUsed': self.overall_percent_used,
        }
        if include_categories:
            data['categories'] = [s.to_dict() for s in self.categories]
        return data


def summarize_period(statuses, month) -> PeriodSummary:
    """Sum budget and spend over `statuses`, keeping their order.

    An empty input gives all-zero totals.
    """
    statuses = list(statuses)
    total_budget = sum((s.budget_amount for s in statuses), Decimal('0'))
    total_spend = sum((s.actual_spend for s in statuses), Decimal('0'))
    return PeriodSummary(
        month=month,
        total_budget=total_budget,
        total_spend=total_spend,
        total_remaining=total_budget - total_spend,
        overall_percent_used=percent_of(total_spend, total_budget),
        categories=statuses,
    )

"""Read side: budget status of every active category for a month"""
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import func

from cashflow.models.transaction import Transaction
from cashflow.services import BaseService, get_month_boundaries, period_label
from cashflow.services.budget.period_service import BudgetPeriodService
from cashflow.services.budget.policy import BudgetPolicy
from cashflow.services.budget.status import compute_budget_status
from cashflow.services.budget.summary import summarize_period
from cashflow.services.categories.category_service import CategoryService
from cashflow.utils import json_number
from cashflow.utils.formatting import format_currency, format_percent_value

logger = logging.getLogger(__name__)


class BudgetStatusService(BaseService):
    """Computes statuses on every read; nothing derived is stored or cached"""

    def __init__(self, session=None, policy=None):
        super().__init__(session)
        self.policy = policy if policy is not None else BudgetPolicy.from_config()
        self.categories = CategoryService(self.session)
        self.periods = BudgetPeriodService(self.session)

    def transaction_counts(self, year, month):
        """Categorized debits per category in the month"""
        start_date, end_date = get_month_boundaries(date(year, month, 1))
        rows = self.session.query(
            Transaction.category_id, func.count(Transaction.id)
        ).filter(
            Transaction.type == 'DEBIT',
            Transaction.category_id.isnot(None),
            Transaction.date >= start_date,
            Transaction.date <= end_date,
        ).group_by(Transaction.category_id).all()
        return dict(rows)

    def _statuses(self, year, month, today=None):
        """(category, BudgetStatus) pairs in display order.

        Months without an opened period fall back to the category's current
        budget and zero spend; reads never open periods.
        """
        _, end_date = get_month_boundaries(date(year, month, 1))
        periods = self.periods.get_periods_dict(year, month)
        result = []
        for category in self.categories.list_categories():
            period = periods.get(category.id)
            if period is not None:
                budget, spend = period.budget_amount, period.actual_spend
            else:
                budget, spend = category.monthly_budget or 0, Decimal('0')
            status = compute_budget_status(
                budget, spend, end_date,
                alert_threshold=category.alert_threshold,
                today=today,
                category_id=category.id,
                category_name=category.name,
                policy=self.policy,
            )
            result.append((category, status))
        return result

    def category_overview(self, year, month, today=None):
        """Rows for GET /api/categories"""
        counts = self.transaction_counts(year, month)
        rows = []
        for category, status in self._statuses(year, month, today):
            rows.append({
                'id': category.id,
                'name': category.name,
                'icon': category.icon,
                'color': category.color,
                'monthlyBudget': json_number(status.budget_amount),
                'actualSpend': json_number(status.actual_spend),
                'transactionCount': counts.get(category.id, 0),
                'percentUsed': status.percent_used,
            })
        return rows

    def describe_status(self, status):
        """Status dict plus the display band, its color and formatted amounts"""
        band = self.policy.band(status.percent_used)
        data = status.to_dict()
        data['band'] = band
        data['color'] = self.policy.color_for(band)
        data['display'] = {
            'budget': format_currency(status.budget_amount),
            'spent': format_currency(status.actual_spend),
            'remaining': format_currency(status.remaining),
            'percentUsed': format_percent_value(status.percent_used),
        }
        return data

    def period_status(self, year, month, today=None):
        """(statuses, summary) of a month"""
        statuses = [status for _, status in self._statuses(year, month, today)]
        summary = summarize_period(statuses, period_label(year, month))
        logger.debug('Computed %d statuses for %s', len(statuses), summary.month)
        return statuses, summary

    def period_report(self, year, month, today=None):
        """JSON body of GET /api/budget/status"""
        statuses, summary = self.period_status(year, month, today)
        summary_dict = summary.to_dict()
        summary_dict['display'] = {
            'totalBudget': format_currency(summary.total_budget),
            'totalSpend': format_currency(summary.total_spend),
            'totalRemaining': format_currency(summary.total_remaining),
            'overallPercentUsed': format_percent_value(summary.overall_percent_used),
        }
        return {
            'month': summary.month,
            'statuses': [self.describe_status(s) for s in statuses],
            'summary': summary_dict,
        }

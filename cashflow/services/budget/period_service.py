"""Service for monthly budget periods"""
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import and_, func
from sqlalchemy.exc import IntegrityError

from cashflow.models.budget_period import BudgetPeriod
from cashflow.models.category import Category
from cashflow.models.transaction import Transaction
from cashflow.services import BaseService, get_month_boundaries
from cashflow.utils import to_decimal

logger = logging.getLogger(__name__)


class BudgetPeriodService(BaseService):
    """Opening periods, posting spend and corrective rebuilds"""

    def get_period(self, category_id, year, month):
        return BudgetPeriod.query.filter(
            and_(
                BudgetPeriod.category_id == category_id,
                BudgetPeriod.year == year,
                BudgetPeriod.month == month
            )
        ).first()

    def get_periods_dict(self, year, month):
        """Periods of a month as {category_id: BudgetPeriod}"""
        periods = BudgetPeriod.query.filter_by(year=year, month=month).all()
        return {p.category_id: p for p in periods}

    def get_or_create_period(self, category, year, month):
        """Return the period, opening it with a snapshot of the category budget if missing.

        Does not commit: the caller owns the transaction.
        """
        period = self.get_period(category.id, year, month)
        if period is not None:
            return period

        start_date, end_date = get_month_boundaries(date(year, month, 1))
        period = BudgetPeriod(
            category_id=category.id,
            year=year,
            month=month,
            budget_amount=to_decimal(category.monthly_budget or 0),
            actual_spend=Decimal('0'),
            start_date=start_date,
            end_date=end_date,
        )
        try:
            with self.session.begin_nested():
                self.session.add(period)
        except IntegrityError:
            # opened meanwhile by another request
            period = self.get_period(category.id, year, month)
            if period is None:
                raise
            return period
        logger.info('Opened budget period %s %04d-%02d with budget %s',
                    category.id, year, month, period.budget_amount)
        return period

    def open_month(self, year, month):
        """Open missing periods for every active category; returns how many were created"""
        existing = self.get_periods_dict(year, month)
        created = 0
        for category in Category.query.filter(Category.is_active.is_(True)).all():
            if category.id not in existing:
                self.get_or_create_period(category, year, month)
                created += 1
        self.commit()
        return created

    def record_spend(self, category, tx_date, amount):
        """Add a posted debit to the period of its month (no commit)"""
        period = self.get_or_create_period(category, tx_date.year, tx_date.month)
        # increment in SQL: concurrent posts to one period must all land
        self.session.query(BudgetPeriod).filter(BudgetPeriod.id == period.id).update(
            {BudgetPeriod.actual_spend: BudgetPeriod.actual_spend + to_decimal(amount)},
            synchronize_session='fetch',
        )
        logger.debug('Posted %s to %s, spend now %s', amount, period, period.actual_spend)
        return period

    def spend_by_category(self, year, month):
        """Sum of categorized debits in a month as {category_id: Decimal}"""
        start_date, end_date = get_month_boundaries(date(year, month, 1))
        rows = self.session.query(
            Transaction.category_id, func.sum(Transaction.amount)
        ).filter(
            Transaction.type == 'DEBIT',
            Transaction.category_id.isnot(None),
            Transaction.date >= start_date,
            Transaction.date <= end_date,
        ).group_by(Transaction.category_id).all()
        return {category_id: to_decimal(total or 0) for category_id, total in rows}

    def rebuild_actual_spend(self, year, month):
        """Recompute actual_spend of every period of the month from its transactions.

        Used for corrective edits; returns the number of periods touched.
        """
        self.open_month(year, month)
        totals = self.spend_by_category(year, month)
        existing = self.get_periods_dict(year, month)
        # deactivated categories can still carry spend for the month
        for category_id in totals:
            if category_id not in existing:
                category = self.session.get(Category, category_id)
                if category is not None:
                    self.get_or_create_period(category, year, month)
        touched = 0
        for category_id, period in self.get_periods_dict(year, month).items():
            period.actual_spend = totals.get(category_id, Decimal('0'))
            touched += 1
        self.commit()
        logger.info('Rebuilt %d budget periods for %04d-%02d', touched, year, month)
        return touched

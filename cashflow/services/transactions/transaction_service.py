"""Service for managing transactions"""
import logging
import datetime

from sqlalchemy.exc import SQLAlchemyError

from cashflow.exceptions import InternalError, InvalidInput, NotFound
from cashflow.models.account import Account
from cashflow.models.transaction import Transaction
from cashflow.services import BaseService, get_month_boundaries
from cashflow.services.budget.period_service import BudgetPeriodService
from cashflow.services.categories.category_service import CategoryService

logger = logging.getLogger(__name__)


class TransactionService(BaseService):
    """Service for managing transactions"""

    def __init__(self, session=None):
        super().__init__(session)
        self.periods = BudgetPeriodService(self.session)
        self.categories = CategoryService(self.session)

    def get_transactions_by_month(self, year, month):
        """Transactions of a calendar month, newest first"""
        start_date, end_date = get_month_boundaries(datetime.date(year, month, 1))
        return Transaction.query.filter(
            Transaction.date >= start_date,
            Transaction.date <= end_date,
        ).order_by(Transaction.date.desc(), Transaction.id.desc()).all()

    def _get_account(self, account_id):
        try:
            key = int(account_id)
        except (TypeError, ValueError):
            raise NotFound('Account', account_id)
        account = self.session.get(Account, key)
        if account is None:
            raise NotFound('Account', account_id)
        return account

    def create_transaction(self, account_id, date, amount, type, vendor,
                           description='', category_id=None, notes=None):
        """Store a transaction; a categorized DEBIT is also added to its month's budget period.

        Both writes happen in one commit.
        """
        account = self._get_account(account_id)
        category = None
        if category_id is not None:
            category = self.categories.get_category(category_id)
            if not category.is_active:
                raise InvalidInput(f"Category '{category_id}' is no longer active", field='category')

        transaction = Transaction(
            account_id=account.id,
            date=date,
            amount=amount,
            type=type,
            vendor=vendor,
            description=description or '',
            category_id=category_id,
            notes=notes,
            source='MANUAL',
        )
        try:
            self.session.add(transaction)
            if transaction.counts_as_spend:
                self.periods.record_spend(category, date, amount)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception('Could not store transaction for %s', vendor)
            raise InternalError(f'Database error: {e}') from e

        logger.info('Created %s transaction %s of %s at %s', type, transaction.id, amount, vendor)
        return transaction

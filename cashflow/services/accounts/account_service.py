"""Service for managing bank accounts"""
import logging

from cashflow.models.account import Account
from cashflow.services import BaseService

logger = logging.getLogger(__name__)


class AccountService(BaseService):

    def list_accounts(self):
        return Account.query.filter(Account.is_active.is_(True)).order_by(Account.id.asc()).all()

    def find_account(self, bank_name, account_number):
        return Account.query.filter_by(bank_name=bank_name, account_number=account_number).first()

    def create_account(self, bank_name, account_type, account_name, account_number, currency='ZAR'):
        account = Account(
            bank_name=bank_name,
            account_type=account_type,
            account_name=account_name,
            account_number=account_number,
            currency=currency,
        )
        self.save(account)
        logger.info('Created account %r', account)
        return account

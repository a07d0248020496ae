"""Idempotent seeding of the default categories and sample account"""
import logging

from cashflow.defaults import DEFAULT_ACCOUNT, DEFAULT_CATEGORIES
from cashflow.models.category import Category
from cashflow.services.accounts.account_service import AccountService
from cashflow.services.categories.category_service import CategoryService, category_slug

logger = logging.getLogger(__name__)


def seed_defaults(session=None, default_alert_threshold=0.8):
    """Create any missing default category and the sample account.

    Returns a dict with the number of categories created and whether the
    account was created. Existing rows are left untouched.
    """
    categories = CategoryService(session)
    accounts = AccountService(session)
    result = {'categories_created': 0, 'account_created': False}

    for index, (name, icon, color, budget) in enumerate(DEFAULT_CATEGORIES):
        category_id = category_slug(name)
        if categories.session.get(Category, category_id) is not None:
            continue
        if Category.query.filter(Category.name == name).first() is not None:
            continue
        categories.create_category(
            name=name,
            icon=icon,
            color=color,
            monthly_budget=budget,
            alert_threshold=default_alert_threshold,
            category_id=category_id,
            order=index,
        )
        result['categories_created'] += 1

    if accounts.find_account(DEFAULT_ACCOUNT['bank_name'], DEFAULT_ACCOUNT['account_number']) is None:
        accounts.create_account(**DEFAULT_ACCOUNT)
        result['account_created'] = True

    logger.info('Seed result: %s', result)
    return result

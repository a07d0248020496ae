"""
Database models

Imported here so that every table is registered on the metadata before
`db.create_all()` runs.
"""
from cashflow.models.category import Category  # noqa: F401
from cashflow.models.budget_period import BudgetPeriod  # noqa: F401
from cashflow.models.account import Account  # noqa: F401
from cashflow.models.transaction import Transaction  # noqa: F401

"""
Default data values separated from operational configuration.

This module holds 'content' values used by the app (the default category
list and the sample account) that should not be mixed with runtime settings
(DB, SECRET_KEY, flags, ...).
"""

# Default categories (name, icon, color, monthly budget)
DEFAULT_CATEGORIES = [
    ('Groceries', '🛒', '#10b981', 6000),
    ('Transport', '🚗', '#3b82f6', 3000),
    ('Entertainment', '🎬', '#8b5cf6', 1500),
    ('Dining Out', '🍽️', '#f59e0b', 2000),
    ('Utilities', '💡', '#6366f1', 2500),
    ('Health & Medical', '⚕️', '#ec4899', 1000),
    ('Shopping', '🛍️', '#14b8a6', 2000),
    ('Insurance', '🛡️', '#0ea5e9', 3000),
    ('Education', '📚', '#a855f7', 1000),
    ('Personal Care', '💅', '#f97316', 800),
    ('Savings', '💰', '#22c55e', 0),
    ('Uncategorized', '❓', '#64748b', 0),
]

# Sample account created by the seed script (last 4 digits only)
DEFAULT_ACCOUNT = {
    'bank_name': 'FNB',
    'account_type': 'CHECKING',
    'account_name': 'FNB Cheque',
    'account_number': '1234',
    'currency': 'ZAR',
}

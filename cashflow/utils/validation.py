"""
Validation of API request payloads.

Every validator takes the decoded JSON body and returns a dict of clean,
snake_case values ready for the services, or raises InvalidInput naming the
first offending field.
"""
import re
from decimal import Decimal

from dateutil import parser as date_parser

from cashflow.exceptions import InvalidInput
from cashflow.models.account import ACCOUNT_TYPES, BANK_NAMES
from cashflow.models.transaction import TRANSACTION_TYPES
from cashflow.utils import to_decimal

MAX_AMOUNT = Decimal('1000000')
COLOR_RE = re.compile(r'^#[0-9A-Fa-f]{6}$')


class ValidationUtils:
    """Field-level checks"""

    @staticmethod
    def require_object(payload):
        if not isinstance(payload, dict):
            raise InvalidInput('Request body must be a JSON object')
        return payload

    @staticmethod
    def validate_string(payload, field, min_length=0, max_length=None, required=True, default=None):
        value = payload.get(field)
        if value is None:
            if required:
                raise InvalidInput(f'{field} is required', field=field)
            return default
        if not isinstance(value, str):
            raise InvalidInput(f'{field} must be a string', field=field)
        if len(value) < min_length:
            raise InvalidInput(f'{field} must be at least {min_length} characters', field=field)
        if max_length is not None and len(value) > max_length:
            raise InvalidInput(f'{field} must be at most {max_length} characters', field=field)
        return value

    @staticmethod
    def validate_number(payload, field, minimum=None, maximum=None,
                        exclusive_minimum=False, default=None, places=None):
        value = payload.get(field)
        if value is None:
            if default is None:
                raise InvalidInput(f'{field} is required', field=field)
            return to_decimal(default, field=field)
        # JSON numbers only: strings and booleans are refused
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise InvalidInput(f'{field} must be a number', field=field)
        number = to_decimal(value, field=field)
        if places is not None and number.as_tuple().exponent < -places:
            raise InvalidInput(f'{field} must have at most {places} decimal places', field=field)
        if minimum is not None:
            if exclusive_minimum and number <= minimum:
                raise InvalidInput(f'{field} must be greater than {minimum}', field=field)
            if not exclusive_minimum and number < minimum:
                raise InvalidInput(f'{field} must be at least {minimum}', field=field)
        if maximum is not None and number > maximum:
            raise InvalidInput(f'{field} must be at most {maximum}', field=field)
        return number

    @staticmethod
    def validate_choice(payload, field, choices, default=None):
        value = payload.get(field, default)
        if value not in choices:
            raise InvalidInput(f"{field} must be one of: {', '.join(choices)}", field=field)
        return value

    @staticmethod
    def validate_datetime(payload, field):
        value = payload.get(field)
        if not isinstance(value, str) or not value:
            raise InvalidInput(f'{field} is required (ISO-8601)', field=field)
        try:
            return date_parser.isoparse(value)
        except ValueError:
            raise InvalidInput(f"{field} is not a valid ISO-8601 date: '{value}'", field=field)


def validate_category_create(payload):
    v = ValidationUtils
    payload = v.require_object(payload)
    name = v.validate_string(payload, 'name', 1, 100)
    icon = v.validate_string(payload, 'icon', 1, 10)
    color = v.validate_string(payload, 'color')
    if not COLOR_RE.match(color):
        raise InvalidInput('color must be a hex color like #10b981', field='color')
    return {
        'name': name,
        'icon': icon,
        'color': color,
        'monthly_budget': v.validate_number(payload, 'monthlyBudget', 0, MAX_AMOUNT, default=0, places=2),
        'alert_threshold': float(v.validate_number(payload, 'alertThreshold', 0, 1, default='0.8')),
        'parent_category_id': v.validate_string(payload, 'parentCategoryId', 1, 64, required=False),
    }


def validate_budget_update(payload):
    v = ValidationUtils
    payload = v.require_object(payload)
    return {
        'monthly_budget': v.validate_number(payload, 'monthlyBudget', 0, MAX_AMOUNT, places=2),
        'alert_threshold': float(v.validate_number(payload, 'alertThreshold', 0, 1)),
    }


def validate_transaction(payload):
    v = ValidationUtils
    payload = v.require_object(payload)
    account_id = payload.get('accountId')
    if isinstance(account_id, bool) or not isinstance(account_id, (int, str)) or account_id == '':
        raise InvalidInput('accountId is required', field='accountId')
    category = payload.get('category')
    if category is not None and (not isinstance(category, str) or not category):
        raise InvalidInput('category must be a category id or null', field='category')
    return {
        'account_id': account_id,
        'date': v.validate_datetime(payload, 'date').date(),
        'amount': v.validate_number(payload, 'amount', 0, MAX_AMOUNT, exclusive_minimum=True, places=2),
        'type': v.validate_choice(payload, 'type', TRANSACTION_TYPES),
        'vendor': v.validate_string(payload, 'vendor', 1, 255),
        'description': v.validate_string(payload, 'description', 0, 500),
        'category_id': category,
        'notes': v.validate_string(payload, 'notes', 0, 1000, required=False),
    }


def validate_account_create(payload):
    v = ValidationUtils
    payload = v.require_object(payload)
    return {
        'bank_name': v.validate_choice(payload, 'bankName', BANK_NAMES),
        'account_type': v.validate_choice(payload, 'accountType', ACCOUNT_TYPES),
        'account_name': v.validate_string(payload, 'accountName', 1, 100),
        'account_number': v.validate_string(payload, 'accountNumber', 4, 4),
        'currency': v.validate_string(payload, 'currency', 3, 3, required=False, default='ZAR'),
    }

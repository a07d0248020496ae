from flask import current_app, has_app_context

from cashflow.exceptions import InvalidInput
from cashflow.utils import to_decimal, round_half_up

DEFAULT_CURRENCY_FORMAT = 'R {}'
DEFAULT_THOUSANDS_SEPARATOR = ' '


def _config_value(key, default):
    if has_app_context():
        return current_app.config.get(key, default)
    return default


def _normalize(value):
    # None and junk render as zero; display code must never blow up
    if value is None:
        return to_decimal(0)
    try:
        return to_decimal(value)
    except InvalidInput:
        return to_decimal(0)


def format_currency(value, fmt=None, separator=None):
    """Format an amount as a currency string using `CURRENCY_FORMAT`.

    Zero fraction digits (half-up), thousands grouped with
    `THOUSANDS_SEPARATOR`, sign in front of the symbol: 4200 -> 'R 4 200',
    -100 -> '-R 100'.
    """
    if fmt is None:
        fmt = _config_value('CURRENCY_FORMAT', DEFAULT_CURRENCY_FORMAT)
    if separator is None:
        separator = _config_value('THOUSANDS_SEPARATOR', DEFAULT_THOUSANDS_SEPARATOR)

    whole = round_half_up(_normalize(value))
    sign = '-' if whole < 0 else ''
    grouped = "{:,}".format(abs(whole)).replace(',', separator)
    return sign + fmt.format(grouped)


def format_percent(ratio):
    """Format a ratio as an integer percentage: 0.7 -> '70%'."""
    return format_percent_value(_normalize(ratio) * 100)


def format_percent_value(percent):
    """Format an already scaled percentage: 93 -> '93%'."""
    return f"{round_half_up(_normalize(percent))}%"

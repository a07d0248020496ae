"""
JSON blueprints of the API
"""
from datetime import date

from flask import request

from cashflow.services import parse_period_label


def requested_period():
    """(year, month) from the `month=YYYY-MM` query arg, current month when absent"""
    label = request.args.get('month')
    if not label:
        today = date.today()
        return today.year, today.month
    return parse_period_label(label)


def json_body():
    """Decoded JSON body, None when missing or malformed"""
    return request.get_json(silent=True)

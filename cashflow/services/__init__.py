"""
Base service and calendar-month helpers
"""
import calendar
import logging
import re
from datetime import MINYEAR, date

from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import SQLAlchemyError

from cashflow import db
from cashflow.exceptions import InternalError, InvalidInput

__all__ = [
    'BaseService', 'get_month_boundaries', 'period_label',
    'parse_period_label', 'days_remaining', 'previous_period',
]

logger = logging.getLogger(__name__)

_PERIOD_RE = re.compile(r'^(\d{4})-(\d{2})$')


class BaseService:
    """Base class for services with common session handling"""

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def save(self, obj):
        """Add an object and commit; roll back and raise InternalError on failure"""
        try:
            self.session.add(obj)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception('save failed for %r', obj)
            raise InternalError(f'Database error: {e}') from e
        return obj

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception('commit failed')
            raise InternalError(f'Database error: {e}') from e


def get_month_boundaries(date_obj):
    """First and last day (inclusive) of the calendar month containing date_obj"""
    start_date = date_obj.replace(day=1)
    last_day = calendar.monthrange(date_obj.year, date_obj.month)[1]
    end_date = date_obj.replace(day=last_day)
    return start_date, end_date


def period_label(year, month):
    """'YYYY-MM' label of a period"""
    return f"{int(year):04d}-{int(month):02d}"


def parse_period_label(label):
    """Parse 'YYYY-MM' into (year, month)"""
    match = _PERIOD_RE.match(label or '')
    if not match:
        raise InvalidInput(f"month must be in YYYY-MM format, got '{label}'", field='month')
    year, month = int(match.group(1)), int(match.group(2))
    if year < MINYEAR or not 1 <= month <= 12:
        raise InvalidInput(f"month out of range in '{label}'", field='month')
    return year, month


def days_remaining(end_date, today=None):
    """Whole days left in a period, today included; 0 once the period is over"""
    if today is None:
        today = date.today()
    return max(0, (end_date - today).days + 1)


def previous_period(year, month):
    """(year, month) of the month before the given one"""
    prev = date(year, month, 1) - relativedelta(months=1)
    return prev.year, prev.month

"""Banding cutoffs shared by the status calculator and the presentation layer"""
from dataclasses import dataclass

from flask import current_app, has_app_context

from cashflow.exceptions import InvalidInput
from cashflow.utils import to_decimal

BAND_OK = 'ok'
BAND_WARNING = 'warning'
BAND_EXCEEDED = 'exceeded'

BAND_COLORS = {
    BAND_OK: 'green',
    BAND_WARNING: 'amber',
    BAND_EXCEEDED: 'red',
}


@dataclass(frozen=True)
class BudgetPolicy:
    """Ratios of the budget at which spend is shown as near limit / over budget"""

    warning_ratio: float = 0.8
    exceeded_ratio: float = 1.0

    def __post_init__(self):
        if not 0 <= self.warning_ratio <= self.exceeded_ratio:
            raise InvalidInput('warning_ratio must be between 0 and exceeded_ratio')

    @property
    def exceeded_percent(self):
        return to_decimal(self.exceeded_ratio) * 100

    @property
    def warning_percent(self):
        return to_decimal(self.warning_ratio) * 100

    def is_exceeded(self, percent_used):
        return percent_used > self.exceeded_percent

    def band(self, percent_used):
        """Display band for an integer percentage"""
        if self.is_exceeded(percent_used):
            return BAND_EXCEEDED
        if percent_used > self.warning_percent:
            return BAND_WARNING
        return BAND_OK

    def color_for(self, band):
        return BAND_COLORS[band]

    @classmethod
    def from_config(cls, config=None):
        """Build the policy from app config (BUDGET_WARNING_RATIO / BUDGET_EXCEEDED_RATIO)"""
        if config is None:
            if not has_app_context():
                return cls()
            config = current_app.config
        return cls(
            warning_ratio=float(config.get('BUDGET_WARNING_RATIO', cls.warning_ratio)),
            exceeded_ratio=float(config.get('BUDGET_EXCEEDED_RATIO', cls.exceeded_ratio)),
        )


DEFAULT_POLICY = BudgetPolicy()

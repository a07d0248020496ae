"""Blueprint for budget status reports"""
from flask import Blueprint, jsonify

from cashflow.services.budget.status_service import BudgetStatusService
from cashflow.views import requested_period

budget_bp = Blueprint('budget', __name__)


@budget_bp.route('/status')
def status():
    """Per-category status and period totals for the month"""
    year, month = requested_period()
    return jsonify(BudgetStatusService().period_report(year, month))

"""
Blueprint for categories
Budget overview for a month plus category create / budget update / deactivate
"""
from flask import Blueprint, current_app, jsonify

from cashflow.services import period_label
from cashflow.services.budget.status_service import BudgetStatusService
from cashflow.services.categories.category_service import CategoryService
from cashflow.utils.validation import validate_budget_update, validate_category_create
from cashflow.views import json_body, requested_period

categories_bp = Blueprint('categories', __name__)


@categories_bp.route('', methods=['GET'])
def index():
    """Active categories with spend and percentage used for the month"""
    year, month = requested_period()
    try:
        rows = BudgetStatusService().category_overview(year, month)
    except Exception as e:
        current_app.logger.exception('Error fetching categories')
        return jsonify({
            'error': 'Failed to fetch categories',
            'message': str(e),
        }), 500
    return jsonify({'categories': rows, 'month': period_label(year, month)})


@categories_bp.route('', methods=['POST'])
def create():
    data = validate_category_create(json_body())
    category = CategoryService().create_category(**data)
    return jsonify(category.to_dict()), 201


@categories_bp.route('/<category_id>/budget', methods=['PUT'])
def update_budget(category_id):
    data = validate_budget_update(json_body())
    category = CategoryService().update_budget(category_id, **data)
    return jsonify(category.to_dict())


@categories_bp.route('/<category_id>', methods=['DELETE'])
def deactivate(category_id):
    """Soft delete"""
    category = CategoryService().deactivate_category(category_id)
    return jsonify({'id': category.id, 'isActive': category.is_active})

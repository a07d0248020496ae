"""Blueprint for transactions"""
from flask import Blueprint, jsonify

from cashflow.services import period_label
from cashflow.services.transactions.transaction_service import TransactionService
from cashflow.utils.validation import validate_transaction
from cashflow.views import json_body, requested_period

transactions_bp = Blueprint('transactions', __name__)


@transactions_bp.route('', methods=['GET'])
def index():
    year, month = requested_period()
    transactions = TransactionService().get_transactions_by_month(year, month)
    return jsonify({
        'transactions': [t.to_dict() for t in transactions],
        'month': period_label(year, month),
    })


@transactions_bp.route('', methods=['POST'])
def create():
    data = validate_transaction(json_body())
    transaction = TransactionService().create_transaction(**data)
    return jsonify(transaction.to_dict()), 201

"""Blueprint for bank accounts"""
from flask import Blueprint, jsonify

from cashflow.services.accounts.account_service import AccountService
from cashflow.utils.validation import validate_account_create
from cashflow.views import json_body

accounts_bp = Blueprint('accounts', __name__)


@accounts_bp.route('', methods=['GET'])
def index():
    accounts = AccountService().list_accounts()
    return jsonify({'accounts': [a.to_dict() for a in accounts]})


@accounts_bp.route('', methods=['POST'])
def create():
    data = validate_account_create(json_body())
    account = AccountService().create_account(**data)
    return jsonify(account.to_dict()), 201

"""Model for bank accounts"""
from datetime import datetime

from cashflow import db

BANK_NAMES = ('FNB', 'NEDBANK')
ACCOUNT_TYPES = ('CHECKING', 'SAVINGS', 'CREDIT_CARD')


class Account(db.Model):
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    bank_name = db.Column(db.String(20), nullable=False)
    account_type = db.Column(db.String(20), nullable=False)
    account_name = db.Column(db.String(100), nullable=False)
    account_number = db.Column(db.String(4), nullable=False)  # last 4 digits only
    currency = db.Column(db.String(3), nullable=False, default='ZAR')
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'bankName': self.bank_name,
            'accountType': self.account_type,
            'accountName': self.account_name,
            'accountNumber': self.account_number,
            'currency': self.currency,
            'isActive': self.is_active,
        }

    def __repr__(self):
        return f'<Account {self.bank_name} ****{self.account_number}>'

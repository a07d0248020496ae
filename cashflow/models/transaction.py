"""Model for transactions"""
from datetime import datetime

from cashflow import db
from cashflow.utils import json_number

TRANSACTION_TYPES = ('DEBIT', 'CREDIT')
TRANSACTION_SOURCES = ('STATEMENT', 'POS_SCAN', 'MANUAL')


class Transaction(db.Model):
    """A single money movement on an account"""
    __tablename__ = 'transactions'

    id = db.Column(db.Integer, primary_key=True)
    account_id = db.Column(db.Integer, db.ForeignKey('accounts.id'), nullable=False, index=True)
    date = db.Column(db.Date, nullable=False, index=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False)  # always positive, `type` gives the direction
    type = db.Column(db.String(10), nullable=False)
    vendor = db.Column(db.String(255), nullable=False)
    description = db.Column(db.String(500), nullable=False, default='')
    category_id = db.Column(db.String(64), db.ForeignKey('categories.id'), nullable=True, index=True)
    notes = db.Column(db.String(1000), nullable=True)
    source = db.Column(db.String(20), nullable=False, default='MANUAL')
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    account = db.relationship('Account', backref=db.backref('transactions', lazy=True))
    category = db.relationship('Category', backref=db.backref('transactions', lazy=True))

    @property
    def counts_as_spend(self):
        """DEBITs with a category are what feed a budget period"""
        return self.type == 'DEBIT' and self.category_id is not None

    def to_dict(self):
        return {
            'id': self.id,
            'accountId': self.account_id,
            'date': self.date.isoformat(),
            'amount': json_number(self.amount),
            'type': self.type,
            'vendor': self.vendor,
            'description': self.description,
            'category': self.category_id,
            'notes': self.notes,
            'source': self.source,
        }

    def __repr__(self):
        return f'<Transaction {self.vendor}: {self.amount} ({self.type})>'

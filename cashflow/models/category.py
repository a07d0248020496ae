"""Model for spending categories"""
from datetime import datetime

from cashflow import db
from cashflow.utils import json_number


class Category(db.Model):
    """User-defined spending bucket with a monthly budget"""
    __tablename__ = 'categories'

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(10), nullable=False)
    color = db.Column(db.String(7), nullable=False)
    monthly_budget = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    alert_threshold = db.Column(db.Float, nullable=False, default=0.8)
    parent_category_id = db.Column(db.String(64), db.ForeignKey('categories.id'), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    # Categories are deactivated, never deleted: transactions keep pointing at them
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    parent = db.relationship('Category', remote_side=[id], backref='children')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'color': self.color,
            'monthlyBudget': json_number(self.monthly_budget or 0),
            'alertThreshold': self.alert_threshold,
            'parentCategoryId': self.parent_category_id,
            'order': self.order,
            'isActive': self.is_active,
        }

    def __repr__(self):
        return f'<Category {self.id} {self.name} budget={self.monthly_budget}>'

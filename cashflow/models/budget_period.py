from datetime import datetime

from cashflow import db


class BudgetPeriod(db.Model):
    """One category's accounting for one calendar month.

    `budget_amount` is a snapshot of the category budget taken when the row is
    created; later budget edits only reach periods created afterwards.
    """
    __tablename__ = 'budget_periods'

    id = db.Column(db.Integer, primary_key=True)
    category_id = db.Column(db.String(64), db.ForeignKey('categories.id'), nullable=False, index=True)
    year = db.Column(db.Integer, nullable=False, index=True)
    month = db.Column(db.Integer, nullable=False, index=True)
    budget_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    actual_spend = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = db.relationship('Category', backref=db.backref('periods', lazy=True))

    __table_args__ = (
        db.UniqueConstraint('category_id', 'year', 'month', name='uix_category_year_month'),
    )

    def __repr__(self):
        return (
            f"<BudgetPeriod {self.category_id} {self.year}-{self.month} "
            f"budget={self.budget_amount} spend={self.actual_spend}>"
        )

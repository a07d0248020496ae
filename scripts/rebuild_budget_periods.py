#!/usr/bin/env python3
"""Recompute actual_spend of budget periods from the stored transactions.

Usage:
  rebuild_budget_periods.py            : current and previous month
  rebuild_budget_periods.py 2025-09 .. : the given months (YYYY-MM)
"""
import argparse
from datetime import date

from cashflow import create_app


def main(argv=None):
    parser = argparse.ArgumentParser(description='Rebuild budget period spend from transactions')
    parser.add_argument('months', nargs='*', help='Months to rebuild, YYYY-MM')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        from cashflow.services import parse_period_label, period_label, previous_period
        from cashflow.services.budget.period_service import BudgetPeriodService

        if args.months:
            targets = [parse_period_label(m) for m in args.months]
        else:
            today = date.today()
            targets = [previous_period(today.year, today.month), (today.year, today.month)]

        svc = BudgetPeriodService()
        for year, month in targets:
            n = svc.rebuild_actual_spend(year, month)
            print(f'{period_label(year, month)}: rebuilt {n} budget periods')


if __name__ == '__main__':
    main()

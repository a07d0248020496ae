"""
Service for managing categories
"""
import logging
import re

from sqlalchemy import func

from cashflow.exceptions import InvalidInput, NotFound
from cashflow.models.category import Category
from cashflow.services import BaseService

logger = logging.getLogger(__name__)


MAX_ID_LENGTH = 64


def category_slug(name, suffix=None):
    """Stable id derived from the name: 'Health & Medical' -> 'cat-health-medical'

    Capped at MAX_ID_LENGTH; a suffix ('-2', '-3', ...) disambiguates names
    that reduce to the same slug.
    """
    slug = re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-') or 'category'
    tail = f'-{suffix}' if suffix else ''
    slug = slug[:MAX_ID_LENGTH - len('cat-') - len(tail)].rstrip('-')
    return f'cat-{slug}{tail}'


class CategoryService(BaseService):
    """Service for managing categories"""

    def list_categories(self, include_inactive=False):
        """Categories in display order"""
        query = Category.query
        if not include_inactive:
            query = query.filter(Category.is_active.is_(True))
        return query.order_by(Category.order.asc(), Category.name.asc()).all()

    def get_category(self, category_id):
        category = self.session.get(Category, category_id)
        if category is None:
            raise NotFound('Category', category_id)
        return category

    def create_category(self, name, icon, color, monthly_budget=0, alert_threshold=0.8,
                        parent_category_id=None, category_id=None, order=None):
        """Create a category; the id is derived from the name unless given"""
        if Category.query.filter(Category.name == name).first() is not None:
            raise InvalidInput(f"Category '{name}' already exists", field='name')
        if category_id is None:
            category_id = self._free_category_id(name)
        elif self.session.get(Category, category_id) is not None:
            raise InvalidInput(f"Category id '{category_id}' already exists", field='id')

        if parent_category_id is not None and self.session.get(Category, parent_category_id) is None:
            raise InvalidInput(f"Unknown parent category '{parent_category_id}'", field='parentCategoryId')

        if order is None:
            max_order = self.session.query(func.max(Category.order)).scalar()
            order = 0 if max_order is None else max_order + 1

        category = Category(
            id=category_id,
            name=name,
            icon=icon,
            color=color,
            monthly_budget=monthly_budget,
            alert_threshold=alert_threshold,
            parent_category_id=parent_category_id,
            order=order,
            is_active=True,
        )
        self.save(category)
        logger.info('Created category %s (budget %s)', category.id, monthly_budget)
        return category

    def _free_category_id(self, name):
        category_id = category_slug(name)
        suffix = 1
        while self.session.get(Category, category_id) is not None:
            suffix += 1
            category_id = category_slug(name, suffix)
        return category_id

    def update_budget(self, category_id, monthly_budget, alert_threshold):
        """Change budget and threshold; periods already opened keep their snapshot"""
        category = self.get_category(category_id)
        category.monthly_budget = monthly_budget
        category.alert_threshold = alert_threshold
        self.commit()
        logger.info('Updated budget of %s to %s (threshold %s)', category_id, monthly_budget, alert_threshold)
        return category

    def deactivate_category(self, category_id):
        """Soft delete: the row stays so transactions keep their category"""
        category = self.get_category(category_id)
        if category.is_active:
            category.is_active = False
            self.commit()
            logger.info('Deactivated category %s', category_id)
        return category

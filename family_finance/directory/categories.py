"""Category directory over the static taxonomy."""

from typing import Optional, Sequence

from family_finance.data.seed import MOCK_CATEGORIES, UNKNOWN_CATEGORY_NAME
from family_finance.models.transaction import Category


class CategoryDirectory:
    """Read-only access to the fixed category list."""

    def __init__(self, categories: Sequence[Category] = MOCK_CATEGORIES):
        self._categories = tuple(categories)
        self._by_id = {category.id: category for category in self._categories}

    def list_categories(self) -> list[Category]:
        """Get all categories in their defined order."""
        return list(self._categories)

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get a category by id, or None if it doesn't exist."""
        return self._by_id.get(category_id)

    def category_name_by_id(self, category_id: str) -> str:
        """Get a category's name, or the 'unknown' label."""
        category = self.get_category(category_id)
        return category.name if category else UNKNOWN_CATEGORY_NAME

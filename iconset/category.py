"""
Category Records for Icon Sets

Categories are stored in a CategoryStore keyed by a generated UUID. Icons keep
category ids rather than category objects, so renaming or removing a category
never leaves icons holding a stale record.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Category:
    """
    Category record.

    Count is a cached value. It is recalculated by IconSet.list_category()
    and should not be trusted between recalculations.
    """
    title: str
    count: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "count": self.count,
        }


class CategoryStore:
    """
    Container for categories of one icon set.

    Titles are not enforced to be unique, lookups by title return the first
    category that was added with that title.
    """

    def __init__(self):
        self._categories: Dict[str, Category] = {}

    def add(self, title: str) -> Category:
        """Create and register new category with zero count"""
        category = Category(title=title)
        self._categories[category.id] = category
        logger.debug(f"Added category '{title}' ({category.id})")
        return category

    def get(self, category_id: str) -> Optional[Category]:
        return self._categories.get(category_id)

    def find(self, title: str) -> Optional[Category]:
        """Find category by title"""
        for category in self._categories.values():
            if category.title == title:
                return category
        return None

    def remove(self, category_id: str) -> bool:
        category = self._categories.pop(category_id, None)
        if category is None:
            return False
        logger.debug(f"Removed category '{category.title}' ({category_id})")
        return True

    def titles(self) -> List[str]:
        return [category.title for category in self._categories.values()]

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories

    def __iter__(self) -> Iterator[Category]:
        # Copy values: callers may remove categories while iterating
        return iter(list(self._categories.values()))

    def __len__(self) -> int:
        return len(self._categories)

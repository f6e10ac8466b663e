from __future__ import annotations

from dataclasses import dataclass
from typing import List

from officetools.domain.errors import ToolInputError
from officetools.domain.registry import (
    ALL_CATEGORY,
    ToolDefinition,
    get_category,
    get_tools_by_category,
    search_tools,
)


@dataclass
class NavigationState:
    """Sidebar category plus header search box.

    A non-blank search query takes precedence over the selected category.
    """

    active_category: str = ALL_CATEGORY
    search_query: str = ''

    def select_category(self, category_id: str) -> None:
        if get_category(category_id) is None:
            raise ToolInputError(f'Unknown category: {category_id}')
        self.active_category = category_id
        self.search_query = ''

    def set_search(self, query: str) -> None:
        self.search_query = query or ''

    @property
    def is_searching(self) -> bool:
        return bool(self.search_query.strip())

    def visible_tools(self) -> List[ToolDefinition]:
        if self.is_searching:
            return search_tools(self.search_query)
        return get_tools_by_category(self.active_category)

    def title(self) -> str:
        if self.is_searching:
            return f'Search Results for "{self.search_query}"'
        category = get_category(self.active_category)
        return category.name if category else 'All Tools'

    def empty_message(self) -> str:
        if self.is_searching:
            return f'No tools match "{self.search_query}"'
        return 'No tools available in this category'

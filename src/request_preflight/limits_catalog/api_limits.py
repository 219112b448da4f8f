"""Platform request limits."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

MAX_RICH_TEXT_LENGTH = 2000
MAX_URL_LENGTH = 2000
MAX_EMAIL_LENGTH = 200
MAX_PHONE_LENGTH = 200

MAX_ARRAY_ELEMENTS = 100
MAX_MULTI_SELECT_OPTIONS = 100
MAX_RELATION_PAGES = 100
MAX_PEOPLE_USERS = 100


class LimitCategory(str, Enum):
    """Threshold categories enforced before a request is sent."""

    RICH_TEXT_CONTENT = "rich_text_content"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    MULTI_SELECT_OPTIONS = "multi_select_options"
    RELATION_PAGES = "relation_pages"
    PEOPLE_USERS = "people_users"
    BLOCK_CHILDREN = "block_children"


LIMITS: Mapping[LimitCategory, int] = MappingProxyType(
    {
        LimitCategory.RICH_TEXT_CONTENT: MAX_RICH_TEXT_LENGTH,
        LimitCategory.URL: MAX_URL_LENGTH,
        LimitCategory.EMAIL: MAX_EMAIL_LENGTH,
        LimitCategory.PHONE_NUMBER: MAX_PHONE_LENGTH,
        LimitCategory.MULTI_SELECT_OPTIONS: MAX_MULTI_SELECT_OPTIONS,
        LimitCategory.RELATION_PAGES: MAX_RELATION_PAGES,
        LimitCategory.PEOPLE_USERS: MAX_PEOPLE_USERS,
        LimitCategory.BLOCK_CHILDREN: MAX_ARRAY_ELEMENTS,
    }
)


def limit_for(category: LimitCategory) -> int:
    """Return the threshold for one limit category."""
    return LIMITS[category]

"""Limits catalog exports."""

from .api_limits import (
    LIMITS,
    MAX_ARRAY_ELEMENTS,
    MAX_EMAIL_LENGTH,
    MAX_MULTI_SELECT_OPTIONS,
    MAX_PEOPLE_USERS,
    MAX_PHONE_LENGTH,
    MAX_RELATION_PAGES,
    MAX_RICH_TEXT_LENGTH,
    MAX_URL_LENGTH,
    LimitCategory,
    limit_for,
)

__all__ = [
    "LIMITS",
    "LimitCategory",
    "limit_for",
    "MAX_RICH_TEXT_LENGTH",
    "MAX_URL_LENGTH",
    "MAX_EMAIL_LENGTH",
    "MAX_PHONE_LENGTH",
    "MAX_ARRAY_ELEMENTS",
    "MAX_MULTI_SELECT_OPTIONS",
    "MAX_RELATION_PAGES",
    "MAX_PEOPLE_USERS",
]

"""Field walking entities and field path helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from request_preflight.limits_catalog import LimitCategory


class FieldKind(str, Enum):
    """Shape of a checkable field found inside a request."""

    SCALAR = "scalar"
    RICH_TEXT = "rich_text"
    BOUNDED_LIST = "bounded_list"
    BLOCK_LIST = "block_list"


@dataclass(frozen=True)
class WalkedField:
    """One checkable field and the path that locates it inside its request."""

    path: str
    kind: FieldKind
    category: LimitCategory
    value: object


def member_path(parent: str, name: str) -> str:
    """Return the path of a named member below ``parent``."""
    return name if not parent else f"{parent}.{name}"


def index_path(parent: str, index: int) -> str:
    """Return the path of one element of the list at ``parent``."""
    return f"{parent}[{index}]"

"""Request traversal service.

Two traversals share one path vocabulary: ``walk_request`` enumerates every
checkable field in document order, and ``rewrite_rich_text`` rebuilds a request
with selected rich text lists replaced. A path produced by the first always
addresses the same value in the second.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import replace
from typing import Any, TypeVar

from request_preflight.limits_catalog import LimitCategory
from request_preflight.request_models import (
    BlockRequest,
    CreateDocumentRequest,
    CreateSchemaRequest,
    EmailValue,
    MultiSelectValue,
    PeopleValue,
    PhoneNumberValue,
    PropertyValue,
    RelationValue,
    RichTextList,
    RichTextValue,
    TitleValue,
    UpdateDocumentRequest,
    UrlValue,
)

from .walked_fields import FieldKind, WalkedField, index_path, member_path

DEFAULT_BLOCK_FIELD = "children"

RichTextRewrite = Callable[[str, RichTextList], RichTextList]
RequestT = TypeVar("RequestT", CreateDocumentRequest, UpdateDocumentRequest, CreateSchemaRequest)


def walk_request(request: Any) -> list[WalkedField]:
    """Enumerate every checkable field of a supported request value.

    Raw block sequences are walked under the ``children`` field name.

    Raises:
      TypeError: If the value is not a supported request shape.
    """
    fields: list[WalkedField] = []
    if isinstance(request, CreateDocumentRequest):
        _walk_properties(request.properties, fields)
        if request.children is not None:
            _walk_blocks(DEFAULT_BLOCK_FIELD, request.children, fields)
    elif isinstance(request, UpdateDocumentRequest):
        if request.properties is not None:
            _walk_properties(request.properties, fields)
    elif isinstance(request, CreateSchemaRequest):
        fields.append(_rich_text_field("title", request.title))
        if request.description is not None:
            fields.append(_rich_text_field("description", request.description))
    elif _is_block_sequence(request):
        _walk_blocks(DEFAULT_BLOCK_FIELD, request, fields)
    else:
        raise TypeError(f"Unsupported request type: {type(request).__name__}")
    return fields


def walk_block_array(field_name: str, blocks: Sequence[BlockRequest]) -> list[WalkedField]:
    """Enumerate the checkable fields of a raw block array rooted at ``field_name``."""
    fields: list[WalkedField] = []
    _walk_blocks(field_name, blocks, fields)
    return fields


def rewrite_rich_text(request: RequestT, rewrite: RichTextRewrite) -> RequestT:
    """Return ``request`` rebuilt with every rich text list passed through ``rewrite``.

    ``rewrite`` receives the path of each rich text list and its segments and
    returns the segments to keep. Returning the same tuple leaves that list and
    all unchanged ancestors as the original instances.
    """
    if isinstance(request, CreateDocumentRequest):
        properties = _rewrite_properties(request.properties, rewrite)
        children = request.children
        if children is not None:
            children = _rewrite_blocks(DEFAULT_BLOCK_FIELD, children, rewrite)
        if properties is request.properties and children is request.children:
            return request
        return replace(request, properties=properties, children=children)
    if isinstance(request, UpdateDocumentRequest):
        if request.properties is None:
            return request
        properties = _rewrite_properties(request.properties, rewrite)
        if properties is request.properties:
            return request
        return replace(request, properties=properties)
    if isinstance(request, CreateSchemaRequest):
        title = rewrite("title", request.title)
        description = request.description
        if description is not None:
            description = rewrite("description", description)
        if title is request.title and description is request.description:
            return request
        return replace(request, title=title, description=description)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


def _walk_properties(properties: Mapping[str, PropertyValue], fields: list[WalkedField]) -> None:
    for name, value in properties.items():
        field = _property_field(name, value)
        if field is not None:
            fields.append(field)


def _property_field(name: str, value: PropertyValue) -> WalkedField | None:
    # pylint: disable=too-many-return-statements
    if isinstance(value, TitleValue):
        return _rich_text_field(member_path(name, "title"), value.title)
    if isinstance(value, RichTextValue):
        return _rich_text_field(member_path(name, "richText"), value.rich_text)
    if isinstance(value, MultiSelectValue):
        return _bounded_list_field(
            member_path(name, "multiSelect"), LimitCategory.MULTI_SELECT_OPTIONS, value.multi_select
        )
    if isinstance(value, RelationValue):
        return _bounded_list_field(
            member_path(name, "relation"), LimitCategory.RELATION_PAGES, value.relation
        )
    if isinstance(value, PeopleValue):
        return _bounded_list_field(
            member_path(name, "people"), LimitCategory.PEOPLE_USERS, value.people
        )
    if isinstance(value, UrlValue):
        return _scalar_field(member_path(name, "url"), LimitCategory.URL, value.url)
    if isinstance(value, EmailValue):
        return _scalar_field(member_path(name, "email"), LimitCategory.EMAIL, value.email)
    if isinstance(value, PhoneNumberValue):
        return _scalar_field(
            member_path(name, "phoneNumber"), LimitCategory.PHONE_NUMBER, value.phone_number
        )
    return None


def _walk_blocks(
    field_name: str, blocks: Sequence[BlockRequest], fields: list[WalkedField]
) -> None:
    # Items are either ("list", path, blocks) or ("block", path, block); popping
    # from the end with reversed pushes yields document pre-order.
    stack: list[tuple[str, str, Any]] = [("list", field_name, tuple(blocks))]
    while stack:
        item_kind, path, item = stack.pop()
        if item_kind == "list":
            fields.append(
                WalkedField(
                    path=path,
                    kind=FieldKind.BLOCK_LIST,
                    category=LimitCategory.BLOCK_CHILDREN,
                    value=item,
                )
            )
            for index in range(len(item) - 1, -1, -1):
                stack.append(("block", _block_path(path, index, item[index]), item[index]))
            continue

        block: BlockRequest = item
        block_type = block.block_type
        if block_type.has_rich_text:
            fields.append(_rich_text_field(member_path(path, "richText"), block.rich_text))
        if block_type.has_caption:
            fields.append(_rich_text_field(member_path(path, "caption"), block.caption))
        if block_type.has_children and block.children is not None:
            stack.append(("list", member_path(path, "children"), tuple(block.children)))


def _rewrite_properties(
    properties: Mapping[str, PropertyValue], rewrite: RichTextRewrite
) -> Mapping[str, PropertyValue]:
    rebuilt: dict[str, PropertyValue] = {}
    changed = False
    for name, value in properties.items():
        new_value: PropertyValue = value
        if isinstance(value, TitleValue):
            title = rewrite(member_path(name, "title"), value.title)
            if title is not value.title:
                new_value = replace(value, title=title)
        elif isinstance(value, RichTextValue):
            rich_text = rewrite(member_path(name, "richText"), value.rich_text)
            if rich_text is not value.rich_text:
                new_value = replace(value, rich_text=rich_text)
        changed = changed or new_value is not value
        rebuilt[name] = new_value
    return rebuilt if changed else properties


def _rewrite_blocks(
    path: str, blocks: tuple[BlockRequest, ...], rewrite: RichTextRewrite
) -> tuple[BlockRequest, ...]:
    # Blocks are visited in pre-order so ``rewrite`` sees paths in walk order.
    # Each child is visited after its parent, so rebuilding in reverse visit
    # order finishes every children tuple before the block that holds it.
    visited: list[tuple[BlockRequest, dict[str, Any], list[int] | None]] = []
    top_level: list[int] = []
    stack = _pending_blocks(path, blocks, top_level)
    while stack:
        block_path, block, siblings = stack.pop()
        siblings.append(len(visited))
        updates = _rewrite_block_text(block_path, block, rewrite)
        child_positions: list[int] | None = None
        if block.block_type.has_children and block.children is not None:
            child_positions = []
            children_path = member_path(block_path, "children")
            stack.extend(_pending_blocks(children_path, block.children, child_positions))
        visited.append((block, updates, child_positions))

    rebuilt: dict[int, BlockRequest] = {}
    for position in range(len(visited) - 1, -1, -1):
        block, updates, child_positions = visited[position]
        if child_positions is not None and block.children is not None:
            children = _reuse_unchanged(block.children, [rebuilt[i] for i in child_positions])
            if children is not block.children:
                updates["children"] = children
        rebuilt[position] = replace(block, **updates) if updates else block
    return _reuse_unchanged(blocks, [rebuilt[i] for i in top_level])


def _pending_blocks(
    list_path: str, blocks: Sequence[BlockRequest], positions: list[int]
) -> list[tuple[str, BlockRequest, list[int]]]:
    # Reversed so that popping from the end yields document order.
    return [
        (_block_path(list_path, index, blocks[index]), blocks[index], positions)
        for index in range(len(blocks) - 1, -1, -1)
    ]


def _rewrite_block_text(path: str, block: BlockRequest, rewrite: RichTextRewrite) -> dict[str, Any]:
    block_type = block.block_type
    updates: dict[str, Any] = {}
    if block_type.has_rich_text:
        rich_text = rewrite(member_path(path, "richText"), block.rich_text)
        if rich_text is not block.rich_text:
            updates["rich_text"] = rich_text
    if block_type.has_caption:
        caption = rewrite(member_path(path, "caption"), block.caption)
        if caption is not block.caption:
            updates["caption"] = caption
    return updates


def _reuse_unchanged(
    original: tuple[BlockRequest, ...], rebuilt: list[BlockRequest]
) -> tuple[BlockRequest, ...]:
    if all(new is old for new, old in zip(rebuilt, original, strict=True)):
        return original
    return tuple(rebuilt)


def _block_path(list_path: str, index: int, block: BlockRequest) -> str:
    return member_path(index_path(list_path, index), block.block_type.path_name)


def _rich_text_field(path: str, segments: RichTextList) -> WalkedField:
    return WalkedField(
        path=path,
        kind=FieldKind.RICH_TEXT,
        category=LimitCategory.RICH_TEXT_CONTENT,
        value=tuple(segments),
    )


def _bounded_list_field(path: str, category: LimitCategory, items: Sequence[object]) -> WalkedField:
    return WalkedField(path=path, kind=FieldKind.BOUNDED_LIST, category=category, value=items)


def _scalar_field(path: str, category: LimitCategory, value: str | None) -> WalkedField | None:
    if value is None:
        return None
    return WalkedField(path=path, kind=FieldKind.SCALAR, category=category, value=value)


def _is_block_sequence(value: Any) -> bool:
    if isinstance(value, str | bytes) or not isinstance(value, Sequence):
        return False
    return all(isinstance(item, BlockRequest) for item in value)

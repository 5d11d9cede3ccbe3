"""
Field store operations.

The store is a plain tuple of ``Field`` values. Every operation returns a
new tuple (or the same one when nothing changes) and never reorders the
fields.
"""

import logging
from typing import Iterator, Optional, Tuple

from .state import Field

logger = logging.getLogger(__name__)

FieldStore = Tuple[Field, ...]


def find(fields: FieldStore, field_id: str) -> Optional[Field]:
    for f in fields:
        if f.id == field_id:
            return f
    return None


def append(fields: FieldStore, new_field: Field) -> FieldStore:
    """
    Add a field to the end of the store, unselected.

    Raises:
        ValueError: If a field with the same id already exists
    """
    if find(fields, new_field.id) is not None:
        raise ValueError(f"Duplicate field id: {new_field.id}")
    return fields + (new_field.with_selected(False),)


def select_only(fields: FieldStore, field_id: str) -> FieldStore:
    """
    Select one field and deselect every other, on every page.

    Unknown ids leave the store untouched.
    """
    if find(fields, field_id) is None:
        logger.debug("Ignoring selection of unknown field %s", field_id)
        return fields
    return tuple(f.with_selected(f.id == field_id) for f in fields)


def deselect_all(fields: FieldStore) -> FieldStore:
    if not has_selection(fields):
        return fields
    return tuple(f.with_selected(False) for f in fields)


def remove(fields: FieldStore, field_id: str) -> FieldStore:
    """Delete a field by id. Unknown ids leave the store untouched."""
    if find(fields, field_id) is None:
        logger.debug("Ignoring removal of unknown field %s", field_id)
        return fields
    return tuple(f for f in fields if f.id != field_id)


def fields_on_page(fields: FieldStore, page: int) -> Iterator[Field]:
    return (f for f in fields if f.page == page)


def selected_field(fields: FieldStore) -> Optional[Field]:
    for f in fields:
        if f.selected:
            return f
    return None


def has_selection(fields: FieldStore) -> bool:
    return selected_field(fields) is not None

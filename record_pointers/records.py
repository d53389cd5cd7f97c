"""
Record instances access
=======================

Records are plain Python values: mappings for objects and maps, mutable
sequences for arrays, and scalars. A nested object that is not a mapping is
accessed through attributes named by the field's
:attr:`~record_pointers.fields.base.BaseField.mapped_key`.

Shape mismatches between the record and its schema raise
:class:`~record_pointers.errors.DataError`.
"""
import numbers
from collections.abc import Mapping, MutableMapping, MutableSequence
from typing import Any

from record_pointers.errors import DataError
from record_pointers.helpers import MISSING, is_array, is_iterable_but_not_string

__all__ = (
    'get_property',
    'set_property',
    'delete_property',
    'get_element',
    'insert_element',
    'append_element',
    'replace_element',
    'delete_element',
    'get_entry',
    'set_entry',
    'delete_entry',
)


def _expect(condition: bool, what: str, pointer) -> None:
    # The shape checked is the one of the value at the parent pointer
    if not condition:
        raise DataError(detail=f'Expected {what} at "{pointer.parent}".', pointer=pointer)


# Object properties
# -----------------

def _is_object(obj: Any) -> bool:
    if isinstance(obj, Mapping):
        return True
    return obj is not None and not (
        isinstance(obj, (str, bytes, numbers.Number)) or
        is_iterable_but_not_string(obj)
    )


def _is_mutable_object(obj: Any) -> bool:
    # Read-only mappings do not take attributes either
    return isinstance(obj, MutableMapping) or (
        not isinstance(obj, Mapping) and _is_object(obj)
    )


def get_property(obj: Any, field, pointer) -> Any:
    """Return the property value, ``None`` if it is not set."""
    _expect(_is_object(obj), 'an object', pointer)
    if isinstance(obj, Mapping):
        return obj.get(field.name)
    return getattr(obj, field.mapped_key, None)


def set_property(obj: Any, field, value: Any, pointer) -> None:
    _expect(_is_mutable_object(obj), 'an object', pointer)
    if isinstance(obj, MutableMapping):
        obj[field.name] = value
    else:
        setattr(obj, field.mapped_key, value)


def delete_property(obj: Any, field, pointer) -> None:
    """Erase the property value. Attribute-style objects get ``None``."""
    _expect(_is_mutable_object(obj), 'an object', pointer)
    if isinstance(obj, MutableMapping):
        obj.pop(field.name, None)
    else:
        setattr(obj, field.mapped_key, None)


# Array elements
# --------------

def get_element(array: Any, index: int, pointer) -> Any:
    """Return the array element, :data:`MISSING` if out of bounds."""
    _expect(is_array(array), 'an array', pointer)
    return array[index] if index < len(array) else MISSING


def _check_bounds(array: Any, index: int, pointer) -> None:
    _expect(isinstance(array, MutableSequence), 'an array', pointer)
    if index >= len(array):
        raise DataError(
            detail=f'Array index is out of bounds at "{pointer}".',
            pointer=pointer,
        )


def insert_element(array: Any, index: int, value: Any, pointer) -> None:
    """Insert the value shifting the elements at and after *index* right."""
    _check_bounds(array, index, pointer)
    array.insert(index, value)


def append_element(array: Any, value: Any, pointer) -> None:
    _expect(isinstance(array, MutableSequence), 'an array', pointer)
    array.append(value)


def replace_element(array: Any, index: int, value: Any, pointer) -> None:
    _check_bounds(array, index, pointer)
    array[index] = value


def delete_element(array: Any, index: int, pointer) -> None:
    """Delete the element shifting the elements after *index* left."""
    _check_bounds(array, index, pointer)
    del array[index]


# Map entries
# -----------

def get_entry(mapping: Any, key: str, pointer) -> Any:
    """Return the map entry value, :data:`MISSING` if there is no such key."""
    _expect(isinstance(mapping, Mapping), 'a map', pointer)
    return mapping.get(key, MISSING)


def set_entry(mapping: Any, key: str, value: Any, pointer) -> None:
    _expect(isinstance(mapping, MutableMapping), 'a map', pointer)
    mapping[key] = value


def delete_entry(mapping: Any, key: str, pointer) -> None:
    _expect(isinstance(mapping, MutableMapping), 'a map', pointer)
    mapping.pop(key, None)

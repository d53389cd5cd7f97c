"""
Record element pointers
=======================

Implementation of `RFC 6901 <https://tools.ietf.org/html/rfc6901>`_ JSON
Pointer bound to a record type.

A pointer is parsed once against the record type and then used to get,
add, replace and remove values in any number of records of that type:

.. code-block:: python3

    >>> pointer = parse(Order, '/items/0/quantity')
    >>> pointer.get_value({'items': [{'quantity': 2}]})
    2

Under a polymorphic object a pointer token may be prefixed with a subtype
name to address a property specific to that subtype, e.g.
``/events/0/OPENED:byWho``.
"""
from typing import Any, Callable, Optional, Tuple, Union

import attr
import trafaret as t
from jsonpointer import JsonPointerException

from record_pointers import records
from record_pointers.abc.field import FieldABC
from record_pointers.abc.schema import ContainerABC
from record_pointers.common import DASH, SUBTYPE_SEPARATOR, ValueType, logger
from record_pointers.errors import DataError, PointerSyntaxError, UsageError
from record_pointers.fields.trafarets import ARRAY_INDEX, ARRAY_INDEX_NO_DASH
from record_pointers.helpers import MISSING
from record_pointers.jsonpointer import JSONPointer, escape, split_tokens

__all__ = (
    'RecordElementPointer',
    'parse',
)

#: Trace callback, called with the prefix pointer, its value and depth
TraceCallback = Callable[['RecordElementPointer', Any, int], Any]

ElementIndex = Union[int, str]


@attr.s(frozen=True, slots=True, repr=False)
class RecordElementPointer:
    """
    Record element pointer.

    Pointers are immutable. Each pointer references its parent pointer,
    the root pointer has no parent and addresses the record itself.

    Instances are created by :func:`parse` and
    :meth:`create_child_pointer`, not directly.
    """

    #: Parent pointer, or ``None`` for the root pointer
    parent: Optional['RecordElementPointer'] = attr.ib(eq=False)

    #: Descriptor of the addressed property, ``None`` for the root pointer
    property_descriptor: Optional[FieldABC] = attr.ib(eq=False)

    #: Dotted path of the addressed property, empty for the root pointer
    property_path: str = attr.ib()

    #: ``True`` if the pointer addresses an array or map element
    is_collection_element: bool = attr.ib(eq=False)

    #: Array index (``int`` or :data:`DASH`) or map key of the element
    element_index: Optional[ElementIndex] = attr.ib(eq=False)

    #: Container of properties below the pointer, used to parse children
    children_container: Optional[ContainerABC] = attr.ib(eq=False)

    #: RFC 6901 string representation
    pointer_string: str = attr.ib()

    @classmethod
    def _root(cls, container: ContainerABC) -> 'RecordElementPointer':
        return cls(None, None, '', False, None, container, '')

    def __str__(self) -> str:
        return self.pointer_string

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.pointer_string!r}>'

    def __truediv__(self, token: Union[str, int]) -> 'RecordElementPointer':
        return self.create_child_pointer(str(token))

    # Parsing
    # -------

    def _child(self, token: str, descriptor: FieldABC, path: str,
               index: Optional[ElementIndex] = None,
               children: Optional[ContainerABC] = None,
               element: bool = False) -> 'RecordElementPointer':
        return RecordElementPointer(
            self, descriptor, path, element, index, children,
            f'{self.pointer_string}/{escape(token)}',
        )

    def _property_child(self, token: str, descriptor: FieldABC,
                        nested: bool = True) -> 'RecordElementPointer':
        return self._child(
            token, descriptor,
            descriptor.container.nested_path + descriptor.name,
            children=descriptor.nested_properties if nested else None,
        )

    def _element_child(self, token: str, index: ElementIndex) -> 'RecordElementPointer':
        # Elements share the nested properties of the collection
        return self._child(
            token, self.property_descriptor, self.property_path,
            index=index, children=self.children_container, element=True,
        )

    def _create_child_pointer(self, token: str, full_pointer: str,
                              no_dash: bool) -> 'RecordElementPointer':
        root = self.is_root()
        descriptor = self.property_descriptor

        if not root and self.is_collection_element:
            if descriptor.is_array and self.element_index == DASH:
                raise PointerSyntaxError(full_pointer, 'unexpected dash for an array index.')

        elif not root and descriptor.is_array:
            trafaret = ARRAY_INDEX_NO_DASH if no_dash else ARRAY_INDEX
            try:
                index = trafaret.check(token)
            except t.DataError as exc:
                raise PointerSyntaxError(full_pointer, f'{exc.error}.') from exc
            return self._element_child(token, index)

        elif not root and descriptor.is_map:
            return self._element_child(token, token)

        # object property
        if not root and descriptor.scalar_value_type is not ValueType.OBJECT:
            raise PointerSyntaxError(
                full_pointer, f'{self.property_path} does not have nested elements.'
            )

        container = self.children_container
        if container.is_polymorphic:
            if token == container.type_property_name:
                return self._property_child(
                    token, container.get_property_descriptor(token), nested=False
                )

            subtype, separator, name = token.partition(SUBTYPE_SEPARATOR)
            if subtype and separator and name and container.has_subtype(subtype):
                subtype_properties = container.get_subtype_descriptor(subtype).nested_properties
                if not subtype_properties.has_property(name):
                    raise PointerSyntaxError(full_pointer, 'no such property.')
                return self._property_child(
                    token, subtype_properties.get_property_descriptor(name)
                )

        if not container.has_property(token):
            raise PointerSyntaxError(full_pointer, 'no such property.')
        return self._property_child(token, container.get_property_descriptor(token))

    def create_child_pointer(self, token: str, no_dash: bool = False) -> 'RecordElementPointer':
        """
        Create immediate child pointer of this pointer. This is faster than
        parsing the pointer from string notation as it does not have to
        re-parse the prefix.

        :arg str token:
            Unescaped token to append to the pointer (without the slash).
        :arg bool no_dash:
            Disallow dash for an array index.
        :raises PointerSyntaxError: If resulting pointer would be invalid.
        """
        full_pointer = f'{self.pointer_string}/{escape(token)}'
        return self._create_child_pointer(token, full_pointer, no_dash)

    # Chain
    # -----

    def is_root(self) -> bool:
        return self.parent is None

    def is_child_of(self, other: 'RecordElementPointer') -> bool:
        """
        Tell if this pointer points to a child of the *other* pointer
        (that is the other pointer is a proper prefix of this pointer).
        """
        return self.pointer_string.startswith(f'{other}/')

    @property
    def chain(self) -> Tuple['RecordElementPointer', ...]:
        """Pointers from the root pointer to this one, inclusive."""
        chain = []
        pointer: Optional[RecordElementPointer] = self
        while pointer is not None:
            chain.append(pointer)
            pointer = pointer.parent
        return tuple(reversed(chain))

    @property
    def json_pointer(self) -> JSONPointer:
        """Schema independent JSON pointer for the same location."""
        return JSONPointer(self.pointer_string)

    @property
    def is_dash(self) -> bool:
        return (
            self.is_collection_element and
            self.property_descriptor.is_array and
            self.element_index == DASH
        )

    # Navigation
    # ----------

    def _get_immediate_value(self, obj: Any, depth: int) -> Any:
        """
        Get value at this pointer given the value at the parent pointer.

        :arg obj: The value at the parent pointer
        :arg int depth: Number of pointers in the chain after this one
        :raises DataError: If the value cannot be reached
        """
        if self.is_root():
            return obj

        descriptor = self.property_descriptor
        if self.is_collection_element:
            if descriptor.is_array:
                if self.element_index == DASH:
                    return MISSING
                value = records.get_element(obj, self.element_index, self)
            else:
                value = records.get_entry(obj, self.element_index, self)
            if depth > 0 and (value is None or value is MISSING):
                raise DataError(detail=f'No property value at "{self}".', pointer=self)
            return value

        value = records.get_property(obj, descriptor, self)
        if value is None and depth > 0:
            # Only the collection holding the addressed element may be unset
            if depth == 1 and descriptor.is_array:
                return []
            if depth == 1 and descriptor.is_map:
                return {}
            raise DataError(detail=f'No property value at "{self}".', pointer=self)
        return value

    def _locate(self, record: Any) -> Tuple[Any, Any, Any]:
        """Return the values at the grandparent, parent and this pointer."""
        chain = self.chain
        grandparent_value, parent_value, value = None, None, record
        for position, pointer in enumerate(chain):
            grandparent_value, parent_value, value = (
                parent_value, value,
                pointer._get_immediate_value(value, len(chain) - position - 1),
            )
        return grandparent_value, parent_value, value

    def get_value(self, record: Any, trace: Optional[TraceCallback] = None) -> Any:
        """
        Get value of the property, at which the pointer points.

        :arg record:
            The record, from which to get the value.
        :arg trace:
            Optional callback called for every prefix pointer from the root
            pointer to this one with the prefix pointer, the value at it and
            the number of pointers remaining after it (zero for this one).
        :returns:
            The value, or ``None`` if the property is not set. For absent
            array and map elements returns :data:`~record_pointers.helpers.MISSING`.
        :raises DataError: If the property cannot be reached.
        """
        chain = self.chain
        value = record
        for position, pointer in enumerate(chain):
            depth = len(chain) - position - 1
            value = pointer._get_immediate_value(value, depth)
            if trace is not None:
                trace(pointer, value, depth)
        return value

    # Mutation
    # --------

    def add_value(self, record: Any, value: Any) -> Any:
        """
        Add value at the pointer. For an array index the value is inserted
        before the element at the index, for the dash it is appended. In
        all other cases any existing value is replaced.

        .. note::

            The value is not validated beyond ``None`` and
            :data:`~record_pointers.helpers.MISSING` checks.

        :returns: The previous value as :meth:`get_value` would return it.
        :raises UsageError: For the root pointer or an inappropriate value.
        :raises DataError: If the property cannot be reached.
        """
        return self._set_value(record, value, insert=True)

    def replace_value(self, record: Any, value: Any) -> Any:
        """
        Replace value at the pointer. Not allowed for the dash.

        :returns: The previous value as :meth:`get_value` would return it.
        :raises UsageError:
            For the root pointer, the dash or an inappropriate value.
        :raises DataError: If the property cannot be reached.
        """
        return self._set_value(record, value, insert=False)

    def _set_value(self, record: Any, value: Any, insert: bool) -> Any:
        if self.is_root():
            raise UsageError(detail='May not replace the whole record.', pointer=self)

        if value is MISSING:
            raise UsageError(
                detail='May not use MISSING as a value, remove the value instead.',
                pointer=self,
            )

        descriptor = self.property_descriptor
        if (value is None and self.is_collection_element and
                descriptor.scalar_value_type is ValueType.OBJECT):
            raise UsageError(detail='May not use None as a value.', pointer=self)

        if self.is_dash and not insert:
            raise UsageError(detail='May not replace dash index.', pointer=self)

        holder, obj, prior = self._locate(record)
        if self.is_collection_element and descriptor.is_array:
            if self.element_index == DASH:
                records.append_element(obj, value, self)
            elif insert:
                records.insert_element(obj, self.element_index, value, self)
            else:
                records.replace_element(obj, self.element_index, value, self)
        elif self.is_collection_element:
            records.set_entry(obj, self.element_index, value, self)
        else:
            records.set_property(obj, descriptor, value, self)

        if self.is_collection_element:
            # Store the collection created for an unset property after the
            # element write succeeded
            collection = self.parent
            if records.get_property(holder, collection.property_descriptor, collection) is None:
                records.set_property(holder, collection.property_descriptor, obj, collection)

        logger.debug('%s value at "%s".', 'Added' if insert else 'Replaced', self)
        return prior

    def remove_value(self, record: Any) -> Any:
        """
        Erase value at the pointer. For an array index the element is
        deleted from the array. Not allowed for the dash.

        :returns: The previous value as :meth:`get_value` would return it.
        :raises UsageError: For the root pointer or the dash.
        :raises DataError: If the property cannot be reached.
        """
        if self.is_root():
            raise UsageError(detail='May not delete the whole record.', pointer=self)

        if self.is_dash:
            raise UsageError(detail='May not delete dash index.', pointer=self)

        _, obj, prior = self._locate(record)
        descriptor = self.property_descriptor
        if self.is_collection_element and descriptor.is_array:
            records.delete_element(obj, self.element_index, self)
        elif self.is_collection_element:
            records.delete_entry(obj, self.element_index, self)
        else:
            records.delete_property(obj, descriptor, self)

        logger.debug('Removed value at "%s".', self)
        return prior


def _get_container(record_type: Any) -> ContainerABC:
    if isinstance(record_type, ContainerABC):
        return record_type
    if isinstance(record_type, str):
        from record_pointers.registry import registry
        return registry.get_record_type(record_type)
    if hasattr(record_type, 'get_container'):
        return record_type.get_container()
    raise TypeError(f'{record_type!r} is not a record type.')


def parse(record_type: Any, pointer: str, no_dash: bool = False) -> RecordElementPointer:
    """
    Parse the record element pointer.

    :arg record_type:
        Schema class, properties container or registered record type name.
    :arg str pointer:
        Pointer string in RFC 6901 format, empty string for the root pointer.
    :arg bool no_dash:
        Disallow dash at the end of the pointer to an array element.
    :raises PointerSyntaxError: If the pointer is invalid.
    """
    container = _get_container(record_type)

    if not isinstance(pointer, str) or (pointer and not pointer.startswith('/')):
        raise PointerSyntaxError(pointer, 'invalid pointer type or syntax.')

    try:
        tokens = split_tokens(pointer)
    except JsonPointerException as exc:
        raise PointerSyntaxError(pointer, f'{exc}.') from exc

    result = RecordElementPointer._root(container)
    for token in tokens:
        result = result._create_child_pointer(token, pointer, no_dash)

    logger.debug('Parsed record element pointer "%s" at %r.', pointer, container)
    return result

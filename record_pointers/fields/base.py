"""
Base fields
===========

This module contains the definition for all basic fields. A field describes
a property of a record type and is what a record element pointer token is
resolved to.

You should only work with the following fields directly:

*   :class:`Attribute`

    A scalar property (string, number, boolean, datetime).

*   :class:`Nested`

    A nested object described by another schema.

*   :class:`ArrayOf`, :class:`MapOf`

    An array or a map of scalars or of nested objects.

Fields declared on a schema class are templates. Every properties container
binds its own copies (see :meth:`BaseField.bind`), so the same schema may be
nested at several places of a record type.
"""
import copy
import inspect
from typing import Any, Optional, Type, Union

from record_pointers.abc.field import FieldABC
from record_pointers.common import ALLOWED_MEMBER_NAME_REGEX, Collection, ValueType
from record_pointers.helpers import MISSING

__all__ = (
    'BaseField',
    'Attribute',
    'Nested',
    'ArrayOf',
    'MapOf',
)


class BaseField(FieldABC):
    """
    This class describes the base for all fields defined on a schema.

    :arg str name:
        The name of the property in the record and in pointers. If not
        explicitly given, it's the inflected :attr:`key`.
    :arg str mapped_key:
        The name of the associated attribute when a record object is not
        a mapping. If not explicitly given, it's the same as :attr:`key`.
    :arg ValueType value_type:
        Scalar value type of the property.
    """

    #: Collection kind of the field, if any
    collection: Optional[Collection] = None

    def __init__(
        self,
        *,
        name: str = '',
        mapped_key: str = '',
        value_type: ValueType = ValueType.STRING,
    ) -> None:
        #: The name of this field on the schema it has been defined on.
        self._key: str = ''

        self._name = ''
        self.name = name
        self._mapped_key = mapped_key

        assert isinstance(value_type, ValueType)
        self._value_type = value_type

        self._container = None
        self._nested_path: Optional[str] = None
        self._nested: Any = MISSING

    def __repr__(self) -> str:
        path = self._container.nested_path if self._container is not None else ''
        return f'<{self.__class__.__name__} {path}{self._name or self._key}>'

    @property
    def key(self) -> str:
        return self._key

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value and not ALLOWED_MEMBER_NAME_REGEX.fullmatch(value):
            raise ValueError(f"Field name '{value}' is not allowed.")
        self._name = value

    @property
    def mapped_key(self) -> str:
        return self._mapped_key

    @mapped_key.setter
    def mapped_key(self, value: str) -> None:
        self._mapped_key = value

    @property
    def scalar_value_type(self) -> ValueType:
        return self._value_type

    @property
    def is_array(self) -> bool:
        return self.collection is Collection.ARRAY

    @property
    def is_map(self) -> bool:
        return self.collection is Collection.MAP

    @property
    def container(self):
        return self._container

    @property
    def nested_path(self) -> str:
        """Path prefix of the nested properties, e.g. ``'items.'``."""
        if self._nested_path is not None:
            return self._nested_path
        prefix = self._container.nested_path if self._container is not None else ''
        return f'{prefix}{self._name}.'

    @property
    def nested_properties(self):
        # Built on first access, recursive schemas stay finite
        if self._nested is MISSING:
            self._nested = self.make_container(self.nested_path)
        return self._nested

    def make_container(self, nested_path: str):
        """
        Create the container of the nested object properties.

        Returns ``None`` for fields whose values are not objects.
        """
        return None

    def bind(self, container, nested_path: Optional[str] = None) -> 'BaseField':
        field = copy.copy(self)
        field._container = container
        field._nested_path = nested_path
        field._nested = MISSING
        return field


class Attribute(BaseField):
    """
    A scalar property.

    .. code-block:: python3

        class Item(BaseSchema):
            product = Attribute()
            quantity = Attribute(value_type=ValueType.NUMBER)
    """

    def __init__(self, value_type: ValueType = ValueType.STRING, **kwargs: Any) -> None:
        if value_type is ValueType.OBJECT:
            raise ValueError('Use Nested field for object properties.')
        super().__init__(value_type=value_type, **kwargs)


class Nested(BaseField):
    """
    A nested object property.

    .. code-block:: python3

        class Order(BaseSchema):
            customer = Nested(Customer)
            parent = Nested('Order')

    :arg schema:
        The schema class of the nested object, or the name of a registered
        record type, which allows self-referential schemas.
    """

    def __init__(self, schema: Union[str, Type[Any]], **kwargs: Any) -> None:
        kwargs['value_type'] = ValueType.OBJECT
        super().__init__(**kwargs)
        self._schema = schema

    @property
    def schema(self) -> Type[Any]:
        """The schema class of the nested object."""
        if isinstance(self._schema, str):
            from record_pointers.registry import registry
            return registry[self._schema]
        return self._schema

    def make_container(self, nested_path: str):
        return self.schema.build_container(nested_path)


class _CollectionField(BaseField):
    """
    Base class of arrays and maps.

    :arg item:
        The field describing the collection elements. A schema class is
        accepted as a shortcut for :class:`Nested`. Defaults to a string
        :class:`Attribute`.
    """

    def __init__(self, item: Any = None, **kwargs: Any) -> None:
        if item is None:
            item = Attribute()
        elif inspect.isclass(item) or isinstance(item, str):
            item = Nested(item)

        if not isinstance(item, BaseField) or item.collection is not None:
            raise TypeError('Collection elements must be an Attribute or a Nested field.')

        kwargs['value_type'] = item.scalar_value_type
        super().__init__(**kwargs)
        self.item = item

    def make_container(self, nested_path: str):
        # Elements share the nested object schema of the collection
        return self.item.make_container(nested_path)


class ArrayOf(_CollectionField):
    """
    An array property.

    .. code-block:: python3

        class Order(BaseSchema):
            items = ArrayOf(Item)
            tags = ArrayOf(Attribute())
    """

    collection = Collection.ARRAY


class MapOf(_CollectionField):
    """
    A map property with arbitrary string keys.

    .. code-block:: python3

        class Order(BaseSchema):
            notes = MapOf(Attribute())
    """

    collection = Collection.MAP

"""
Base schema
===========

This module contains the base schema, which describes a record type by
means of :mod:`fields <record_pointers.fields.base>`, and the properties
containers record element pointers are resolved against.

.. code-block:: python3

    class Item(BaseSchema):
        product = Attribute()
        quantity = Attribute(ValueType.NUMBER)

    class Order(BaseSchema):
        order_date = Attribute(ValueType.DATETIME)
        items = ArrayOf(Item)

    pointer = Order.parse('/items/0/quantity')
"""
import abc
import copy
import functools
import inspect
from collections import OrderedDict
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, Type

import inflection

from record_pointers.abc.field import FieldABC
from record_pointers.abc.schema import ContainerABC, PolymorphicContainerABC
from record_pointers.common import ALLOWED_MEMBER_NAME_REGEX
from record_pointers.fields.base import Attribute, BaseField, Nested
from record_pointers.registry import registry

__all__ = (
    'BaseSchema',
    'SchemaOpts',
    'PropertiesContainer',
    'PolymorphicContainer',
)


def _get_fields(attrs: Dict[str, Any], field_class: Type[FieldABC], pop: bool = False) -> List[Tuple[str, Any]]:
    """
    Get fields from a class.

    :param attrs: Mapping of class attributes
    :param type field_class: Base field class
    :param bool pop: Remove matching fields
    """
    fields = [
        (field_name, field_value)
        for field_name, field_value in attrs.items()
        if isinstance(field_value, field_class)
    ]
    if pop:
        for field_name, _ in fields:
            del attrs[field_name]
    return fields


def _get_fields_by_mro(klass: Type['BaseSchema'], field_class: Type[FieldABC]) -> List[Tuple[str, Any]]:
    """
    Collect fields from a class, following its method resolution order. The
    class itself is excluded from the search; only its parents are checked. Get
    fields from ``_declared_fields`` if available, else use ``__dict__``.

    :param type klass: Class whose fields to retrieve
    :param type field_class: Base field class
    """
    mro = inspect.getmro(klass)
    # Loop over mro in reverse to maintain correct order of fields
    return sum(
        (
            _get_fields(
                getattr(base, '_declared_fields', base.__dict__),
                field_class,
            )
            for base in mro[:0:-1]
        ),
        [],
    )


class SchemaMeta(abc.ABCMeta):
    def __new__(mcs, name: str, bases: Tuple[type, ...], attrs: Dict[str, Any]) -> 'SchemaMeta':
        """
        Detects all fields and wires everything up. These class attributes are
        defined here:

        *   *opts*

            The :class:`SchemaOpts` read from the inner ``Options`` class.

        *   *_declared_fields*

            Maps the key (schema property name) to the associated
            :class:`~record_pointers.fields.base.BaseField`.

        Every schema class except :class:`BaseSchema` itself is added to the
        :data:`~record_pointers.registry.registry`.

        :arg str name:
            The name of the schema class
        :arg tuple bases:
            The direct bases of the schema class
        :arg dict attrs:
            A dictionary with all properties defined on the schema class
            (fields, methods, ...)
        """
        cls_fields = _get_fields(attrs, FieldABC, pop=True)
        own_options = 'Options' in attrs
        klass = super(SchemaMeta, mcs).__new__(mcs, name, bases, attrs)
        inherited_fields = _get_fields_by_mro(klass, FieldABC)

        options = getattr(klass, 'Options')
        klass.opts = klass.OPTIONS_CLASS(options, name, own_options)

        declared_fields: Dict[str, BaseField] = OrderedDict()
        names: Dict[str, str] = {}
        for key, field in inherited_fields + cls_fields:
            field = copy.copy(field)
            field._key = key
            field.name = (
                field.name or (klass.opts.inflect(key)
                               if callable(klass.opts.inflect)
                               else key)
            )
            field.mapped_key = field.mapped_key or key
            if names.get(field.name, key) != key:
                raise ValueError(
                    f"Fields '{names[field.name]}' and '{key}' of {name} "
                    f"have the same name '{field.name}'."
                )
            names[field.name] = key
            declared_fields[key] = field

        if klass.opts.subtypes:
            if klass.opts.type_property in names:
                raise ValueError(
                    f"Type property '{klass.opts.type_property}' of {name} "
                    f"clashes with a declared field."
                )
            for subtype in klass.opts.subtypes:
                if not ALLOWED_MEMBER_NAME_REGEX.fullmatch(subtype):
                    raise ValueError(f"Subtype name '{subtype}' is not allowed.")

        klass._declared_fields = MappingProxyType(declared_fields)

        if any(isinstance(base, SchemaMeta) for base in bases):
            registry.register(klass)
        return klass


class SchemaOpts(object):
    """class Options for the :class:`BaseSchema`. Defines defaults."""

    def __init__(self, options, schema_name: str, own: bool = True):
        self.record_type = (getattr(options, 'record_type', None) if own else None) or schema_name
        self.inflect = getattr(options, 'inflect', functools.partial(inflection.camelize, uppercase_first_letter=False))
        self.subtypes = MappingProxyType(OrderedDict(getattr(options, 'subtypes', None) or ()))
        self.type_property = getattr(options, 'type_property', 'type')


class BaseSchema(metaclass=SchemaMeta):
    """
    Record type description.

    Subclasses declare the record properties as fields. A schema with
    ``subtypes`` in its ``Options`` describes a polymorphic object:

    .. code-block:: python3

        class Event(BaseSchema):
            class Options:
                type_property = 'eventType'
                subtypes = {'OPENED': OpenedEvent, 'CLOSED': ClosedEvent}

            happened_on = Attribute(ValueType.DATETIME)
    """

    OPTIONS_CLASS = SchemaOpts

    class Options:
        pass

    @classmethod
    def get_field(cls, key: str) -> BaseField:
        """
        :raises KeyError: If the schema has no field with the *key*.
        """
        return cls._declared_fields[key]

    @classmethod
    def build_container(cls, nested_path: str = '') -> ContainerABC:
        """Create a properties container for the schema at *nested_path*."""
        if cls.opts.subtypes:
            return PolymorphicContainer(cls, nested_path)
        return PropertiesContainer(cls, nested_path)

    @classmethod
    def get_container(cls) -> ContainerABC:
        """Return the root properties container of the record type."""
        container = cls.__dict__.get('_root_container')
        if container is None:
            container = cls.build_container()
            cls._root_container = container
        return container

    @classmethod
    def parse(cls, pointer: str, no_dash: bool = False):
        """
        Parse record element pointer for the record type.

        :seealso: :func:`record_pointers.pointer.parse`
        """
        from record_pointers.pointer import parse
        return parse(cls.get_container(), pointer, no_dash=no_dash)


class PropertiesContainer(ContainerABC):
    """
    Properties of a record type or of a nested object at some path of it.
    """

    def __init__(self, schema: Type[BaseSchema], nested_path: str = '') -> None:
        self.schema = schema
        self._nested_path = nested_path
        self._properties: Dict[str, BaseField] = OrderedDict(
            (field.name, field.bind(self))
            for field in schema._declared_fields.values()
        )

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.record_type!r} at {self._nested_path!r}>'

    @property
    def record_type(self) -> str:
        return self.schema.opts.record_type

    @property
    def nested_path(self) -> str:
        return self._nested_path

    @property
    def property_names(self) -> Tuple[str, ...]:
        return tuple(self._properties)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property_descriptor(self, name: str) -> BaseField:
        return self._properties[name]


class PolymorphicContainer(PropertiesContainer, PolymorphicContainerABC):
    """
    Properties of a polymorphic object.

    In addition to the properties common to all subtypes the container has
    the type property, and a descriptor for each subtype, whose nested
    properties are the subtype specific ones (at ``<nested_path><subtype>.``).
    """

    def __init__(self, schema: Type[BaseSchema], nested_path: str = '') -> None:
        super().__init__(schema, nested_path)

        type_property = schema.opts.type_property
        type_field = Attribute(name=type_property, mapped_key=type_property)
        type_field._key = type_property
        self._properties[type_property] = type_field.bind(self)

        self._subtypes: Dict[str, BaseField] = OrderedDict()
        for subtype, subtype_schema in schema.opts.subtypes.items():
            field = Nested(subtype_schema, name=subtype, mapped_key=subtype)
            field._key = subtype
            self._subtypes[subtype] = field.bind(self)

    @property
    def type_property_name(self) -> str:
        return self.schema.opts.type_property

    @property
    def subtypes(self) -> Mapping[str, BaseField]:
        return MappingProxyType(self._subtypes)

    def has_subtype(self, name: str) -> bool:
        return name in self._subtypes

    def get_subtype_descriptor(self, name: str) -> BaseField:
        return self._subtypes[name]

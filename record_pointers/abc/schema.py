"""
Properties container abstract base classes
==========================================
"""

import abc

from .field import FieldABC


class ContainerABC(abc.ABC):
    """
    A set of properties of a record type or of a nested object.
    """

    #: Tells whether the objects described by the container are polymorphic
    is_polymorphic = False

    @property
    @abc.abstractmethod
    def nested_path(self) -> str:
        """
        Dotted path prefix of the properties in the container, empty for
        the record type itself (e.g. ``'items.'``).
        """
        raise NotImplementedError

    @abc.abstractmethod
    def has_property(self, name: str) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def get_property_descriptor(self, name: str) -> FieldABC:
        """
        :raises KeyError: If there is no such property.
        """
        raise NotImplementedError


class PolymorphicContainerABC(ContainerABC):
    """
    Container of a polymorphic object, whose shape depends on the value of
    the type (discriminator) property.

    Each subtype is represented by a descriptor with value type
    :attr:`~record_pointers.common.ValueType.OBJECT`, whose nested
    properties are the properties specific to the subtype.
    """

    is_polymorphic = True

    @property
    @abc.abstractmethod
    def type_property_name(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def has_subtype(self, name: str) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def get_subtype_descriptor(self, name: str) -> FieldABC:
        """
        :raises KeyError: If there is no such subtype.
        """
        raise NotImplementedError

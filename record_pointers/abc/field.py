"""
Field abstract base class
=========================
"""

import abc
from typing import Optional

from ..common import ValueType


class FieldABC(abc.ABC):
    """
    Property descriptor as seen by the record element pointers.
    """

    @property
    @abc.abstractmethod
    def key(self) -> str:
        raise NotImplementedError

    @property  # type: ignore
    @abc.abstractmethod
    def name(self) -> str:
        """Property name, also the pointer token of the property."""
        raise NotImplementedError

    @name.setter  # type: ignore
    @abc.abstractmethod
    def name(self, value: str) -> None:
        pass

    @property  # type: ignore
    @abc.abstractmethod
    def mapped_key(self) -> str:
        raise NotImplementedError

    @mapped_key.setter  # type: ignore
    @abc.abstractmethod
    def mapped_key(self, value: str) -> None:
        pass

    @property
    @abc.abstractmethod
    def scalar_value_type(self) -> ValueType:
        """
        Value type of the property, or of its elements if the property
        is an array or a map.
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def is_array(self) -> bool:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def is_map(self) -> bool:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def container(self):
        """
        The :class:`~record_pointers.abc.schema.ContainerABC` the property
        belongs to.
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def nested_properties(self):
        """
        The :class:`~record_pointers.abc.schema.ContainerABC` with the
        properties of the nested object, or ``None`` if the property value
        (its elements for collections) is not an object.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def bind(self, container, nested_path: Optional[str] = None) -> 'FieldABC':
        """
        Return a copy of the field attached to the *container*.
        """
        raise NotImplementedError

"""Record types registry."""

import collections
import inspect
from typing import Any, Type, Tuple

from record_pointers.common import logger


class Registry(collections.UserDict):
    """
    Record types registry.

    This is a dictionary filled as schema classes are defined.
    It maps record type names to schema classes.
    """
    __slots__ = ('data',)

    def __getitem__(self, key):
        """
        Get schema class for record type name or schema class.

        :param key: Record type name or schema class.
        :return: Schema class
        """
        item = key.opts.record_type if inspect.isclass(key) else key
        return super().__getitem__(item)

    def register(self, schema_cls: Type[Any]) -> Type[Any]:
        """Add the schema class to the registry under its record type name."""
        record_type = schema_cls.opts.record_type
        existing = self.data.get(record_type)
        if existing is not None and existing is not schema_cls:
            logger.warning(
                'Record type "%s" of %s is redefined by %s.',
                record_type, existing.__qualname__, schema_cls.__qualname__,
            )
        self.data[record_type] = schema_cls
        return schema_cls

    def get_record_type(self, key):
        """
        Return the root properties container of the record type.

        :param key: Record type name or schema class.
        :raises KeyError: If the record type is not registered.
        """
        return self[key].get_container()

    def parse(self, key, pointer: str, no_dash: bool = False):
        """
        Parse record element pointer for the registered record type.

        .. code-block:: python3

            >>> registry.parse('Order', '/items/0/quantity')
            <RecordElementPointer '/items/0/quantity'>
        """
        from record_pointers.pointer import parse
        return parse(self.get_record_type(key), pointer, no_dash=no_dash)

    @property
    def record_types(self) -> Tuple[str, ...]:
        return tuple(self.keys())


#: Default registry all schema classes are added to
registry = Registry()

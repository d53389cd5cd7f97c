"""
Extended JSONPointer from python-json-pointer_
==============================================

.. _python-json-pointer: https://github.com/stefankoegl/python-json-pointer
"""
from typing import List, Union

from jsonpointer import JsonPointer as BaseJsonPointer, escape

__all__ = (
    'JSONPointer',
    'escape',
    'split_tokens',
)


class JSONPointer(BaseJsonPointer):
    """A JSON Pointer that can reference parts of an JSON document."""

    def __truediv__(self, path: Union['JSONPointer', str, int]) -> 'JSONPointer':
        parts = self.parts.copy()

        if isinstance(path, int):
            path = str(path)

        if isinstance(path, str):
            if not path.startswith('/'):
                path = f'/{path}'
            new_parts = JSONPointer(path).parts.pop(0)
            parts.append(new_parts)
        else:
            new_parts = path.parts
            parts.extend(new_parts)
        return JSONPointer.from_parts(parts)


def split_tokens(pointer: str) -> List[str]:
    """
    Split the pointer string into unescaped reference tokens.

    >>> split_tokens('/a~1b/m~0n/')
    ['a/b', 'm~n', '']

    :raises jsonpointer.JsonPointerException:
        If the pointer does not start with a slash or has a bad escape.
    """
    return BaseJsonPointer(pointer).parts

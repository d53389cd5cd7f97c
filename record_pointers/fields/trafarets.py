"""
Additional trafaret's fields
============================
"""

from typing import Any, Union

import trafaret as t

from record_pointers.common import ARRAY_INDEX_REGEX, DASH


class ArrayIndexTrafaret(t.Trafaret):
    """
    Array element pointer token.

    Converts a decimal index without leading zeros to :class:`int` and
    passes the dash (the position past the last element) through as is,
    unless *allow_dash* is false.
    """

    def __init__(self, allow_dash: bool = True) -> None:
        self.allow_dash = allow_dash

    def __repr__(self) -> str:
        return '<ArrayIndexTrafaret>' if self.allow_dash else '<ArrayIndexTrafaret(allow_dash=False)>'

    def check_and_return(self, value: Any) -> Union[int, str]:
        if not isinstance(value, str):
            self._failure(error='value is not a string', value=value)

        if value == DASH:
            if not self.allow_dash:
                self._failure(
                    error='dash not allowed for an array index in this pointer',
                    value=value,
                )
            return DASH

        if not ARRAY_INDEX_REGEX.fullmatch(value):
            self._failure(error='invalid array index', value=value)

        return int(value)


#: Shared instances, the trafaret keeps no state between checks
ARRAY_INDEX = ArrayIndexTrafaret()
ARRAY_INDEX_NO_DASH = ArrayIndexTrafaret(allow_dash=False)

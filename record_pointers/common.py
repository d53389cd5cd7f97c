"""Common constants, enumerations and structures."""

import logging
import re
from enum import Enum
from typing import Pattern

#: Logger instance
logger = logging.getLogger('record-pointers')

#: Array index token addressing the position past the last element
DASH: str = '-'

#: Separator of the subtype name and the property name in a pointer token
SUBTYPE_SEPARATOR: str = ':'

#: Regular expression rule for check allowed field names
ALLOWED_MEMBER_NAME_RULE: str = r'[a-zA-Z0-9]([a-zA-Z0-9\-_]+[a-zA-Z0-9]|[a-zA-Z0-9]?)'

#: Compiled regexp of rule
ALLOWED_MEMBER_NAME_REGEX: Pattern = re.compile('^' + ALLOWED_MEMBER_NAME_RULE + '$')

#: Array index token without leading zeros
ARRAY_INDEX_REGEX: Pattern = re.compile(r'0|[1-9][0-9]*')


class ValueType(Enum):
    """Scalar value type of a property (of its elements for collections)."""
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    DATETIME = 'datetime'
    OBJECT = 'object'


class Collection(Enum):
    """Collection kind of a property."""
    ARRAY = 'array'
    MAP = 'map'

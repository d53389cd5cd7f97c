"""JSON encoder extension."""

import functools
import json
from typing import Any

from jsonpointer import JsonPointer

from record_pointers.helpers import MISSING


class JSONEncoder(json.JSONEncoder):
    """Overloaded JSON encoder with pointers support."""

    def default(self, o: Any) -> Any:
        """Add pointers serializing support to default json.dumps."""
        # Local import, the pointer module depends on errors which use us
        from record_pointers.pointer import RecordElementPointer

        if isinstance(o, JsonPointer):
            return o.path
        if isinstance(o, RecordElementPointer):
            return o.pointer_string
        if o is MISSING:
            return None

        return super(JSONEncoder, self).default(o)


# pylint: disable=C0103
json_dumps = functools.partial(json.dumps, cls=JSONEncoder)

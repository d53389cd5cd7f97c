"""Errors."""

from .encoder import json_dumps

__all__ = (
    'Error',
    'PointerSyntaxError',
    'UsageError',
    'DataError',
)


class Error(Exception):
    """
    Base class for all exceptions thrown by the package.

    Errors are raised synchronously to the caller of the failing operation
    and are never retried or suppressed by the package itself.
    """

    title = 'Record pointer error'

    def __init__(self, *, detail='', pointer=None, meta=None):
        """
        Error instance initializer.

        :param detail:
            A human-readable explanation specific to this occurrence
            of the problem.
        :param pointer:
            The record element pointer (string or pointer object) the
            problem relates to.
        :param meta:
            A meta object containing non-standard meta-information
            about the error.
        """
        super(Error, self).__init__(detail)
        self.detail = detail
        self.pointer = pointer
        self.meta = meta if meta is not None else dict()

    def __str__(self):
        """Return the :attr:`detail` attribute."""
        return self.detail

    @property
    def as_dict(self):
        """Represent instance of Error as dictionary."""
        result = {'title': self.title}
        if self.detail:
            result['detail'] = self.detail
        if self.pointer is not None:
            result['pointer'] = str(self.pointer)
        if self.meta:
            result['meta'] = self.meta
        return result

    @property
    def json(self):
        """Serialize the error object to JSON text."""
        return json_dumps(self.as_dict, indent=4, sort_keys=True)


class PointerSyntaxError(Error):
    """
    Invalid record element pointer.

    Raised if the pointer string is malformed or does not match the record
    type it is parsed against, independently of any record instance. The
    detail always contains the full pointer string.
    """

    title = 'Invalid record element pointer'

    def __init__(self, pointer, reason='', **kwargs):
        """
        Pointer syntax error initializer.

        :param pointer: The full pointer string being parsed
        :param reason: What is wrong with the pointer
        :param kwargs: Additional arguments to base error
        """
        kwargs.setdefault(
            'detail',
            f'Invalid record element pointer "{pointer}"' +
            (f': {reason}' if reason else '.')
        )
        super(PointerSyntaxError, self).__init__(pointer=pointer, **kwargs)
        self.reason = reason


class UsageError(Error):
    """
    Record pointer API misuse.

    Raised if an operation is not allowed for the pointer or the value
    regardless of the record content, e.g. replacing the whole record.
    """

    title = 'Invalid record pointer usage'


class DataError(Error):
    """
    Unreachable record element.

    Raised if the addressed location cannot be reached or written given
    the current content of the record, e.g. a missing intermediate object
    or an array index out of bounds.
    """

    title = 'Invalid record data'

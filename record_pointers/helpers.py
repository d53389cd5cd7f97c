"""Helpers."""

from collections.abc import Iterable, Mapping


def is_iterable_but_not_string(obj):
    """Return True if ``obj`` is an iterable object that isn't a string."""
    return isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))


def is_array(obj):
    """Return True if ``obj`` can hold array elements of a record."""
    return (
        is_iterable_but_not_string(obj) and
        not isinstance(obj, Mapping) and
        hasattr(obj, '__getitem__')
    )


def make_sentinel(name='_MISSING', var_name=None):
    """
    Create sentinel instance.

    Creates and returns a new **instance** of a new class, suitable for
    usage as a "sentinel", a kind of singleton often used to indicate
    a value is missing when ``None`` is a valid input.

    >>> make_sentinel(var_name='_MISSING')
    _MISSING

    In this package the sentinel marks an array or map element that is
    structurally addressable but is not present in the record, as opposed
    to ``None``, which is the value of a property that is not set.

    .. note::

      Additional calls to ``make_sentinel`` with the same
      values will not produce equivalent objects.

      >>> make_sentinel('TEST') == make_sentinel('TEST')
      False
      >>> type(make_sentinel('TEST')) == type(make_sentinel('TEST'))
      False

    :arg str name:
        Name of the Sentinel
    :arg str var_name:
        Set this name to the name of the variable in its respective
        module enable pickleability.
    """
    class Sentinel(object):
        def __init__(self):
            self.name = name
            self.var_name = var_name

        def __repr__(self):
            if self.var_name:
                return self.var_name
            return '%s(%r)' % (self.__class__.__name__, self.name)

        if var_name:
            def __reduce__(self):
                return self.var_name

        def __bool__(self):
            return False

    return Sentinel()


MISSING = make_sentinel(var_name='MISSING')

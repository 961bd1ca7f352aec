# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

from collections.abc import MutableMapping
import numbers

import numpy as num

__all__ = ['ParameterTable', 'value_kind']


def value_kind(value):
    '''
    Get kind of a parameter value.

    :returns: ``'bool'``, ``'int'``, ``'float'``, ``'str'``, or ``None`` if
        the value is of none of these kinds.

    NumPy boolean, integer and floating point scalars count as ``'bool'``,
    ``'int'`` and ``'float'``. Booleans are checked first, as ``bool`` is a
    subclass of ``int``.
    '''

    if isinstance(value, (bool, num.bool_)):
        return 'bool'
    elif isinstance(value, numbers.Integral):
        return 'int'
    elif isinstance(value, numbers.Real):
        return 'float'
    elif isinstance(value, str):
        return 'str'
    else:
        return None


class ParameterTable(MutableMapping):
    '''
    Ordered mapping of Par_file parameter names to values.

    Keys are strings and are stored with surrounding whitespace removed.
    Entries are kept in insertion order; assigning to an existing key keeps
    its position. Values are not checked on assignment, see
    :py:func:`value_kind`.
    '''

    def __init__(self, *args, **kwargs):
        self._entries = {}
        self.update(*args, **kwargs)

    @staticmethod
    def _key(key):
        if not isinstance(key, str):
            raise TypeError(
                'parameter names must be strings, got %r' % (key,))

        return key.strip()

    def __getitem__(self, key):
        return self._entries[self._key(key)]

    def __setitem__(self, key, value):
        self._entries[self._key(key)] = value

    def __delitem__(self, key):
        del self._entries[self._key(key)]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def kind(self, key):
        return value_kind(self[key])

    def copy(self):
        return ParameterTable(self._entries)

    def __eq__(self, other):
        if isinstance(other, ParameterTable):
            return list(self.items()) == list(other.items())

        return MutableMapping.__eq__(self, other)

    __hash__ = None

    def __repr__(self):
        return 'ParameterTable(%r)' % self._entries

# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Moment tensor value type as used in CMTSOLUTION files.

The six independent components of the symmetric moment tensor are given
in spherical coordinates :math:`(r, \\theta, \\phi)` following the Harvard /
Global CMT convention, in the order ``rr, tt, pp, rt, rp, tp``. Values are in
dyne-cm.

Only representation is handled here, no moment tensor arithmetic.
'''

import numpy as num

component_names = ('rr', 'tt', 'pp', 'rt', 'rp', 'tp')


def to6(m):
    '''Get non-redundant components from symmetric 3x3 matrix

    :returns: 1D NumPy array with entries ordered like
        ``(a_rr, a_tt, a_pp, a_rt, a_rp, a_tp)``
    '''

    m = num.asarray(m)
    return num.array([m[0, 0], m[1, 1], m[2, 2], m[0, 1], m[0, 2], m[1, 2]])


def symmat6(a_rr, a_tt, a_pp, a_rt, a_rp, a_tp):
    '''
    Create symmetric 3x3 matrix from its 6 non-redundant values.
    '''

    return num.array([[a_rr, a_rt, a_rp],
                      [a_rt, a_tt, a_tp],
                      [a_rp, a_tp, a_pp]], dtype=float)


class MomentTensor(object):

    '''
    Immutable moment tensor

    :param rr,tt,pp,rt,rp,tp: components [dyne-cm]

    Components are accessed by their symbolic name, either as attributes
    (``mt.rr``) or by item (``mt['rr']``).
    '''

    __slots__ = ('_values',)

    def __init__(self, rr, tt, pp, rt, rp, tp):
        object.__setattr__(
            self, '_values',
            tuple(float(x) for x in (rr, tt, pp, rt, rp, tp)))

    @classmethod
    def from_values(cls, values):
        '''
        Alternative constructor from a sequence of exactly six values.

        The values are interpreted in the fixed order
        ``(rr, tt, pp, rt, rp, tp)``.
        '''

        from .io.io_common import ArgumentError

        values = list(values)
        if len(values) != 6:
            raise ArgumentError(
                'moment tensor needs exactly 6 components, got %i'
                % len(values))

        return cls(*values)

    def __setattr__(self, name, value):
        raise AttributeError('MomentTensor objects are immutable')

    def __getitem__(self, name):
        try:
            return self._values[component_names.index(name)]
        except ValueError:
            raise KeyError(name)

    @property
    def rr(self):
        return self._values[0]

    @property
    def tt(self):
        return self._values[1]

    @property
    def pp(self):
        return self._values[2]

    @property
    def rt(self):
        return self._values[3]

    @property
    def rp(self):
        return self._values[4]

    @property
    def tp(self):
        return self._values[5]

    def items(self):
        '''Get ``(name, value)`` pairs in the fixed component order.'''
        return list(zip(component_names, self._values))

    def m6(self):
        '''
        Get the moment tensor as a six-element array.

        :returns: ``(mrr, mtt, mpp, mrt, mrp, mtp)``
        '''
        return num.array(self._values, dtype=float)

    def m(self):
        '''Get plain moment tensor as symmetric 3x3 array.'''
        return symmat6(*self._values)

    def __eq__(self, other):
        if not isinstance(other, MomentTensor):
            return NotImplemented

        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        return 'MomentTensor(%s)' % ', '.join(
            '%s=%r' % item for item in self.items())

    def __str__(self):
        return '''Moment Tensor [dyne-cm]: Mrr = %g,  Mtt = %g, Mpp = %g,
                         Mrt = %g,  Mrp = %g, Mtp = %g
''' % self._values

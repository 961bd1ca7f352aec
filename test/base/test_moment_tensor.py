import unittest
import random

import numpy as num

from specfemutils.moment_tensor import MomentTensor, symmat6, to6, \
    component_names
from specfemutils.io import ArgumentError


class MomentTensorTestCase(unittest.TestCase):

    def testComponentsByName(self):
        mt = MomentTensor.from_values([1., 2., 3., 4., 5., 6.])
        for i, name in enumerate(component_names):
            assert getattr(mt, name) == float(i+1)
            assert mt[name] == float(i+1)

        assert mt.items() == list(
            zip(component_names, [1., 2., 3., 4., 5., 6.]))

        with self.assertRaises(KeyError):
            mt['xx']

    def testKeywords(self):
        mt = MomentTensor(tp=6., rp=5., rt=4., pp=3., tt=2., rr=1.)
        assert mt == MomentTensor(1., 2., 3., 4., 5., 6.)

    def testWrongNumberOfComponents(self):
        for n in (0, 5, 7):
            with self.assertRaises(ArgumentError):
                MomentTensor.from_values([1.0] * n)

    def testImmutable(self):
        mt = MomentTensor(1., 2., 3., 4., 5., 6.)
        with self.assertRaises(AttributeError):
            mt.rr = 10.

        with self.assertRaises(AttributeError):
            mt.foo = 10.

        assert mt.rr == 1.

    def testMatrix(self):
        ms = [random.random()*1.0e20-0.5e20 for j in range(6)]
        mt = MomentTensor.from_values(ms)

        m = mt.m()
        assert m.shape == (3, 3)
        assert num.all(m == m.T)
        assert m[0, 0] == mt.rr
        assert m[1, 1] == mt.tt
        assert m[2, 2] == mt.pp
        assert m[0, 1] == mt.rt
        assert m[0, 2] == mt.rp
        assert m[1, 2] == mt.tp

        assert num.all(mt.m6() == num.array(ms))
        assert num.all(to6(symmat6(*ms)) == num.array(ms))

    def testEqualityAndHash(self):
        mt1 = MomentTensor(1., 2., 3., 4., 5., 6.)
        mt2 = MomentTensor.from_values(num.arange(1, 7))
        mt3 = MomentTensor(1., 2., 3., 4., 5., 7.)

        assert mt1 == mt2
        assert hash(mt1) == hash(mt2)
        assert mt1 != mt3
        assert len({mt1, mt2, mt3}) == 2

    def testStr(self):
        mt = MomentTensor(1.73e29, -2.81e28, -1.45e29, 2.12e29, 4.55e29,
                          -6.57e28)
        s = str(mt)
        assert 'Mrr = 1.73e+29' in s
        assert 'Mtp = -6.57e+28' in s
        assert eval(repr(mt), {'MomentTensor': MomentTensor}) == mt


if __name__ == '__main__':
    unittest.main()

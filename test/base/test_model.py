import unittest
from collections import namedtuple

import numpy as num

from specfemutils import model
from specfemutils.model import CMTSolution, StationSet, StationRow, \
    ParameterTable, value_kind
from specfemutils.moment_tensor import MomentTensor
from specfemutils.io import ArgumentError


def make_cmt(**kwargs):
    d = dict(
        description=' PDE 2011  3 11  5 46 23.00  38.3200  142.3700  24.4',
        event_name='201103110546A',
        time_shift=70.06,
        half_duration=70.0,
        latitude=37.52,
        longitude=143.05,
        depth=20.0,
        moment_tensor=MomentTensor(
            1.73e29, -2.81e28, -1.45e29, 2.12e29, 4.55e29, -6.57e28))

    d.update(kwargs)
    return CMTSolution(**d)


class CMTSolutionTestCase(unittest.TestCase):

    def testFields(self):
        cmt = make_cmt()
        assert cmt.event_name == '201103110546A'
        assert cmt.time_shift == 70.06
        assert cmt.half_duration == 70.0
        assert cmt.latitude == 37.52
        assert cmt.longitude == 143.05
        assert cmt.depth == 20.0
        assert cmt.moment_tensor.rp == 4.55e29

    def testMomentTensorFromSequence(self):
        cmt = make_cmt(moment_tensor=[1, 2, 3, 4, 5, 6])
        assert isinstance(cmt.moment_tensor, MomentTensor)
        assert cmt.moment_tensor.tp == 6.

        with self.assertRaises(ArgumentError):
            make_cmt(moment_tensor=[1, 2, 3])

    def testBadTextFields(self):
        for event_name in ['', ' ', 'EV 1', 'EV\t1', ' EV1', 'EV1\n']:
            with self.assertRaises(ArgumentError):
                make_cmt(event_name=event_name)

        for description in ['PDE\n2011', 'PDE\r2011', 'PDE 2011\r\n']:
            with self.assertRaises(ArgumentError):
                make_cmt(description=description)

        with self.assertRaises(ArgumentError):
            make_cmt().replace(event_name='a b')

        assert make_cmt(description='').description == ''
        assert make_cmt(description='x\x0cy').description == 'x\x0cy'

    def testImmutable(self):
        cmt = make_cmt()
        with self.assertRaises(AttributeError):
            cmt.depth = 10.

        assert cmt.depth == 20.0

    def testReplace(self):
        cmt1 = make_cmt()
        cmt2 = cmt1.replace(depth=35., event_name='other')
        assert cmt2.depth == 35.
        assert cmt2.event_name == 'other'
        assert cmt2.moment_tensor == cmt1.moment_tensor
        assert cmt1.depth == 20.0
        assert cmt1 != cmt2
        assert cmt1 == cmt2.replace(depth=20., event_name='201103110546A')

        with self.assertRaises(TypeError):
            cmt1.replace(magnitude=7.)

    def testEqualityAndHash(self):
        assert make_cmt() == make_cmt()
        assert hash(make_cmt()) == hash(make_cmt())
        assert make_cmt() != make_cmt(time_shift=0.)
        assert 'event_name=' in repr(make_cmt())


class StationSetTestCase(unittest.TestCase):

    def testColumns(self):
        stations = StationSet(
            ['AAE', 'ANMO'], ['IU', 'IU'],
            [9.0292, 34.9459], [38.7656, -106.4572],
            [2442., 1850.], [0., 100.])

        assert len(stations) == 2
        assert stations.sta == ('AAE', 'ANMO')
        assert stations.net == ('IU', 'IU')
        assert stations.lat.dtype == num.float64
        assert num.all(stations.lon == num.array([38.7656, -106.4572]))

        assert stations.station_code is stations.sta
        assert stations.network_code is stations.net
        assert stations.latitude is stations.lat
        assert stations.longitude is stations.lon
        assert stations.elevation is stations.elev
        assert stations.burial_depth is stations.dep

        with self.assertRaises(ValueError):
            stations.lat[0] = 1.0

    def testRows(self):
        rows = [
            ('AAE', 'IU', 9.0292, 38.7656, 2442., 0.),
            ('ANMO', 'IU', 34.9459, -106.4572, 1850., 100.),
            ('AAE', 'IU', 9.0292, 38.7656, 2442., 0.)]

        stations = StationSet.from_rows(rows)
        assert len(stations) == 3
        assert list(stations) == [StationRow(*row) for row in rows]
        assert stations[1].dep == 100.
        assert stations[2] == stations[0]

        with self.assertRaises(ArgumentError):
            StationSet.from_rows([('AAE', 'IU', 9.0292, 38.7656, 2442.)])

    def testSlice(self):
        rows = [
            ('AAE', 'IU', 9.0292, 38.7656, 2442., 0.),
            ('ANMO', 'IU', 34.9459, -106.4572, 1850., 100.),
            ('BFO', 'II', 48.3319, 8.3311, 589., 0.)]

        stations = StationSet.from_rows(rows)

        sub = stations[1:]
        assert isinstance(sub, StationSet)
        assert sub == StationSet.from_rows(rows[1:])
        assert sub.sta == ('ANMO', 'BFO')
        assert sub.lat.dtype == num.float64

        assert stations[::-1] == StationSet.from_rows(rows[::-1])
        assert len(stations[5:]) == 0
        assert stations[-1] == StationRow(*rows[-1])

        with self.assertRaises(ValueError):
            sub.lat[0] = 1.0

    def testEmpty(self):
        stations = StationSet.from_rows([])
        assert len(stations) == 0
        assert list(stations) == []
        assert stations == StationSet([], [], [], [], [], [])

    def testLengthMismatch(self):
        with self.assertRaises(ArgumentError):
            StationSet(
                ['A'] * 6, ['N'] * 6, [0.] * 5, [0.] * 6, [0.] * 6, [0.] * 6)

        with self.assertRaises(ArgumentError):
            model.check_columns(['A'], ['N', 'M'], [0.], [0.], [0.], [0.])

    def testEquality(self):
        Bundle = namedtuple('Bundle', 'sta net lat lon elev dep')
        b = Bundle(['X'], ['YY'], [1.], [2.], [3.], [4.])
        s1 = StationSet(*b)
        s2 = StationSet.from_rows([('X', 'YY', 1., 2., 3., 4.)])
        assert s1 == s2
        assert s1 != StationSet.from_rows([('X', 'YY', 1., 2., 3., 5.)])
        assert repr(s1) == 'StationSet(1 stations)'


class ParameterTableTestCase(unittest.TestCase):

    def testOrderAndKeys(self):
        params = ParameterTable()
        params['NCHUNKS'] = 6
        params['  MODEL '] = 's362ani'
        params['OCEANS'] = True

        assert list(params.keys()) == ['NCHUNKS', 'MODEL', 'OCEANS']
        assert params['MODEL'] == 's362ani'
        assert params[' MODEL'] == 's362ani'

        params['NCHUNKS'] = 1
        assert list(params.keys()) == ['NCHUNKS', 'MODEL', 'OCEANS']
        assert params['NCHUNKS'] == 1

        del params['MODEL']
        assert list(params.keys()) == ['NCHUNKS', 'OCEANS']
        assert len(params) == 2
        assert 'MODEL' not in params

        with self.assertRaises(TypeError):
            params[1] = 2

    def testKinds(self):
        params = ParameterTable([
            ('A', True), ('B', 1), ('C', 1.5), ('D', 'x'), ('E', None),
            ('F', num.int32(3)), ('G', num.float64(2.5)), ('H', [1])])

        assert [params.kind(k) for k in params] == [
            'bool', 'int', 'float', 'str', None, 'int', 'float', None]

        assert value_kind(False) == 'bool'
        assert value_kind(complex(1., 1.)) is None

    def testCopyAndEquality(self):
        params = ParameterTable(A=1, B=2.)
        params2 = params.copy()
        params2['A'] = 5

        assert params['A'] == 1
        assert params == {'B': 2., 'A': 1}
        assert params != ParameterTable(B=2., A=1)
        assert params == ParameterTable(A=1, B=2.)
        assert 'ParameterTable' in repr(params)


if __name__ == '__main__':
    unittest.main()

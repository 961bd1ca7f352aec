# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

from collections import namedtuple

import numpy as num

__all__ = ['StationSet', 'StationRow', 'check_columns']

column_names = ('sta', 'net', 'lat', 'lon', 'elev', 'dep')

StationRow = namedtuple('StationRow', column_names)
StationRow.__doc__ = '''
One row of a STATIONS file: station code, network code, latitude [deg],
longitude [deg], elevation [m] and burial depth [m].
'''


def check_columns(sta, net, lat, lon, elev, dep):
    from specfemutils.io.io_common import ArgumentError

    n = len(sta)
    if not all(len(x) == n for x in (net, lat, lon, elev, dep)):
        raise ArgumentError(
            'all station columns must have the same length (got %s)'
            % ', '.join(
                '%s: %i' % (name, len(x)) for (name, x) in zip(
                    column_names, (sta, net, lat, lon, elev, dep))))


class StationSet(object):
    '''
    Set of seismic receivers as given in a SPECFEM STATIONS file

    :param sta: station codes
    :param net: network codes
    :param lat: latitudes [deg]
    :param lon: longitudes [deg]
    :param elev: elevations [m]
    :param dep: burial depths [m]

    The six columns must have the same length. Row ``i`` of all columns
    describes one station. Order is kept and duplicates are allowed.
    '''

    def __init__(self, sta, net, lat, lon, elev, dep):
        check_columns(sta, net, lat, lon, elev, dep)

        self._sta = tuple(str(x) for x in sta)
        self._net = tuple(str(x) for x in net)
        self._lat = self._float_column(lat)
        self._lon = self._float_column(lon)
        self._elev = self._float_column(elev)
        self._dep = self._float_column(dep)

    @staticmethod
    def _float_column(values):
        a = num.array(values, dtype=float).reshape(-1)
        a.flags.writeable = False
        return a

    @classmethod
    def from_rows(cls, rows):
        '''
        Create from an iterable of ``(sta, net, lat, lon, elev, dep)`` rows.
        '''

        from specfemutils.io.io_common import ArgumentError

        rows = list(rows)
        for irow, row in enumerate(rows):
            if len(row) != 6:
                raise ArgumentError(
                    'station row %i has %i entries, 6 are needed'
                    % (irow, len(row)))

        if rows:
            columns = list(zip(*rows))
        else:
            columns = [()] * 6

        return cls(*columns)

    @property
    def sta(self):
        return self._sta

    @property
    def net(self):
        return self._net

    @property
    def lat(self):
        return self._lat

    @property
    def lon(self):
        return self._lon

    @property
    def elev(self):
        return self._elev

    @property
    def dep(self):
        return self._dep

    station_code = sta
    network_code = net
    latitude = lat
    longitude = lon
    elevation = elev
    burial_depth = dep

    def columns(self):
        return (self._sta, self._net, self._lat, self._lon, self._elev,
                self._dep)

    def __len__(self):
        return len(self._sta)

    def __getitem__(self, irow):
        '''
        Get one station as :py:class:`StationRow`, or, with a slice, a new
        :py:class:`StationSet` with the selected rows.
        '''

        if isinstance(irow, slice):
            return StationSet(
                self._sta[irow], self._net[irow], self._lat[irow],
                self._lon[irow], self._elev[irow], self._dep[irow])

        return StationRow(
            self._sta[irow], self._net[irow],
            float(self._lat[irow]), float(self._lon[irow]),
            float(self._elev[irow]), float(self._dep[irow]))

    def __iter__(self):
        for irow in range(len(self)):
            yield self[irow]

    def __eq__(self, other):
        if not isinstance(other, StationSet):
            return NotImplemented

        return self._sta == other._sta and self._net == other._net and all(
            num.array_equal(a, b) for (a, b) in [
                (self._lat, other._lat),
                (self._lon, other._lon),
                (self._elev, other._elev),
                (self._dep, other._dep)])

    __hash__ = None

    def __repr__(self):
        return 'StationSet(%i stations)' % len(self)

# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Reader and writer for SPECFEM STATIONS files.

Each non-empty line describes one receiver with six whitespace separated
columns::

    STA  NET  LATITUDE  LONGITUDE  ELEVATION  BURIAL_DEPTH

There is no header line.
'''

import logging

from specfemutils import util, config, model
from .io_common import FormatError, ParseError, ArgumentError, \
    with_filename

logger = logging.getLogger('specfemutils.io.stations')

float_columns = ('lat', 'lon', 'elev', 'dep')


def parse_lines(lines):
    rows = []
    for iline, line in enumerate(lines):
        toks = line.split()
        if not toks:
            continue

        if len(toks) != 6:
            raise FormatError(
                'expected 6 columns in line %i, found %i'
                % (iline+1, len(toks)),
                line=iline+1, content=line)

        row = toks[:2]
        for field, tok in zip(float_columns, toks[2:]):
            value = util.str_to_fortran_float_or_none(tok)
            if value is None:
                raise ParseError(
                    'cannot convert %s in line %i to float: %s'
                    % (field, iline+1, tok),
                    field=field, token=tok, line=iline+1, content=line)

            row.append(value)

        rows.append(row)

    return model.StationSet.from_rows(rows)


def read_stations(filename=None, file=None, string=None):
    '''
    Read SPECFEM STATIONS file.

    Exactly one of ``filename``, ``file`` (open text stream) or ``string``
    (file content) must be given. Empty lines are skipped.

    :returns: :py:class:`~specfemutils.model.station.StationSet` object
    :raises: :py:exc:`~specfemutils.io.io_common.FormatError` if a line does
        not have 6 columns, :py:exc:`~specfemutils.io.io_common.ParseError` if
        one of the coordinate columns is not numeric
    '''

    lines = util.read_lines(filename, file, string)
    try:
        stations = parse_lines(lines)
    except FormatError as e:
        raise with_filename(e, filename)

    logger.debug('read %i stations' % len(stations))
    return stations


def get_columns(args):
    if len(args) == 1:
        s = args[0]
        try:
            columns = (s.sta, s.net, s.lat, s.lon, s.elev, s.dep)
        except AttributeError:
            raise ArgumentError(
                'station bundle must have attributes sta, net, lat, lon, '
                'elev and dep')

    elif len(args) == 6:
        columns = args

    else:
        raise ArgumentError(
            'expected a station bundle or 6 columns, got %i arguments'
            % len(args))

    model.check_columns(*columns)
    return columns


def write_stations(*args, filename=None, stream=None, delimiter=None):
    '''
    Write SPECFEM STATIONS file.

    Call either as ``write_stations(stations, ...)`` with a
    :py:class:`~specfemutils.model.station.StationSet` or any other object
    with attributes ``sta``, ``net``, ``lat``, ``lon``, ``elev`` and ``dep``,
    or as ``write_stations(sta, net, lat, lon, elev, dep, ...)`` with six
    sequences of equal length.

    :param filename: path of the file to be written
    :param stream: open text stream to write to instead
    :param delimiter: column separator, default from
        :py:func:`specfemutils.config.config` (two spaces)
    :returns: the file content as string if neither ``filename`` nor
        ``stream`` is given, otherwise ``None``
    :raises: :py:exc:`~specfemutils.io.io_common.ArgumentError` before
        anything is written, if the columns differ in length
    '''

    sta, net, lat, lon, elev, dep = get_columns(args)
    delimiter = config.config().get('stations_delimiter', delimiter)

    with util.text_sink(filename, stream) as f:
        for row in zip(sta, net, lat, lon, elev, dep):
            f.write(delimiter.join(
                [str(x) for x in row[:2]]
                + [util.float_to_str(x) for x in row[2:]]) + '\n')

        return util.sink_value(f, filename, stream)

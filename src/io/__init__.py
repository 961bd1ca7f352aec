# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Input and output of SPECFEM input files.

The format specific functions are

* :py:func:`~specfemutils.io.cmtsolution.read_cmtsolution`,
  :py:func:`~specfemutils.io.cmtsolution.write_cmtsolution`
* :py:func:`~specfemutils.io.stations.read_stations`,
  :py:func:`~specfemutils.io.stations.write_stations`
* :py:func:`~specfemutils.io.par_file.read_par_file`,
  :py:func:`~specfemutils.io.par_file.write_par_file`

:py:func:`load` and :py:func:`save` dispatch to these, using the SPECFEM file
naming conventions to detect the format.
'''

import os
import logging
from collections.abc import Mapping

from .io_common import FileLoadError, FileSaveError, FormatError, \
    ParseError, ArgumentError, ParameterTypeError, \
    ParameterValueError  # noqa
from .cmtsolution import read_cmtsolution, write_cmtsolution
from .stations import read_stations, write_stations
from .par_file import read_par_file, write_par_file

logger = logging.getLogger('specfemutils.io')

formats = ('cmtsolution', 'stations', 'par_file')

filename_prefixes = [
    ('CMTSOLUTION', 'cmtsolution'),
    ('STATIONS', 'stations'),
    ('Par_file', 'par_file')]


def allowed_formats(operation, use=None, default='detect'):
    if operation not in ('load', 'save'):
        raise ValueError('operation must be "load" or "save"')

    lst = ['detect'] + list(formats)

    if use == 'doc':
        return ', '.join("``'%s'``" % fmt for fmt in lst)

    elif use == 'cli_help':
        return ', '.join(fmt + ['', ' [default]'][fmt == default]
                         for fmt in lst)

    else:
        return lst


def detect_format(filename):
    '''
    Guess file format from file name.

    Names starting with ``CMTSOLUTION``, ``STATIONS`` or ``Par_file`` are
    recognized, e.g. ``'DATA/CMTSOLUTION'`` or ``'STATIONS_FILTERED'``.
    '''

    basename = os.path.basename(filename)
    for prefix, format in filename_prefixes:
        if basename.startswith(prefix):
            return format

    return None


def load(filename, format='detect', **kwargs):
    '''
    Load SPECFEM input file.

    :param filename: path of the file
    :param format: format of the file (%s)
    :param kwargs: passed to the format specific reader
    :returns: :py:class:`~specfemutils.model.cmtsolution.CMTSolution`,
        :py:class:`~specfemutils.model.station.StationSet` or
        :py:class:`~specfemutils.model.parameters.ParameterTable`
    '''

    if format == 'detect':
        format = detect_format(filename)
        if format is None:
            raise FileLoadError(
                'cannot detect format of file: %s' % filename)

        logger.debug('detected format of %s: %s' % (filename, format))

    if format == 'cmtsolution':
        return read_cmtsolution(filename=filename, **kwargs)

    elif format == 'stations':
        return read_stations(filename=filename, **kwargs)

    elif format == 'par_file':
        return read_par_file(filename=filename, **kwargs)

    else:
        raise FileLoadError('unknown file format: %s' % format)


load.__doc__ %= allowed_formats('load', 'doc')


def save(obj, filename, format='detect', **kwargs):
    '''
    Save SPECFEM input file.

    :param obj: object to be saved
    :param filename: path of the file
    :param format: format of the file (%s), with ``'detect'`` the format is
        chosen according to the type of ``obj``
    :param kwargs: passed to the format specific writer
    '''

    from specfemutils.model import CMTSolution, StationSet

    if format == 'detect':
        if isinstance(obj, CMTSolution):
            format = 'cmtsolution'
        elif isinstance(obj, StationSet):
            format = 'stations'
        elif isinstance(obj, Mapping):
            format = 'par_file'
        else:
            raise FileSaveError(
                'cannot detect file format for object of type %s'
                % type(obj).__name__)

    if format == 'cmtsolution':
        write_cmtsolution(obj, filename=filename, **kwargs)

    elif format == 'stations':
        write_stations(obj, filename=filename, **kwargs)

    elif format == 'par_file':
        write_par_file(obj, filename=filename, **kwargs)

    else:
        raise FileSaveError('unknown file format: %s' % format)


save.__doc__ %= allowed_formats('save', 'doc')

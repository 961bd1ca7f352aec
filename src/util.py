# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------
'''
Utility functions for SPECFEMUtils.

Logging setup, helpers to open the text sources accepted by the readers and
writers, and conversions for Fortran style number literals as they appear in
SPECFEM input files.
'''

import os
import re
import io
import errno
import logging
from contextlib import contextmanager

logger = logging.getLogger('specfemutils.util')

g_setup_logging_args = 'specfemutils', 'warning'


def setup_logging(programname='specfemutils', levelname='warning'):
    '''
    Initialize logging.

    :param programname: program name to be written in log
    :param levelname: string indicating the logging level ('debug', 'info',
        'warning', 'error', 'critical')

    This is simply a shortcut to a call to :py:func:`logging.basicConfig()`
    with a consistent log format.
    '''

    global g_setup_logging_args
    g_setup_logging_args = (programname, levelname)

    levels = {'debug': logging.DEBUG,
              'info': logging.INFO,
              'warning': logging.WARNING,
              'error': logging.ERROR,
              'critical': logging.CRITICAL}

    logging.basicConfig(
        level=levels[levelname],
        format=programname+':%(name)-25s - %(levelname)-8s - %(message)s')


def ensuredirs(dst):
    '''
    Create all intermediate path components for a target path.

    :param dst: target path

    The leaf part of the target path is not created.
    '''

    d, x = os.path.split(dst.rstrip(os.sep))
    dirs = []
    while d and not os.path.exists(d):
        dirs.append(d)
        d, x = os.path.split(d)

    dirs.reverse()

    for d in dirs:
        try:
            os.mkdir(d)
        except OSError as e:
            if not e.errno == errno.EEXIST:
                raise


def check_one_source(filename=None, file=None, string=None):
    from .io.io_common import ArgumentError

    given = [x for x in (filename, file, string) if x is not None]
    if len(given) != 1:
        raise ArgumentError(
            'exactly one of filename, file or string must be given '
            '(got %i)' % len(given))


@contextmanager
def text_source(filename=None, file=None, string=None):
    '''
    Context manager yielding a readable text stream.

    Exactly one of ``filename``, ``file`` (an open text stream) or ``string``
    (the content itself) must be given. Files opened here are closed on exit,
    streams given by the caller are left open.
    '''

    check_one_source(filename, file, string)

    if filename is not None:
        with open(filename, 'r') as f:
            yield f

    elif file is not None:
        yield file

    else:
        yield io.StringIO(string)


def read_lines(filename=None, file=None, string=None):
    '''
    Get the lines of a text source, line terminators removed.

    Only ``\\n`` and ``\\r\\n`` end a line. Other characters which
    :py:meth:`str.splitlines` would treat as line boundaries (form feed,
    vertical tab, ...) are kept as part of the line.
    '''

    with text_source(filename, file, string) as f:
        lines = f.read().split('\n')

    if lines[-1] == '':
        lines.pop()

    return [line[:-1] if line.endswith('\r') else line for line in lines]


@contextmanager
def text_sink(filename=None, stream=None):
    '''
    Context manager yielding a writable text stream.

    If ``filename`` is given, the file is created (with any missing
    directories) and closed on exit, also when writing fails. If neither
    ``filename`` nor ``stream`` is given, an in-memory buffer is yielded, its
    content can be retrieved with :py:func:`sink_value`.
    '''

    from .io.io_common import ArgumentError

    if filename is not None and stream is not None:
        raise ArgumentError('only one of filename or stream may be given')

    if filename is not None:
        ensuredirs(filename)
        with open(filename, 'w') as f:
            yield f

    elif stream is not None:
        yield stream

    else:
        yield io.StringIO()


def sink_value(f, filename=None, stream=None):
    if filename is None and stream is None:
        return f.getvalue()

    return None


int_pattern = re.compile(r'^[+-]?[0-9]+$')

fortran_float_pattern = re.compile(
    r'^[+-]?(([0-9]+\.?[0-9]*|\.[0-9]+)([eEdD][+-]?[0-9]+)?'
    r'|inf|infinity|nan)$', re.IGNORECASE)


def str_to_int_or_none(s):
    '''
    Convert a plain decimal integer literal, ``None`` if it is something else.
    '''

    if int_pattern.match(s):
        return int(s)

    return None


def str_to_fortran_float_or_none(s):
    '''
    Convert a (possibly Fortran double precision) float literal.

    Exponent markers ``d`` and ``D`` are treated like ``e``, e.g. ``'1.5D0'``
    gives ``1.5``. Returns ``None`` if ``s`` is not a float literal.
    '''

    if fortran_float_pattern.match(s):
        return float(re.sub(r'[dD]', 'e', s))

    return None


def fortran_float_to_str(value, format='%e'):
    '''
    Format a float with ``d`` as exponent marker, e.g. ``'1.500000d+00'``.
    '''

    return (format % value).replace('e', 'd')


def float_to_str(value):
    '''
    Shortest text representation which converts back to the same float.
    '''

    return repr(float(value))

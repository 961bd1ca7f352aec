# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Reader and writer for SPECFEM Par_file parameter files.

A Par_file consists of ``key = value`` lines, comment lines starting with
``#`` and empty lines::

    # simulation input parameters
    SIMULATION_TYPE                 = 1
    SAVE_FORWARD                    = .false.
    MODEL                           = 1D_transversely_isotropic_prem
    RECORD_LENGTH_IN_MINUTES        = 2.5d0    # comment

Values are converted by trying, in this order: ``.true.`` / ``.false.``
(case insensitive) to :py:class:`bool`, plain decimal integer literals to
:py:class:`int`, float literals (with ``d`` or ``D`` accepted as exponent
marker) to :py:class:`float`. Anything else is kept as string. Only the
first token after the ``=`` is used, further tokens on the line are
discarded.
'''

import logging

from specfemutils import util, config, model
from .io_common import FormatError, ParameterTypeError, ParameterValueError, \
    with_filename

logger = logging.getLogger('specfemutils.io.par_file')


def str_to_value(s):
    '''
    Convert Par_file value token to Python value.

    :returns: :py:class:`bool`, :py:class:`int`, :py:class:`float` or
        :py:class:`str`
    '''

    sl = s.lower()
    if sl == '.true.':
        return True

    if sl == '.false.':
        return False

    value = util.str_to_int_or_none(s)
    if value is not None:
        return value

    value = util.str_to_fortran_float_or_none(s)
    if value is not None:
        return value

    return s


def check_key(key):
    if not isinstance(key, str):
        raise ParameterValueError(
            'parameter names must be strings, got %r' % (key,), key)

    k = key.strip()
    if not k or '=' in k or k.startswith('#') or '\n' in k or '\r' in k:
        raise ParameterValueError(
            'parameter name %r cannot be written to a Par_file' % key, key)

    return k


def value_to_str(key, value, float_format='%e'):
    '''
    Convert Python value to its Par_file representation.

    :raises: :py:exc:`~specfemutils.io.io_common.ParameterTypeError` if the
        value is not a bool, integer, float or string
        :py:exc:`~specfemutils.io.io_common.ParameterValueError` if a string
        value is empty or contains whitespace
    '''

    kind = model.value_kind(value)
    if kind == 'bool':
        return '.true.' if value else '.false.'
    elif kind == 'int':
        return '%i' % value
    elif kind == 'float':
        return util.fortran_float_to_str(value, float_format)
    elif kind == 'str':
        s = value.strip()
        if len(s.split()) != 1:
            raise ParameterValueError(
                'string value %r for key "%s" must be a single token '
                'without whitespace' % (value, key), key, value)

        return s
    else:
        raise ParameterTypeError(key, value)


def parse_lines(lines, allow_duplicates=False):
    params = model.ParameterTable()
    first_seen = {}
    for iline, line in enumerate(lines):
        if not line.strip():
            continue

        if line.lstrip().startswith('#'):
            continue

        if '=' not in line:
            raise FormatError(
                'bad format of line %i: "%s"' % (iline+1, line),
                line=iline+1, content=line)

        k, v = line.split('=', 1)
        key = k.strip()
        toks = v.split()

        if not key:
            raise FormatError(
                'missing parameter name in line %i' % (iline+1),
                line=iline+1, content=line)

        if not toks:
            raise FormatError(
                'missing value for parameter "%s" in line %i'
                % (key, iline+1),
                line=iline+1, content=line)

        if key in first_seen:
            if not allow_duplicates:
                raise FormatError(
                    'parameter "%s" in line %i already given in line %i'
                    % (key, iline+1, first_seen[key]),
                    line=iline+1, content=line)

            logger.warning(
                'parameter "%s" in line %i overrides value given in line %i'
                % (key, iline+1, first_seen[key]))
        else:
            first_seen[key] = iline+1

        params[key] = str_to_value(toks[0])

    return params


def read_par_file(
        filename=None, file=None, string=None, allow_duplicates=None):
    '''
    Read SPECFEM Par_file.

    Exactly one of ``filename``, ``file`` (open text stream) or ``string``
    (file content) must be given.

    :param allow_duplicates: if ``True``, a repeated parameter overwrites
        the earlier value and keeps its position; if ``False``, repeated
        parameters are an error. Default from
        :py:func:`specfemutils.config.config`.
    :returns: :py:class:`~specfemutils.model.parameters.ParameterTable` in
        file order
    :raises: :py:exc:`~specfemutils.io.io_common.FormatError` naming the
        offending line number if a line is not a comment, empty or a
        ``key = value`` line
    '''

    allow_duplicates = config.config().get(
        'allow_duplicate_parameters', allow_duplicates)

    lines = util.read_lines(filename, file, string)
    try:
        params = parse_lines(lines, allow_duplicates=allow_duplicates)
    except FormatError as e:
        raise with_filename(e, filename)

    logger.debug('read %i parameters' % len(params))
    return params


def write_par_file(
        params, filename=None, stream=None, key_width=None,
        float_format=None):

    '''
    Write SPECFEM Par_file.

    :param params: mapping of parameter names to values, e.g. a
        :py:class:`~specfemutils.model.parameters.ParameterTable`; written in
        iteration order
    :param filename: path of the file to be written
    :param stream: open text stream to write to instead
    :param key_width: field width of the parameter names (default 31)
    :param float_format: printf style format for floats (default ``'%e'``),
        the exponent marker is written as ``d``
    :returns: the file content as string if neither ``filename`` nor
        ``stream`` is given, otherwise ``None``
    :raises: :py:exc:`~specfemutils.io.io_common.ParameterTypeError` if a
        value is not a bool, integer, float or string,
        :py:exc:`~specfemutils.io.io_common.ParameterValueError` if a
        parameter name is empty, contains ``=`` or a line break or starts
        with ``#``, or if a string value is empty or contains whitespace.
        Lines already written remain in the file.

    String values are written verbatim. A string which looks like a
    boolean or a number, e.g. ``'2'``, is read back as that type.
    '''

    conf = config.config()
    key_width = conf.get('par_file_key_width', key_width)
    float_format = conf.get('par_file_float_format', float_format)

    with util.text_sink(filename, stream) as f:
        for k, v in params.items():
            f.write('%-*s = %s\n' % (
                key_width, check_key(k), value_to_str(k, v, float_format)))

        return util.sink_value(f, filename, stream)

# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Reader and writer for SPECFEM CMTSOLUTION files.

A CMTSOLUTION file has 13 lines::

    PDE 2011  3 11  5 46 23.00  38.3200  142.3700  24.4 7.9 8.9 NEAR EAST ...
    event name:     201103110546A
    time shift:     70.0600
    half duration:  70.0000
    latitude:       37.5200
    longitude:      143.0500
    depth:          20.0000
    Mrr:            1.730000e+29
    Mtt:            -2.810000e+28
    Mpp:            -1.450000e+29
    Mrt:            2.120000e+29
    Mrp:            4.550000e+29
    Mtp:            -6.570000e+28

The first line is kept verbatim as description. Values are taken from fixed
token positions: the third token of lines 2-4 and the second token of lines
5-13. Lines beyond the 13th are ignored.
'''

import logging

from specfemutils import util, config, model, moment_tensor
from .io_common import FormatError, ParseError, with_filename

logger = logging.getLogger('specfemutils.io.cmtsolution')

nlines = 13

# (label, field, index of value token), for lines 2-13
line_layout = [
    ('event name', 'event_name', 2),
    ('time shift', 'time_shift', 2),
    ('half duration', 'half_duration', 2),
    ('latitude', 'latitude', 1),
    ('longitude', 'longitude', 1),
    ('depth', 'depth', 1),
    ('Mrr', 'rr', 1),
    ('Mtt', 'tt', 1),
    ('Mpp', 'pp', 1),
    ('Mrt', 'rt', 1),
    ('Mrp', 'rp', 1),
    ('Mtp', 'tp', 1)]


def get_token(line, iline, itok):
    toks = line.split()
    if len(toks) <= itok:
        raise FormatError(
            'expected at least %i whitespace separated tokens in line %i, '
            'found %i' % (itok+1, iline+1, len(toks)),
            line=iline+1, content=line)

    return toks[itok]


def get_float(line, iline, itok, field):
    tok = get_token(line, iline, itok)
    value = util.str_to_fortran_float_or_none(tok)
    if value is None:
        raise ParseError(
            'cannot convert value of %s in line %i to float: %s'
            % (field, iline+1, tok),
            field=field, token=tok, line=iline+1, content=line)

    return value


def parse_lines(lines):
    if len(lines) < nlines:
        raise FormatError(
            'CMTSOLUTION needs %i lines, found only %i'
            % (nlines, len(lines)))

    if len(lines) > nlines:
        logger.debug(
            'ignoring %i lines after line %i'
            % (len(lines) - nlines, nlines))

    if '\r' in lines[0]:
        raise FormatError(
            'carriage return in description line',
            line=1, content=lines[0])

    values = {}
    for iline, (_, field, itok) in enumerate(line_layout, start=1):
        line = lines[iline]
        if field == 'event_name':
            values[field] = get_token(line, iline, itok)
        else:
            values[field] = get_float(line, iline, itok, field)

    mt = moment_tensor.MomentTensor.from_values(
        [values.pop(name) for name in moment_tensor.component_names])

    return model.CMTSolution(
        description=lines[0],
        moment_tensor=mt,
        **values)


def read_cmtsolution(filename=None, file=None, string=None):
    '''
    Read SPECFEM CMTSOLUTION file.

    Exactly one of ``filename``, ``file`` (open text stream) or ``string``
    (file content) must be given.

    :returns: :py:class:`~specfemutils.model.cmtsolution.CMTSolution` object
    :raises: :py:exc:`~specfemutils.io.io_common.FormatError` if there are
        less than 13 lines or a line has too few tokens,
        :py:exc:`~specfemutils.io.io_common.ParseError` if a value is not
        numeric
    '''

    lines = util.read_lines(filename, file, string)
    try:
        cmt = parse_lines(lines)
    except FormatError as e:
        raise with_filename(e, filename)

    logger.debug('read CMTSOLUTION of event %s' % cmt.event_name)
    return cmt


def cmtsolution_lines(cmt, label_width):
    mt = cmt.moment_tensor
    yield cmt.description
    for label, field, _ in line_layout:
        if field == 'event_name':
            value = cmt.event_name
        elif field in moment_tensor.component_names:
            value = util.float_to_str(mt[field])
        else:
            value = util.float_to_str(getattr(cmt, field))

        yield '%-*s%s' % (
            max(label_width, len(label) + 2), label + ':', value)


def write_cmtsolution(cmt, filename=None, stream=None, label_width=None):
    '''
    Write SPECFEM CMTSOLUTION file.

    :param cmt: :py:class:`~specfemutils.model.cmtsolution.CMTSolution`
        object
    :param filename: path of the file to be written
    :param stream: open text stream to write to instead
    :param label_width: field width of the labels, default from
        :py:func:`specfemutils.config.config`
    :returns: the file content as string if neither ``filename`` nor
        ``stream`` is given, otherwise ``None``

    Labels are normalized and numbers are written in their shortest
    representation, so only the values, not the layout, of a file read with
    :py:func:`read_cmtsolution` are reproduced.
    '''

    label_width = config.config().get('cmt_label_width', label_width)

    with util.text_sink(filename, stream) as f:
        for line in cmtsolution_lines(cmt, label_width):
            f.write(line + '\n')

        return util.sink_value(f, filename, stream)

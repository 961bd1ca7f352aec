# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Formatting settings of the SPECFEM file writers and readers.

The process wide default is available with :py:func:`config`. Settings can be
stored in and loaded from YAML files with :py:func:`write_config` and
:py:func:`load_config`. Keyword arguments of the same name given to the
individual read and write functions take precedence over the settings here.
'''

import copy
import logging

import yaml

from . import util

logger = logging.getLogger('specfemutils.config')


class BadConfig(Exception):
    pass


class Config(object):
    '''
    Settings for reading and writing SPECFEM input files.

    :param par_file_key_width: field width of parameter names in Par_file
    :param par_file_float_format: printf style format of floating point
        values in Par_file, before the exponent marker is changed to ``d``
    :param allow_duplicate_parameters: if ``True``, a parameter repeated in a
        Par_file overwrites the earlier value, otherwise it is an error
    :param stations_delimiter: column separator in STATIONS files
    :param cmt_label_width: field width of the labels in CMTSOLUTION files
    '''

    defaults = dict(
        par_file_key_width=31,
        par_file_float_format='%e',
        allow_duplicate_parameters=False,
        stations_delimiter='  ',
        cmt_label_width=16)

    types = dict(
        par_file_key_width=int,
        par_file_float_format=str,
        allow_duplicate_parameters=bool,
        stations_delimiter=str,
        cmt_label_width=int)

    def __init__(self, **kwargs):
        values = dict(self.defaults)
        for k, v in kwargs.items():
            if k not in self.defaults:
                raise BadConfig('unknown config setting: %s' % k)

            typ = self.types[k]
            if not isinstance(v, typ) or (
                    typ is int and isinstance(v, bool)):
                raise BadConfig(
                    'config setting %s must be of type %s, got %r'
                    % (k, typ.__name__, v))

            values[k] = v

        self.__dict__.update(values)
        self.check()

    def check(self):
        if self.par_file_key_width < 0 or self.cmt_label_width < 0:
            raise BadConfig('field widths must not be negative')

        if not self.stations_delimiter.isspace():
            raise BadConfig(
                'stations delimiter must consist of whitespace, got %r'
                % self.stations_delimiter)

        try:
            util.fortran_float_to_str(1.0, self.par_file_float_format)
        except (TypeError, ValueError) as e:
            raise BadConfig(
                'invalid float format %r: %s'
                % (self.par_file_float_format, e))

    def as_dict(self):
        return dict((k, getattr(self, k)) for k in self.defaults)

    def get(self, k, override=None):
        if override is not None:
            return override

        return getattr(self, k)

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented

        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return 'Config(%s)' % ', '.join(
            '%s=%r' % item for item in self.as_dict().items())


g_conf = None


def config():
    '''
    Get the process wide default settings.
    '''

    global g_conf
    if g_conf is None:
        g_conf = Config()

    return g_conf


def set_config(conf):
    '''
    Replace the process wide default settings (``None`` resets).
    '''

    global g_conf
    if conf is not None and not isinstance(conf, Config):
        raise BadConfig('expected Config object, got %r' % (conf,))

    g_conf = copy.copy(conf)


def load_config(filename):
    '''
    Read settings from a YAML file.

    The file must contain a mapping of any subset of the settings of
    :py:class:`Config`, missing ones get their default values.
    '''

    with open(filename, 'r') as f:
        try:
            d = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BadConfig('cannot parse config file %s: %s' % (filename, e))

    if d is None:
        d = {}

    if not isinstance(d, dict):
        raise BadConfig(
            'config file %s does not contain a mapping' % filename)

    logger.debug('loaded config from %s' % filename)
    return Config(**d)


def write_config(conf, filename):
    '''
    Write all settings to a YAML file.
    '''

    util.ensuredirs(filename)
    with open(filename, 'w') as f:
        yaml.safe_dump(conf.as_dict(), f, default_flow_style=False)

# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
Read and write input files of the SPECFEM3D_GLOBE seismic wave propagation
software: event descriptions (CMTSOLUTION), receiver tables (STATIONS) and
simulation parameters (Par_file).

Most functionality is found in :py:mod:`specfemutils.io` and the data models
in :py:mod:`specfemutils.model`.
'''

try:
    from .info import *  # noqa
    __version__ = version  # noqa
except ImportError:
    pass  # not available in dev mode


def get_logger():
    import logging
    return logging.getLogger('specfemutils')


def app_init(log_level='info', program_name='specfemutils'):
    '''
    Setup logging for scripts using SPECFEMUtils.

    This is a shortcut for calling :py:func:`specfemutils.util.setup_logging`.
    '''

    from specfemutils import util
    util.setup_logging(program_name, log_level)

# SPECFEMUtils - GPLv3
#
# The SPECFEMUtils Developers, 21st Century
# ---|P------/S----------~Lg----------

'''
In-memory representations of the contents of SPECFEM input files: seismic
sources (CMTSOLUTION), receivers (STATIONS) and simulation parameters
(Par_file).
'''

from .cmtsolution import *  # noqa
from .station import *  # noqa
from .parameters import *  # noqa

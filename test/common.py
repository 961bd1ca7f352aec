import os
import shutil
import tempfile
import unittest
import logging

logger = logging.getLogger('specfemutils.test.common')


def test_data_file(fn):
    return os.path.join(os.path.split(__file__)[0], 'data', fn)


def read_file(fn):
    with open(fn, 'r') as f:
        return f.read()


class TempDirTestCase(unittest.TestCase):
    _tempdirs = []

    @classmethod
    def tearDownClass(cls):
        for tempdir in cls._tempdirs:
            shutil.rmtree(tempdir)

        cls._tempdirs[:] = []

    def make_tempdir(self):
        tempdir = tempfile.mkdtemp(prefix='specfemutils_test_')
        self._tempdirs.append(tempdir)
        return tempdir

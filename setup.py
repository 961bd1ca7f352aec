#!/usr/bin/env python3
import sys
import os
import os.path as op
import time

from setuptools import setup
from setuptools.command.build_py import build_py

packname = 'specfemutils'
version = '2025.03.04'


class NotInAGitRepos(Exception):
    pass


def git_infos():
    '''Query git about sha1 of last commit and check if there are local \
       modifications.'''

    from subprocess import run, PIPE
    import re

    def q(c):
        return run(c, stdout=PIPE, stderr=PIPE, check=True).stdout

    if not op.exists('.git'):
        raise NotInAGitRepos()

    sha1 = q(['git', 'log', '--pretty=oneline', '-n1']).split()[0]
    sha1 = re.sub(br'[^0-9a-f]', '', sha1)
    sha1 = str(sha1.decode('ascii'))
    sstatus = q(['git', 'status', '--porcelain', '-uno'])
    local_modifications = bool(sstatus.strip())
    return sha1, local_modifications


def print_e(*args):
    print(*args, file=sys.stderr)


def make_info_module(packname, version):
    '''Put version and revision information into file src/info.py.'''

    from subprocess import CalledProcessError

    sha1, local_modifications = None, None
    combi = '%s-%s' % (packname, version)
    try:
        sha1, local_modifications = git_infos()
        combi += '-%s' % sha1
        if local_modifications:
            combi += '-modified'

    except (OSError, CalledProcessError, NotInAGitRepos):
        print_e('Failed to include git commit ID into installation.')

    datestr = time.strftime('%Y-%m-%d_%H:%M:%S')
    combi += '-%s' % datestr

    s = '''# This module is automatically created from setup.py
"""
Version information (generated from setup.py).
"""
git_sha1 = %s
local_modifications = %s
version = %s
long_version = %s  # noqa
installed_date = %s
src_path = %s
''' % tuple([repr(x) for x in (
        sha1, local_modifications, version, combi, datestr,
        op.dirname(op.abspath(__file__)))])

    info_path = op.join('src', 'info.py')
    if os.path.exists(info_path):
        os.unlink(info_path)

    with open(info_path, 'w') as f:
        f.write(s)


class CustomBuildPyCommand(build_py):

    def run(self):
        make_info_module(packname, version)
        build_py.run(self)


subpacknames = [
    'specfemutils.io',
    'specfemutils.model',
]

cmdclass = {
    'build_py': CustomBuildPyCommand}


metadata = dict(
    description='Read and write SPECFEM3D_GLOBE input files '
                '(CMTSOLUTION, STATIONS, Par_file).',
    long_description=open('README.md', 'rb').read().decode('utf8'),
    long_description_content_type='text/markdown',
    author='The SPECFEMUtils Developers',
    license='GPL-3.0-or-later',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: POSIX',
        'Operating System :: MacOS',
        'Topic :: Scientific/Engineering',
        'Topic :: Scientific/Engineering :: Physics'],
    keywords=[
        'seismology, specfem, wave propagation, moment tensor, geophysics'],
    python_requires='>=3.10, <4',
    install_requires=[
        "numpy>=1.25,<3; python_version>'3.11'",
        "numpy>=1.16,<2; python_version<='3.11'",
        'pyyaml',
    ],

    extras_require={
        'test': ['pytest'],
    },
)


setup(
    cmdclass=cmdclass,
    name=packname,
    version=version,
    packages=[packname] + subpacknames,
    package_dir={'specfemutils': 'src'},
    include_package_data=False,
    **metadata,
)

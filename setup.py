#! /usr/bin/env python

descr = """floattraj: float trajectory maps for Python.

This package plots the trajectories of BGC-Argo floats on maps drawn
with cartopy, Basemap, or plain matplotlib axes.  Trajectories can be
colored by float or by the Data Assembly Center responsible for each
float, and figures can be saved as PNG images.

"""

DISTNAME            = 'floattraj'
DESCRIPTION         = 'BGC-Argo float trajectory plotting'
LONG_DESCRIPTION    = descr
LICENSE             = 'Modified BSD'
DOWNLOAD_URL        = ''
VERSION             = '0.1.0'
PYTHON_REQUIRES     = '>=3.8'
DEPENDENCIES        = {'numpy': (1, 17),
                       'pandas': (1, 0),
                       'matplotlib': (3, 3),
                       'basemap': (1, 3),
                       'cartopy': (0, 20),
                       'geopandas': (0, 8),
                       'shapely': (1, 7)}
TEST_DEPENDENCIES   = ['pytest']


import os
from setuptools import setup, find_packages


def install_requires():
    return ['%s>=%s' % (package_name, '.'.join(str(v) for v in min_version))
            for package_name, min_version in DEPENDENCIES.items()]


def write_version_py(filename='floattraj/version.py'):
    template = """# THIS FILE IS GENERATED FROM THE FLOATTRAJ SETUP.PY
version='%s'
"""

    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           filename), 'w') as vfile:
        vfile.write(template % VERSION)


if __name__ == '__main__':
    write_version_py()

    setup(
        name=DISTNAME,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        license=LICENSE,
        download_url=DOWNLOAD_URL,
        version=VERSION,
        python_requires=PYTHON_REQUIRES,

        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Intended Audience :: Developers',
            'Intended Audience :: Science/Research',
            'License :: OSI Approved :: BSD License',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Scientific/Engineering',
            'Operating System :: Microsoft :: Windows',
            'Operating System :: POSIX',
            'Operating System :: Unix',
            'Operating System :: MacOS'],

        install_requires=install_requires(),
        extras_require={'test': TEST_DEPENDENCIES},

        packages=find_packages(),
        include_package_data=True,
        zip_safe=False
    )

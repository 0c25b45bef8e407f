#!/usr/bin/env python3
"""
Setup script for yaml_types.

yaml_types is a pure Python extension of PyYAML's safe schema with
function, regexp and absent values. It builds no extension module; PyYAML
is the only runtime dependency.

Install:
    pip install .            # runtime only
    pip install -e '.[test]' # development, with pytest
"""

from setuptools import setup


def read_version():
    """Read __version__ from the package without importing it."""
    with open('yaml_types/__init__.py', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=', 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in yaml_types/__init__.py")


setup(
    name='yaml-types',
    version=read_version(),
    description='Function, regexp and absent values for PyYAML',
    python_requires='>=3.9',
    packages=['yaml_types'],
    install_requires=['PyYAML>=5.1'],
    extras_require={'test': ['pytest']},
)

#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

STYLEDIFF_PATH = HERE / "stylediff"


def get_version(path):
    "Read __version__ from a python file without importing it."
    version_ns = {}
    with open(path) as f:
        exec(f.read(), {}, version_ns)
    return version_ns['__version__']


VERSION = get_version(STYLEDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='stylediff',
      version=VERSION,
      description='Diff, migrate and validate map style documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(include=['stylediff', 'stylediff.*']),
      package_data={
          'stylediff': ['*.json'],
          'stylediff.reference': ['*.json'],
          'stylediff.tests': ['files/*.json'],
      },
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
              'jsonschema',
          ],
      },
      entry_points={
          'console_scripts': [
              'stylediff = stylediff.__main__:main_dispatch',
              'stylediff-diff = stylediff.stylediffapp:main',
          ],
      },
      )

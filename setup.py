#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

LCSDIFF_PATH = HERE / "lcsdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(LCSDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="lcsdiff",
      version=VERSION,
      description="Longest common subsequence edit scripts for sequences and collections",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(include=["lcsdiff", "lcsdiff.*"]),
      python_requires=">=3.7",
      install_requires=[
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "pytest-timeout",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
          "Topic :: Software Development :: Libraries",
      ],
    )

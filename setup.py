#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
import pathlib
import re

from setuptools import setup, find_packages

HERE = pathlib.Path(__file__).parent.absolute()

DOCPATCH_PATH = HERE / "docpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(DOCPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="docpatch",
      version=VERSION,
      description="Pointer and query addressing and RFC 6902 patching of json documents",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["docpatch", "docpatch.*"]),
      package_data={
          "docpatch": ["*.schema.json"],
          "docpatch.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "docpatch = docpatch.__main__:main_dispatch",
              "docpatch-apply = docpatch.applyapp:main",
              "docpatch-query = docpatch.queryapp:main",
          ],
      },
      )

# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from docpatch import log


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def library(filespath):
    with io.open(pjoin(filespath, 'library.json'), encoding="utf8") as f:
        return json.load(f)


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(log.logger.root.handlers)
    level = log.logger.level
    log.logger.root.handlers[:] = []
    yield
    log.logger.root.handlers[:] = handlers
    log.logger.setLevel(level)

# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture

from stylediff import config as stylediff_config
from stylediff.reference import load_reference


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
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory, without any user or system config files."""
    monkeypatch.setattr(stylediff_config, 'config_path', lambda: [str(tmpdir)])
    with tmpdir.as_cwd():
        yield tmpdir


@fixture(scope='session')
def reference():
    return load_reference(8)


@fixture(scope='session')
def json_schema_operations():
    schema_path = os.path.join(schema_dir, 'operations.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture(scope='session')
def operations_validator(json_schema_operations):
    return Validator(json_schema_operations)

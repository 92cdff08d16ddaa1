# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig Testing Framework
------------------------------

All test modules must be named test_modulename to be included in the
test suite. Tests live in a _tests package next to the code they test.

Tests that require a certain configuration must override the cfg fixture
with a DefaultConfig subclass.
"""

import os

import pytest

import rightsconfig
import rightsconfig.log
from rightsconfig.app import create_app_ext
from rightsconfig.config.default import DefaultConfig


# Logging for tests to avoid useless output on stderr on test failures
config_file = os.path.join(os.path.dirname(rightsconfig.__file__), "_tests", "test_logging.conf")
rightsconfig.log.load_config(config_file)


@pytest.fixture
def cfg():
    return DefaultConfig


@pytest.fixture
def app_ctx(cfg):
    app = create_app_ext(flask_config_dict=dict(TESTING=True), rights_config_class=cfg)
    ctx = app.test_request_context("/", base_url="http://localhost:8080/")
    ctx.push()

    yield app, ctx

    ctx.pop()


@pytest.fixture(autouse=True)
def app(app_ctx):
    return app_ctx[0]

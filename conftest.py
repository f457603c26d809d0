from __future__ import absolute_import

import os.path
import pytest

from yeller import base


@pytest.fixture
def project_root():
    return os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for name in ('YELLER_API_KEY', 'YELLER_ENVIRONMENT', 'YELLER_HOSTNAMES'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_global_client():
    yield
    base.Yeller = None

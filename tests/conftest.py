import time

import pytest
from zoneinfo import ZoneInfo

from dtstamp import config
from dtstamp import vlogging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for variable in config.ENVIRONMENT_VARIABLES.values():
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture(autouse=True)
def restore_root_handlers():
    handlers = list(vlogging.root.handlers)
    yield
    vlogging.root.handlers[:] = handlers


@pytest.fixture
def new_york():
    return ZoneInfo('America/New_York')


@pytest.fixture
def local_new_york(monkeypatch):
    '''Make the system local timezone America/New_York for the test.'''
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset is not available on this platform')
    monkeypatch.setenv('TZ', 'America/New_York')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()

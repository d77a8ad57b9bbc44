import logging

import pytest

from flexformat import FlexibleFormatter


@pytest.fixture
def logger():
    log = logging.getLogger("test")
    log.setLevel(logging.INFO)
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.propagate = True
    log.setLevel(logging.NOTSET)


@pytest.fixture
def formatter():
    fmt = FlexibleFormatter()
    yield fmt
    fmt.detach_all()

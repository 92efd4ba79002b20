import logging

import pytest

from tests.utils import make_user


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture the selection system's debug logs so failing tests show every ignored reaction."""
    caplog.set_level(logging.DEBUG, logger="interactivity")


@pytest.fixture
def user():
    return make_user(42)


@pytest.fixture
def stranger():
    return make_user(7)

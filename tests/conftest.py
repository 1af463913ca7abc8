from unittest.mock import Mock

import pytest

from optbox import reset_logging


@pytest.fixture
def callback() -> Mock:
    """A recording callable that returns None."""
    return Mock(return_value=None)


@pytest.fixture(autouse=True)
def _mute_logging():
    yield
    reset_logging()

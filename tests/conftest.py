import pytest

from greatcircle_core import GreatCircle
from greatcircle_core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; reload them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def great_circle():
    return GreatCircle()

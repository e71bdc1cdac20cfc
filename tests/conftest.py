import pytest

from daybreak.catalog.rooms import load_catalog
from daybreak.session.controller import GameSession
from daybreak.session.state import initial_state


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def state():
    return initial_state()


@pytest.fixture
def session(catalog):
    return GameSession(catalog=catalog)

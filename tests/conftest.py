import pytest

from ygo_hand_sim.models.card import Card, CardDetails
from ygo_hand_sim.models.deck import build_deck
from ygo_hand_sim.settings import Settings
from ygo_hand_sim.simulation_io import SimulationIO
from tests.helpers import get_sample_data_path


@pytest.fixture
def sample_yaml_path():
    return get_sample_data_path("sample_simulation.yaml")


@pytest.fixture
def sample_ydk_path():
    return get_sample_data_path("sample_deck.ydk")


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def sim_io(settings):
    """A fresh SimulationIO per test so cached loads never leak between tests."""
    return SimulationIO(settings)


@pytest.fixture
def small_deck():
    """CardX three times, CardY once, plus padding."""
    return build_deck(
        {
            "CardX": {"qty": 3, "tags": ["starter"], "free": True},
            "CardY": {"qty": 1, "tags": []},
        },
        min_size=6,
    )


@pytest.fixture
def make_card():
    def _make(name, tags=None, free=False):
        return Card(name=name, details=CardDetails(qty=1, tags=tags or [], free=free))
    return _make

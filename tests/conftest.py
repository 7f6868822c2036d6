import pytest

from survey_engine import InMemoryPreferencesStore, Stop, SurveyEngine

from factories import NOW


@pytest.fixture
def store():
    return InMemoryPreferencesStore()


@pytest.fixture
def engine(store):
    return SurveyEngine(store, clock=lambda: NOW)


@pytest.fixture
def stop():
    return Stop(id="1_75403", route_ids={"1_100224", "40_100236"})

from datetime import datetime

import pytest
import structlog

from people_model.config import get_settings
from people_model.domain.clock import FixedClock
from people_model.domain.groups import People
from people_model.domain.names import Name
from people_model.domain.person import Person

NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_settings_and_logging():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def jon_doe(clock: FixedClock) -> Person:
    return (
        Person(Name.of("Jon", "R", "Doe"), clock=clock)
        .born(datetime(1974, 5, 27))
        .as_male()
    )


@pytest.fixture
def jane_doe(clock: FixedClock) -> Person:
    return (
        Person(Name.of("Jane", "R", "Doe"), clock=clock)
        .born(datetime(1975, 1, 22))
        .as_female()
    )


def _doe(clock: FixedClock, first_name: str, age: int, *, female: bool = False) -> Person:
    person = Person(Name.of(first_name, "Doe"), clock=clock).aged(age)
    return person.as_female() if female else person.as_male()


@pytest.fixture
def cookie_doe(clock: FixedClock) -> Person:
    return _doe(clock, "Cookie", 9, female=True)


@pytest.fixture
def fro_doe(clock: FixedClock) -> Person:
    return _doe(clock, "Fro", 21)


@pytest.fixture
def joe_doe(clock: FixedClock) -> Person:
    return Person(Name.of("Joe", "R", "Doe"), clock=clock).aged(28).as_male()


@pytest.fixture
def lan_doe(clock: FixedClock) -> Person:
    return _doe(clock, "Lan", 29)


@pytest.fixture
def pie_doe(clock: FixedClock) -> Person:
    return _doe(clock, "Pie", 16, female=True)


@pytest.fixture
def sour_doe(clock: FixedClock) -> Person:
    return _doe(clock, "Sour", 13)


@pytest.fixture
def family(
    jon_doe: Person,
    jane_doe: Person,
    cookie_doe: Person,
    fro_doe: Person,
    joe_doe: Person,
    lan_doe: Person,
    pie_doe: Person,
    sour_doe: Person,
) -> People:
    return People.of(
        jon_doe, jane_doe, cookie_doe, fro_doe, joe_doe, lan_doe, pie_doe, sour_doe
    )

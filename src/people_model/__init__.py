from people_model.domain.clock import FixedClock, SystemClock
from people_model.domain.groups import Group, People
from people_model.domain.names import Name
from people_model.domain.person import Person
from people_model.domain.value_objects import Gender
from people_model.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NameFormatError,
    PeopleModelError,
)

__all__ = [
    "FixedClock",
    "Gender",
    "Group",
    "InvalidArgumentError",
    "InvalidStateError",
    "Name",
    "NameFormatError",
    "People",
    "PeopleModelError",
    "Person",
    "SystemClock",
]

__version__ = "0.1.0"

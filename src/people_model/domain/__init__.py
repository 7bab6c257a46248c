from people_model.domain.clock import Clock, FixedClock, SystemClock, get_clock
from people_model.domain.groups import Group, People
from people_model.domain.name_parser import ParsedName, parse_name
from people_model.domain.names import Name
from people_model.domain.person import Person
from people_model.domain.value_objects import UNKNOWN, Gender

__all__ = [
    "Clock",
    "FixedClock",
    "Gender",
    "Group",
    "Name",
    "ParsedName",
    "People",
    "Person",
    "SystemClock",
    "UNKNOWN",
    "get_clock",
    "parse_name",
]

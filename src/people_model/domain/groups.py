"""Groups of entities and the set algebra shared by all of them.

Group[T] needs only two things from a concrete collection: iteration and a way
to discard a member. Searching, counting, union, intersection, difference and
removal are derived from those. Membership tests scan the other group
linearly; these are small in-memory collections with no secondary index.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from people_model.domain.person import Person
from people_model.exceptions import InvalidArgumentError, require
from people_model.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

GroupId = int | UUID

EMPTY_NON_IDENTIFIED_GROUP = "EMPTY NON-IDENTIFIED GROUP"
NON_IDENTIFIED_GROUP = "NON-IDENTIFIED GROUP"


def _require_predicate(predicate: Callable[[T], bool] | None) -> Callable[[T], bool]:
    return require(predicate, "Predicate is required")


class Group(ABC, Generic[T]):
    """A named, identifiable, iterable collection of entities."""

    def __init__(self, *, id: GroupId | None = None, name: str | None = None) -> None:
        self._id = id
        self._name = name

    @staticmethod
    def generate_id() -> UUID:
        return uuid4()

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def discard(self, member: T) -> None:
        """Remove member from the underlying storage if present."""

    # -- identity -----------------------------------------------------------

    @property
    def id(self) -> GroupId | None:
        return self._id

    @id.setter
    def id(self, value: GroupId | None) -> None:
        self._id = value

    @property
    def is_new(self) -> bool:
        return self._id is None

    @property
    def is_not_new(self) -> bool:
        return not self.is_new

    def identified_by(self, id: GroupId | None) -> "Group[T]":
        self.id = id
        return self

    @property
    def name(self) -> str | None:
        if self._name and self._name.strip():
            return self._name
        if self._id is not None:
            return f"GROUP ID [{self._id}]"
        return self._default_name()

    @name.setter
    def name(self, value: str | None) -> None:
        self._name = value

    def named(self, name: str | None) -> "Group[T]":
        self.name = name
        return self

    def _default_name(self) -> str | None:
        return None

    # -- size ---------------------------------------------------------------

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def size(self) -> int:
        return len(self)

    @property
    def is_empty(self) -> bool:
        return self.find_one(lambda member: True) is None

    @property
    def is_not_empty(self) -> bool:
        return not self.is_empty

    def stream(self) -> Iterator[T]:
        return iter(self)

    # -- queries ------------------------------------------------------------

    def __contains__(self, member: object) -> bool:
        return self.contains(member)

    def contains(self, member: Any) -> bool:
        if member is None:
            return False
        return self.find_one(lambda element: element == member) is not None

    def count(self, predicate: Callable[[T], bool]) -> int:
        predicate = _require_predicate(predicate)
        return sum(1 for member in self if predicate(member))

    def find_by(self, predicate: Callable[[T], bool]) -> set[T]:
        predicate = _require_predicate(predicate)
        return {member for member in self if predicate(member)}

    def find_one(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first member in iteration order matching predicate."""
        predicate = _require_predicate(predicate)
        return next((member for member in self if predicate(member)), None)

    # -- set algebra --------------------------------------------------------

    def difference(self, other: "Group[T]") -> set[T]:
        require(other, "Group used in set difference is required")
        return self.find_by(lambda member: not other.contains(member))

    def intersection(self, other: "Group[T]") -> set[T]:
        require(other, "Group used in intersection is required")
        return self.find_by(other.contains)

    def union(self, other: "Group[T] | None") -> set[T]:
        members = {member for member in self if member is not None}
        if other is not None:
            members.update(member for member in other if member is not None)
        return members

    # -- removal ------------------------------------------------------------

    def leave(self, member: T | None) -> bool:
        if member is None:
            return False
        match = self.find_one(lambda element: element == member)
        if match is None:
            return False
        self.discard(match)
        return True

    def leave_where(self, predicate: Callable[[T], bool]) -> bool:
        predicate = _require_predicate(predicate)
        matches = [member for member in self if predicate(member)]
        for member in matches:
            self.discard(member)
        return bool(matches)

    def accept(self, visitor: Callable[[Any], Any]) -> None:
        """Visit every member, letting members with an accept() dispatch themselves."""
        for member in self:
            accept = getattr(member, "accept", None)
            if callable(accept):
                accept(visitor)
            else:
                visitor(member)


class People(Group[Person]):
    """A group of distinct people, iterated in natural Person order."""

    def __init__(
        self,
        people: Iterable[Person | None] | None = None,
        *,
        id: GroupId | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(id=id, name=name)
        self._members: list[Person] = []
        for person in people or ():
            self._add(person)

    @classmethod
    def empty(cls) -> "People":
        return cls()

    @classmethod
    def of(cls, *people: Person | None) -> "People":
        return cls(people)

    @classmethod
    def from_iterable(cls, people: Iterable[Person | None] | None) -> "People":
        return cls(people)

    @classmethod
    def one(cls, person: Person) -> "People":
        return cls([require(person, "Single Person is required")])

    def __iter__(self) -> Iterator[Person]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    @property
    def is_empty(self) -> bool:
        return not self._members

    def _add(self, person: Person | None) -> bool:
        if person is None or self.contains(person):
            return False
        self._members.append(person)
        return True

    def join(self, person: Person | None) -> bool:
        joined = self._add(person)
        if joined:
            logger.debug(
                "person_joined_group",
                group=self.name,
                person=str(person.name),
            )
        return joined

    def discard(self, person: Person) -> None:
        if person in self._members:
            self._members.remove(person)
            logger.debug(
                "person_left_group",
                group=self.name,
                person=str(person.name),
            )

    def _default_name(self) -> str:
        last_names = {person.last_name for person in self._members}
        if len(last_names) == 1:
            return f"GROUP of [{last_names.pop()}]"
        if not self._members:
            return EMPTY_NON_IDENTIFIED_GROUP
        return NON_IDENTIFIED_GROUP

    def __str__(self) -> str:
        return "[" + "; ".join(person.name.index_name for person in self) + "]"

    def __repr__(self) -> str:
        return f"People(id={self._id!r}, name={self._name!r}, members={self})"

"""Person entity: a named individual with an optional lifetime on the clock.

Equality and hashing use only the birth date and the name. Two records of
someone born with the same name on the same date are the same identity, no
matter which id, version, gender or date of death they carry.
"""

from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any
from uuid import UUID

from dateutil.relativedelta import relativedelta  # type: ignore[import-untyped]

from people_model.domain.clock import Clock, get_clock, normalize_instant
from people_model.domain.names import Name
from people_model.domain.value_objects import UNKNOWN, Gender
from people_model.exceptions import (
    InvalidArgumentError,
    InvalidDateError,
    InvalidStateError,
    require,
)
from people_model.logging_config import get_logger

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%d %I:%M %p"


def _coerce_instant(value: datetime | date | str | None) -> datetime | None:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid date [{value}]") from e
    if value is not None and not isinstance(value, date):
        raise InvalidArgumentError(f"Invalid date [{value!r}]")
    return normalize_instant(value)


def _coerce_gender(value: Gender | str | None) -> Gender | None:
    if value is None:
        return None
    try:
        return Gender(value)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid gender [{value}]") from e


def _years_between(start: datetime, end: datetime) -> int:
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class Person:
    ADULT_AGE = 18
    TEENAGE = 13

    def __init__(
        self,
        name: Name,
        birth_date: datetime | date | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        if not isinstance(name, Name):
            raise InvalidArgumentError("Name is required")
        self._name = name
        self._clock = clock or get_clock()
        self._birth_date: datetime | None = None
        self._date_of_death: datetime | None = None
        self._gender: Gender | None = None
        self._id: int | None = None
        self._version: UUID | None = None
        self.birth_date = birth_date

    # -- factories ----------------------------------------------------------

    @classmethod
    def new(
        cls,
        name: Name | str,
        birth_date: datetime | date | None = None,
        *,
        clock: Clock | None = None,
    ) -> "Person":
        """Create a Person from a Name or from free text such as "Dr. Jon Bloom"."""
        if isinstance(name, str):
            name = Name.parse(name)
        return cls(name, birth_date, clock=clock)

    @classmethod
    def of(
        cls,
        first_name: str,
        last_name: str,
        birth_date: datetime | date | None = None,
        *,
        clock: Clock | None = None,
    ) -> "Person":
        return cls(Name.of(first_name, last_name), birth_date, clock=clock)

    @classmethod
    def from_person(cls, person: "Person") -> "Person":
        """Copy name, birth date and gender; id, version and death are not carried."""
        require(person, "Person to copy is required")
        return cls(
            Name.from_name(person.name), person.birth_date, clock=person.clock
        ).as_gender(person.gender)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], *, clock: Clock | None = None
    ) -> "Person":
        require(data, "Person data is required")
        name = data.get("name")
        if isinstance(name, Mapping):
            name = Name.from_dict(name)
        person = cls.new(require(name, "Name is required"), clock=clock)
        person.birth_date = _coerce_instant(data.get("birth_date"))
        person.date_of_death = _coerce_instant(data.get("date_of_death"))
        person.gender = data.get("gender")
        return person

    # -- identity -----------------------------------------------------------

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def id(self) -> int | None:
        return self._id

    @id.setter
    def id(self, value: int | None) -> None:
        self._id = value

    @property
    def is_new(self) -> bool:
        return self._id is None

    @property
    def is_not_new(self) -> bool:
        return not self.is_new

    @property
    def version(self) -> UUID:
        if self._version is None:
            raise InvalidStateError(f"Version [{self._version}] was not initialized")
        return self._version

    @version.setter
    def version(self, value: UUID | None) -> None:
        self._version = value

    @property
    def name(self) -> Name:
        return self._name

    @property
    def first_name(self) -> str:
        return self._name.first_name

    @property
    def middle_name(self) -> str | None:
        return self._name.middle_name

    @property
    def last_name(self) -> str:
        return self._name.last_name

    # -- lifetime -----------------------------------------------------------

    @property
    def birth_date(self) -> datetime | None:
        return self._birth_date

    @birth_date.setter
    def birth_date(self, value: datetime | date | None) -> None:
        birth_date = _coerce_instant(value)
        if birth_date is not None:
            now = self._clock.now()
            if birth_date > now:
                raise InvalidDateError(
                    f"Birth date [{birth_date.strftime(DATE_FORMAT)}]"
                    f" must be on or before today [{now.strftime(DATE_FORMAT)}]",
                    context={"birth_date": birth_date.isoformat()},
                )
        self._birth_date = birth_date

    @property
    def date_of_death(self) -> datetime | None:
        return self._date_of_death

    @date_of_death.setter
    def date_of_death(self, value: datetime | date | None) -> None:
        date_of_death = _coerce_instant(value)
        if date_of_death is not None:
            if self._birth_date is not None and date_of_death < self._birth_date:
                raise InvalidDateError(
                    f"Date of death [{date_of_death.strftime(DATE_FORMAT)}]"
                    " cannot be before the person's date of birth"
                    f" [{self._birth_date.strftime(DATE_FORMAT)}]",
                    context={"date_of_death": date_of_death.isoformat()},
                )
            if date_of_death > self._clock.now():
                raise InvalidDateError(
                    f"A person's date of death [{date_of_death.strftime(DATE_FORMAT)}]"
                    " cannot be known in the future",
                    context={"date_of_death": date_of_death.isoformat()},
                )
        self._date_of_death = date_of_death

    @property
    def gender(self) -> Gender | None:
        return self._gender

    @gender.setter
    def gender(self, value: Gender | str | None) -> None:
        self._gender = _coerce_gender(value)

    @property
    def age(self) -> int | None:
        """Whole years lived, up to the date of death if there is one."""
        if self._birth_date is None:
            return None
        end = self._date_of_death or self._clock.now()
        return max(_years_between(self._birth_date, end), 0)

    @property
    def is_alive(self) -> bool:
        return self._date_of_death is None

    @property
    def is_born(self) -> bool:
        return self._birth_date is not None and self._birth_date < self._clock.now()

    @property
    def is_child(self) -> bool:
        age = self.age
        return age is not None and age < self.TEENAGE

    @property
    def is_teenager(self) -> bool:
        age = self.age
        return age is not None and self.TEENAGE <= age < self.ADULT_AGE

    @property
    def is_adult(self) -> bool:
        age = self.age
        return age is not None and age >= self.ADULT_AGE

    @property
    def is_female(self) -> bool:
        return self._gender is not None and self._gender.is_female

    @property
    def is_male(self) -> bool:
        return self._gender is not None and self._gender.is_male

    @property
    def is_non_binary(self) -> bool:
        return self._gender is not None and self._gender.is_non_binary

    # -- fluent mutators ----------------------------------------------------

    def aged(self, years: int) -> "Person":
        """Set the birth date to exactly ``years`` ago."""
        if years < 0:
            raise InvalidArgumentError(f"Age [{years}] must be greater than equal to 0")
        return self.born(self._clock.now() - relativedelta(years=years))

    def as_gender(self, gender: Gender | str | None) -> "Person":
        self.gender = gender
        return self

    def as_female(self) -> "Person":
        return self.as_gender(Gender.FEMALE)

    def as_male(self) -> "Person":
        return self.as_gender(Gender.MALE)

    def as_non_binary(self) -> "Person":
        return self.as_gender(Gender.NON_BINARY)

    def born(self, birth_date: datetime | date | None) -> "Person":
        self.birth_date = birth_date
        return self

    def died(self, date_of_death: datetime | date | None) -> "Person":
        self.date_of_death = date_of_death
        return self

    def identified_by(self, id: int | None) -> "Person":
        self.id = id
        return self

    def at_version(self, version: UUID | None) -> "Person":
        self.version = version
        return self

    def change(self, name: Name | str | None) -> "Person":
        """Fork a new, unsaved Person under a different name.

        A str is taken as a new last name. The fork keeps the birth date but
        has no id or version.
        """
        if name is None:
            raise InvalidArgumentError("Name is required")
        if isinstance(name, str):
            name = self._name.change(name)
        forked = Person(name, self._birth_date, clock=self._clock)
        logger.debug(
            "person_identity_forked",
            source=str(self._name),
            target=str(name),
        )
        return forked

    # -- object protocol ----------------------------------------------------

    def accept(self, visitor: Callable[["Person"], Any]) -> None:
        visitor(self)

    def clone(self) -> "Person":
        return Person.from_person(self)

    __copy__ = clone

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name.to_dict(),
            "birth_date": self._birth_date.isoformat() if self._birth_date else None,
            "date_of_death": (
                self._date_of_death.isoformat() if self._date_of_death else None
            ),
            "gender": self._gender.value if self._gender else None,
        }

    def _sort_key(self) -> tuple[Any, ...]:
        # People without a birth date sort ahead of those with one.
        return (
            self._name._sort_key(),
            self._birth_date is not None,
            self._birth_date or datetime.min,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self._birth_date == other._birth_date and self._name == other._name

    def __hash__(self) -> int:
        return hash((self._birth_date, self._name))

    def __lt__(self, other: "Person") -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "Person") -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "Person") -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "Person") -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return (
            f"Person(first_name={self.first_name},"
            f" middle_name={self.middle_name or UNKNOWN},"
            f" last_name={self.last_name},"
            f" birth_date={self._format(self._birth_date)},"
            f" date_of_death={self._format(self._date_of_death)},"
            f" gender={str(self._gender) if self._gender else UNKNOWN})"
        )

    __repr__ = __str__

    @staticmethod
    def _format(value: datetime | None) -> str:
        return value.strftime(DATE_TIME_FORMAT) if value else UNKNOWN

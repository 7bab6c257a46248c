from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from people_model.domain.name_parser import parse_name
from people_model.exceptions import InvalidArgumentError, require


def _required(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(message)
    return str(value).strip()


def _optional(value: str | None) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


@dataclass(frozen=True, slots=True)
class Name:
    """A person's first, optional middle, and last name.

    Equality covers all three parts. Ordering is by last name, then first
    name; the middle name does not take part in ordering.
    """

    first_name: str
    middle_name: str | None
    last_name: str

    def __init__(
        self, first_name: str, middle_name: str | None, last_name: str
    ) -> None:
        object.__setattr__(
            self, "first_name", _required(first_name, "First name is required")
        )
        object.__setattr__(self, "middle_name", _optional(middle_name))
        object.__setattr__(
            self, "last_name", _required(last_name, "Last name is required")
        )

    @classmethod
    def of(cls, first_name: str, *names: str | None) -> "Name":
        """Name.of("Jon", "Bloom") or Name.of("Jon", "Jason", "Bloom")."""
        if len(names) == 1:
            return cls(first_name, None, names[0])
        if len(names) == 2:
            return cls(first_name, names[0], names[1])
        raise InvalidArgumentError(
            f"Expected a first, optional middle and last name; got {1 + len(names)} parts"
        )

    @classmethod
    def parse(cls, text: str | None) -> "Name":
        parsed = parse_name(text)
        return cls(parsed.first_name, parsed.middle_name, parsed.last_name)

    @classmethod
    def from_name(cls, source: Any) -> "Name":
        """Copy a Name, or the Name held by any object with a ``name`` attribute."""
        if isinstance(source, Name):
            return replace(source)
        if source is None:
            raise InvalidArgumentError("Name to copy is required")
        name = getattr(source, "name", None)
        if not isinstance(name, Name):
            raise InvalidArgumentError(f"[{source!r}] does not hold a Name")
        return replace(name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Name":
        require(data, "Name data is required")
        return cls(data.get("first_name"), data.get("middle_name"), data.get("last_name"))

    @property
    def name(self) -> "Name":
        return self

    @property
    def index_name(self) -> str:
        """The name as it appears in an index: "Bloom, Jon J"."""
        given = " ".join(part for part in (self.first_name, self.middle_name) if part)
        return f"{self.last_name}, {given}"

    def change(self, last_name: str | None) -> "Name":
        return Name(self.first_name, self.middle_name, last_name)

    def like(self, other: "Name | None") -> bool:
        """True when either the first names or the last names match."""
        if other is None:
            return False
        return self.first_name == other.first_name or self.last_name == other.last_name

    def accept(self, visitor: Callable[["Name"], Any]) -> None:
        visitor(self)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "first_name": self.first_name,
            "middle_name": self.middle_name,
            "last_name": self.last_name,
        }

    def _sort_key(self) -> tuple[str, str]:
        return (self.last_name, self.first_name)

    def __lt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: "Name") -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return " ".join(
            part for part in (self.first_name, self.middle_name, self.last_name) if part
        )

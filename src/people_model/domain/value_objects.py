from enum import Enum

UNKNOWN = "Unknown"


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    NON_BINARY = "non_binary"

    @property
    def is_female(self) -> bool:
        return self is Gender.FEMALE

    @property
    def is_male(self) -> bool:
        return self is Gender.MALE

    @property
    def is_non_binary(self) -> bool:
        return self is Gender.NON_BINARY

    def __str__(self) -> str:
        return self.value.replace("_", "-").title()


__all__ = [
    "Gender",
    "UNKNOWN",
]

from datetime import datetime
from uuid import uuid4

import pytest

from people_model.domain.clock import FixedClock
from people_model.domain.groups import People
from people_model.domain.person import Person
from people_model.exceptions import InvalidArgumentError


@pytest.fixture
def jack_handy(clock: FixedClock) -> Person:
    return Person.of("Jack", "Handy", clock=clock).aged(40).as_male()


class TestPeopleCreation:
    def test_empty(self):
        people = People.empty()

        assert len(people) == 0
        assert people.is_empty is True
        assert list(people) == []

    def test_of_people_sorts_in_natural_order(
        self, jon_doe, jane_doe, cookie_doe, fro_doe, joe_doe, lan_doe, pie_doe, sour_doe
    ):
        people = People.of(
            jon_doe, jane_doe, cookie_doe, fro_doe, joe_doe, lan_doe, pie_doe, sour_doe
        )

        assert len(people) == 8
        assert list(people) == [
            cookie_doe,
            fro_doe,
            jane_doe,
            joe_doe,
            jon_doe,
            lan_doe,
            pie_doe,
            sour_doe,
        ]

    def test_order_does_not_depend_on_insertion_order(self, family, jon_doe, cookie_doe):
        reversed_family = People.from_iterable(reversed(list(family)))

        assert list(reversed_family) == list(family)
        assert list(family)[0] == cookie_doe
        assert list(family)[4] == jon_doe

    def test_of_one_person(self, jon_doe):
        assert list(People.of(jon_doe)) == [jon_doe]

    def test_of_no_people(self):
        assert People.of().is_empty

    def test_of_none_is_none_safe(self):
        assert People.of(None).is_empty

    def test_from_iterable(self, jon_doe, jane_doe):
        assert list(People.from_iterable([jon_doe, jane_doe])) == [jane_doe, jon_doe]

    def test_from_none_iterable_is_none_safe(self):
        assert People.from_iterable(None).is_empty

    def test_duplicates_are_collapsed(self, jon_doe, jane_doe):
        people = People.of(jon_doe, jane_doe, Person.from_person(jon_doe), jon_doe)

        assert len(people) == 2

    def test_one(self, jon_doe):
        assert list(People.one(jon_doe)) == [jon_doe]

    def test_one_without_person_raises(self):
        with pytest.raises(InvalidArgumentError, match="^Single Person is required$"):
            People.one(None)


class TestPeopleIdentityAndName:
    def test_set_and_get_id(self):
        id_one, id_two = uuid4(), uuid4()
        people = People.empty()

        assert people.id is None
        assert people.is_new

        people.id = id_one

        assert people.id == id_one
        assert people.is_not_new
        assert people.identified_by(id_two) is people
        assert people.id == id_two

        people.id = None

        assert people.is_new

    def test_name_when_set(self, jon_doe, jane_doe):
        people = People.of(jon_doe, jane_doe).named("Doe Does").identified_by(uuid4())

        assert people.name == "Doe Does"

    def test_name_when_unset_uses_id(self, jon_doe, jane_doe):
        id = uuid4()

        people = People.of(jon_doe, jane_doe).named("  ").identified_by(id)

        assert people.name == f"GROUP ID [{id}]"

    def test_name_when_unset_without_id_uses_single_last_name(self, jon_doe, jane_doe):
        people = People.of(jon_doe, jane_doe).named("").identified_by(None)

        assert people.name == "GROUP of [Doe]"

    def test_name_of_empty_group(self):
        people = People.empty().named(None).identified_by(None)

        assert people.name == "EMPTY NON-IDENTIFIED GROUP"

    def test_name_of_mixed_group(self, jon_doe, jack_handy):
        assert People.of(jon_doe, jack_handy).name == "NON-IDENTIFIED GROUP"

    def test_constructor_accepts_id_and_name(self, jon_doe):
        people = People([jon_doe], id=3, name="Jon")

        assert people.id == 3
        assert people.name == "Jon"


class TestPeopleMembership:
    def test_join(self, jon_doe, jane_doe, pie_doe, jack_handy, clock: FixedClock):
        people = People.of(jon_doe, jane_doe, pie_doe)

        assert people.join(jack_handy) is True
        assert list(people) == [jane_doe, jon_doe, pie_doe, jack_handy]

        albert_einstein = (
            Person.of("Albert", "Einstein", clock=clock).born(datetime(1879, 3, 14)).as_male()
        )

        assert people.join(albert_einstein) is True
        assert list(people) == [jane_doe, jon_doe, pie_doe, albert_einstein, jack_handy]

        ima_pigg = Person.of("Ima", "Pigg", clock=clock).born(datetime(1945, 7, 1)).as_female()

        assert people.join(ima_pigg) is True
        assert len(people) == 6
        assert list(people)[-1] == ima_pigg

    def test_join_none_is_none_safe(self, jon_doe, jane_doe):
        people = People.of(jon_doe, jane_doe)

        assert people.join(None) is False
        assert len(people) == 2

    def test_join_existing_person(self, jon_doe):
        people = People.of(jon_doe)
        clone = Person.from_person(jon_doe)

        assert clone == jon_doe
        assert people.join(clone) is False
        assert len(people) == 1
        assert all(person is not clone for person in people)

    def test_leave(self, family, jane_doe, cookie_doe, pie_doe, sour_doe):
        for person in (jane_doe, cookie_doe, pie_doe, sour_doe):
            assert family.leave(person) is True, f"Failed to remove person [{person}]"

        assert [person.first_name for person in family] == ["Fro", "Joe", "Jon", "Lan"]

    def test_leave_single_person(self, family, joe_doe):
        assert family.leave(joe_doe) is True
        assert len(family) == 7
        assert joe_doe not in family

    def test_leave_empty_group(self, jon_doe):
        assert People.empty().leave(jon_doe) is False

    def test_leave_none_is_none_safe(self, family):
        assert family.leave(None) is False
        assert len(family) == 8

    def test_leave_where_without_matches(self, family):
        assert family.leave_where(lambda person: person.last_name == "Handy") is False
        assert len(family) == 8

    def test_leave_where(self, family):
        assert family.leave_where(lambda person: person.is_child) is True
        assert [person.first_name for person in family] == [
            "Fro",
            "Jane",
            "Joe",
            "Jon",
            "Lan",
            "Pie",
            "Sour",
        ]

    def test_leave_person_without_birth_date_or_gender(self, clock: FixedClock):
        jack_handy = Person.of("Jack", "Handy", clock=clock)
        people = People.of(jack_handy)

        assert people.leave(jack_handy) is True
        assert people.is_empty

    def test_size_matches_distinct_people_supplied(self, family, jon_doe, jane_doe):
        supplied = [*family, jon_doe, Person.from_person(jane_doe)]

        assert len(People.from_iterable(supplied)) == len(set(supplied)) == 8


class TestPeopleQueries:
    def test_find_adults(self, family, jon_doe, jane_doe, fro_doe, joe_doe, lan_doe):
        adults = family.find_by(lambda person: (person.age or 0) >= 18)

        assert adults == {jon_doe, jane_doe, fro_doe, joe_doe, lan_doe}
        assert family.find_by(lambda person: person.is_adult) == adults

    def test_find_females(self, family, jane_doe, cookie_doe, pie_doe):
        assert family.find_by(lambda person: person.is_female) == {
            jane_doe,
            cookie_doe,
            pie_doe,
        }

    def test_find_male_minors(self, family, sour_doe):
        assert family.find_by(
            lambda person: person.is_male and (person.age or 0) < 18
        ) == {sour_doe}

    def test_find_nobody(self, family):
        assert family.find_by(lambda person: person.last_name == "Handy") == set()

    def test_find_one_in_natural_order(self, family, cookie_doe):
        assert family.find_one(lambda person: person.is_female) == cookie_doe

    def test_find_one_finds_nobody(self, family):
        assert family.find_one(lambda person: person.last_name == "Handy") is None

    def test_count_teenagers(self, family):
        assert family.count(lambda person: person.is_teenager) == 2

    def test_set_algebra_between_families(self, family, jon_doe, jane_doe, jack_handy):
        parents = People.of(jon_doe, jane_doe, jack_handy)

        assert family.intersection(parents) == {jon_doe, jane_doe}
        assert parents.difference(family) == {jack_handy}
        assert len(family.union(parents)) == 9


class TestPeopleRendering:
    def test_str(self, jon_doe, jane_doe, cookie_doe, pie_doe, sour_doe):
        people = People.of(jon_doe, jane_doe, cookie_doe, pie_doe, sour_doe)

        assert str(people) == "[Doe, Cookie; Doe, Jane R; Doe, Jon R; Doe, Pie; Doe, Sour]"

    def test_str_with_one_person(self, jon_doe):
        assert str(People.of(jon_doe)) == "[Doe, Jon R]"

    def test_str_with_no_people(self):
        assert str(People.empty()) == "[]"

    def test_repr(self, jon_doe):
        assert repr(People.of(jon_doe).identified_by(1)) == (
            "People(id=1, name=None, members=[Doe, Jon R])"
        )

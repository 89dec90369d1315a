from dataclasses import dataclass, field
from typing import Optional

import pytest

from vtag.core import Field, Record, describe, embedded, kind_of, strip_optional, tagged, unwrap_optional
from vtag.encoding import new_encoder
from vtag.errors import FieldError, UnsupportedKindError


class Address(Record):
    City = Field(str, "city,detail")
    Zip = Field(str, ",detail", tags={"json": "zip_code"})


class Person(Record):
    Name = Field(str, "name,list")
    Home = Field(Optional[Address], ",detail")
    _secret = Field(str, ",list")


def test_record_collects_fields_in_declaration_order():
    assert list(Person._meta.fields.keys()) == ["Name", "Home", "_secret"]
    assert Person._meta.get_field("Name").tag() == "name,list"
    assert Address._meta.get_field("Zip").tags == {"vtag": ",detail", "json": "zip_code"}


def test_record_instance_defaults_and_assignment():
    person = Person(Name="Ada")
    assert person.Name == "Ada"
    assert person.Home is None
    person.Home = Address(City="London")
    assert person.to_dict()["Home"].City == "London"
    assert "Name='Ada'" in repr(person)


def test_record_rejects_unknown_fields():
    with pytest.raises(TypeError):
        Person(Unknown="value")


def test_record_inherits_base_fields_first():
    class Employee(Person):
        Team = Field(str, "team,list")

    assert list(Employee._meta.fields.keys()) == ["Name", "Home", "_secret", "Team"]
    assert Employee._meta.get_field("Name") is not Person._meta.get_field("Name")


def test_meta_name_override():
    class Renamed(Record):
        class Meta:
            name = "renamed_record"

    assert Renamed._meta.name == "renamed_record"


def test_unbound_field_requires_name():
    with pytest.raises(FieldError):
        Field(str).require_name()


def test_describe_record():
    record = describe(Person)
    assert record.identity == f"{Person.__module__}.Person"
    assert [f.name for f in record.fields] == ["Name", "Home", "_secret"]
    assert [f.exported for f in record.fields] == [True, True, False]
    assert record.fields[1].type == Optional[Address]


@dataclass
class Coordinates:
    Lat: float = tagged(",geo", default=0.0)
    Lng: float = tagged(",geo", default=0.0)


@dataclass
class Place:
    Location: Optional[Coordinates] = embedded(default=None)
    Label: str = tagged("label,geo", default="")
    Plain: str = ""
    Extra: dict = field(default_factory=dict, metadata={"other": True})


def test_describe_dataclass():
    record = describe(Place)
    assert [f.name for f in record.fields] == ["Location", "Label", "Plain", "Extra"]
    assert record.fields[0].embedded is True
    assert record.fields[0].type == Optional[Coordinates]
    assert record.fields[1].tag() == "label,geo"
    assert record.fields[2].tag() == ""
    assert record.fields[3].tags == {}


@pytest.mark.parametrize(
    "tp, kind",
    [
        (int, "int"),
        (bool, "bool"),
        (str, "str"),
        (list, "list"),
        (dict[str, int], "dict"),
        (Optional[int], "union"),
        (type(None), "none"),
        (object, "class"),
        (Person, "record"),
        (Place, "record"),
    ],
)
def test_kind_of(tp, kind):
    assert kind_of(tp) == kind


def test_describe_rejects_non_records():
    with pytest.raises(UnsupportedKindError) as excinfo:
        describe(int)
    assert excinfo.value.kind == "int"
    assert "int" in str(excinfo.value)


def test_optional_unwrapping():
    assert unwrap_optional(Optional[Address]) is Address
    assert unwrap_optional(Address | None) is Address
    assert unwrap_optional(int | str) == (int | str)
    assert strip_optional(Optional[Optional[Address]]) is Address
    assert unwrap_optional(Address) is Address


def test_overridden_field_keeps_inherited_position():
    class Parent(Record):
        A = Field(str, ",list")
        B = Field(str, ",list")

    class Child(Parent):
        A = Field(str, "renamed,list")

    assert list(Child._meta.fields.keys()) == ["A", "B"]
    assert Child._meta.get_field("A").tag() == "renamed,list"
    assert new_encoder().slice_with_tag(Child, "", "list") == ["renamed", "B"]

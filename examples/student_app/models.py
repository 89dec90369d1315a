"""
Record types for the student directory example.

Attribute names mirror an upstream schema that uses PascalCase; the
underscore encoder maps them to the API's snake_case keys.
"""

from __future__ import annotations

from typing import Optional

from vtag import Field, Record


class Base(Record):
    HelloWorld = Field(str, ",list,detail")


class Ext(Record):
    DD = Field(str, ",list")


class Student(Record):
    Base = Field(Optional[Base], embedded=True)
    Ext = Field(Ext, ",list")
    Name = Field(str, "name,list,detail")
    Age = Field(str, "age,list,detail")

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from vtag import describe, new_encoder, tagged

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class GeoPoint:
    Lat: float = tagged(",detail", default=0.0)
    Lng: float = tagged(",detail", default=0.0)


@dataclass
class Listing:
    Position: Optional[GeoPoint] = tagged(",detail", default=None)
    Price: Optional[Decimal] = tagged(",detail", default=None)


def test_unresolvable_hint_keeps_other_fields_resolved():
    record = describe(Listing)
    assert record.fields[0].type == Optional[GeoPoint]
    assert record.fields[1].type == "Optional[Decimal]"


def test_nested_record_next_to_unresolvable_hint_is_flattened():
    names = new_encoder().slice_with_tag(Listing, "", "detail")
    assert names == ["Position.Lat", "Position.Lng", "Price"]

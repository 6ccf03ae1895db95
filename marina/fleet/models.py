"""Mini README: Vessel records and their location-specific details.

Structure:
    * LocationCategory - enum of the four places a vessel can be kept.
    * SlipLocation / LandLocation / TrailerLocation / StorageLocation - one
      detail variant per category.
    * Vessel - immutable record for a single boat.

A vessel derives its category from the location variant it carries, so the
category and the detail can never disagree. Records are frozen; the only
field that changes over a vessel's life, ``outstanding_fees``, is updated by
building a copy with ``Vessel.with_fees``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

MAX_NAME_LENGTH = 127
MAX_TRAILER_TAG_LENGTH = 9
SLIP_RANGE = range(1, 86)
STORAGE_RANGE = range(1, 51)


class LocationCategory(str, Enum):
    """Where a vessel is kept; the value is the keyword used on disk."""

    SLIP = "slip"
    LAND = "land"
    # The data files have always spelled this "trailor".
    TRAILER = "trailor"
    STORAGE = "storage"

    @classmethod
    def from_keyword(cls, value: str) -> "LocationCategory":
        """Match a file keyword regardless of casing."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unknown location category: {value}") from error


@dataclass(slots=True, frozen=True)
class SlipLocation:
    """Boat kept in a numbered slip."""

    slip_number: int

    @property
    def category(self) -> LocationCategory:
        return LocationCategory.SLIP

    def in_advisory_range(self) -> bool:
        return self.slip_number in SLIP_RANGE

    def encode(self) -> str:
        return str(self.slip_number)


@dataclass(slots=True, frozen=True)
class LandLocation:
    """Boat kept on land in a lettered bay."""

    bay: str

    def __post_init__(self) -> None:
        if len(self.bay) != 1:
            raise ValueError(f"Bay label must be a single character, got {self.bay!r}")

    @property
    def category(self) -> LocationCategory:
        return LocationCategory.LAND

    def in_advisory_range(self) -> bool:
        return True

    def encode(self) -> str:
        return self.bay


@dataclass(slots=True, frozen=True)
class TrailerLocation:
    """Boat kept on a trailer identified by its tag."""

    tag: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", self.tag[:MAX_TRAILER_TAG_LENGTH])

    @property
    def category(self) -> LocationCategory:
        return LocationCategory.TRAILER

    def in_advisory_range(self) -> bool:
        return True

    def encode(self) -> str:
        return self.tag


@dataclass(slots=True, frozen=True)
class StorageLocation:
    """Boat kept in a numbered storage spot."""

    spot: int

    @property
    def category(self) -> LocationCategory:
        return LocationCategory.STORAGE

    def in_advisory_range(self) -> bool:
        return self.spot in STORAGE_RANGE

    def encode(self) -> str:
        return str(self.spot)


LocationDetail = Union[SlipLocation, LandLocation, TrailerLocation, StorageLocation]


@dataclass(slots=True, frozen=True)
class Vessel:
    """Inventory record for one boat."""

    name: str
    length_ft: float
    location: LocationDetail
    outstanding_fees: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name[:MAX_NAME_LENGTH])

    @property
    def category(self) -> LocationCategory:
        """Category implied by the location variant."""

        return self.location.category

    @property
    def sort_key(self) -> str:
        """Case-insensitive key used for lookup and ordering."""

        return self.name.lower()

    def matches(self, name: str) -> bool:
        """Return True when ``name`` identifies this vessel, ignoring case."""

        return self.sort_key == name.lower()

    def with_fees(self, outstanding_fees: float) -> "Vessel":
        """Return a copy carrying a new balance."""

        return replace(self, outstanding_fees=outstanding_fees)

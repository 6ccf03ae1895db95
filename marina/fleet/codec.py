"""Mini README: Line codec for the marina data file.

Structure:
    * parse_vessel - turn one ``name,length,category,value,fees`` line into a Vessel.
    * serialize_vessel - the inverse, used when saving.
    * lenient_float / lenient_int - permissive numeric conversions.

The format has no header, quoting or escaping. Numbers are read leniently:
the longest leading numeric prefix is used and anything unreadable becomes
zero, so ``"32ft"`` is 32 and ``"n/a"`` is 0. Structural problems (missing
fields, blank values, unknown categories) are rejected with
``VesselParseError``.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from ..logging_utils import get_logger
from .errors import ParseErrorKind, VesselParseError
from .models import (
    LandLocation,
    LocationCategory,
    LocationDetail,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
)

LOGGER = get_logger(__name__)

FIELD_SEPARATOR = ","
FIELD_COUNT = 5
# Short lines are reported by the first field that is missing.
_SHORT_LINE_SUMMARIES = {3: "Incomplete data", 4: "Missing fee data"}

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def lenient_float(text: str) -> float:
    """Read the leading decimal number from ``text``, or 0.0 if there is none."""

    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def lenient_int(text: str) -> int:
    """Read the leading integer from ``text``, or 0 if there is none."""

    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else 0


_DETAIL_PARSERS: Dict[LocationCategory, Callable[[str], LocationDetail]] = {
    LocationCategory.SLIP: lambda value: SlipLocation(slip_number=lenient_int(value)),
    LocationCategory.LAND: lambda value: LandLocation(bay=value[0]),
    LocationCategory.TRAILER: lambda value: TrailerLocation(tag=value),
    LocationCategory.STORAGE: lambda value: StorageLocation(spot=lenient_int(value)),
}


def _split_fields(line: str) -> List[str]:
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < FIELD_COUNT:
        raise VesselParseError(
            ParseErrorKind.MISSING_FIELD,
            f"expected {FIELD_COUNT} fields, found {len(fields)}",
            summary=_SHORT_LINE_SUMMARIES.get(len(fields)),
        )
    if len(fields) > FIELD_COUNT:
        LOGGER.debug("Ignoring %s trailing field(s) in %r", len(fields) - FIELD_COUNT, line)
    return fields[:FIELD_COUNT]


def parse_vessel(line: str, *, strict_ranges: bool = False) -> Vessel:
    """Parse a record line into a Vessel.

    Raises ``VesselParseError`` when a field is missing or blank, or the
    category keyword is unknown. Slip and storage numbers outside their
    advisory ranges are accepted with a warning unless ``strict_ranges`` is
    set, in which case they are rejected.
    """

    fields = _split_fields(line)
    for position, value in enumerate(fields, start=1):
        if not value.strip():
            raise VesselParseError(ParseErrorKind.EMPTY_VALUE, f"field {position} is blank")
    name, length_text, keyword, detail_text, fees_text = fields

    try:
        category = LocationCategory.from_keyword(keyword)
    except ValueError as error:
        raise VesselParseError(ParseErrorKind.UNKNOWN_CATEGORY, keyword.strip()) from error

    location = _DETAIL_PARSERS[category](detail_text)
    if not location.in_advisory_range():
        if strict_ranges:
            raise VesselParseError(
                ParseErrorKind.OUT_OF_RANGE,
                f"{category.value} {location.encode()}",
            )
        LOGGER.warning(
            "Vessel %s has %s number %s outside the usual range",
            name,
            category.value,
            location.encode(),
        )

    vessel = Vessel(
        name=name,
        length_ft=lenient_float(length_text),
        location=location,
        outstanding_fees=lenient_float(fees_text),
    )
    LOGGER.debug("Parsed vessel %s (%s)", vessel.name, category.value)
    return vessel


def serialize_vessel(vessel: Vessel) -> str:
    """Render a vessel as a data file line, without the trailing newline."""

    return FIELD_SEPARATOR.join(
        [
            vessel.name,
            f"{vessel.length_ft:.0f}",
            vessel.category.value,
            vessel.location.encode(),
            f"{vessel.outstanding_fees:.2f}",
        ]
    )

"""Mini README: Vessel records, the line codec, and the fleet store.

This package holds everything that describes the fleet itself: the record
model and its location variants, the exceptions raised while handling
records, the codec that reads and writes data file lines, and the sorted
in-memory store.
"""

from .codec import lenient_float, lenient_int, parse_vessel, serialize_vessel
from .errors import (
    CapacityExceededError,
    FileErrorKind,
    FleetFileError,
    MarinaError,
    OverpaymentError,
    ParseErrorKind,
    PaymentError,
    VesselNotFoundError,
    VesselParseError,
)
from .models import (
    LandLocation,
    LocationCategory,
    LocationDetail,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
)
from .store import FleetStore

__all__ = [
    "CapacityExceededError",
    "FileErrorKind",
    "FleetFileError",
    "FleetStore",
    "LandLocation",
    "LocationCategory",
    "LocationDetail",
    "MarinaError",
    "OverpaymentError",
    "ParseErrorKind",
    "PaymentError",
    "SlipLocation",
    "StorageLocation",
    "TrailerLocation",
    "Vessel",
    "VesselNotFoundError",
    "VesselParseError",
    "lenient_float",
    "lenient_int",
    "parse_vessel",
    "serialize_vessel",
]

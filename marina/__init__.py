"""Mini README: Core package initializer for the marina fleet manager.

This module exposes convenience imports so callers can reach the store,
billing engine and data file adapter without knowing the module layout.
"""

from .billing import BillingEngine
from .fleet import FleetStore, Vessel, parse_vessel, serialize_vessel
from .logging_utils import get_logger
from .persistence import FleetFile

__all__ = [
    "BillingEngine",
    "FleetFile",
    "FleetStore",
    "Vessel",
    "get_logger",
    "parse_vessel",
    "serialize_vessel",
]

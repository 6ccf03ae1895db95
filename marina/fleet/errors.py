"""Mini README: Exceptions raised by the marina core.

Structure:
    * MarinaError - base class caught by the console to report and continue.
    * VesselParseError / ParseErrorKind - malformed record lines.
    * CapacityExceededError - the fleet store is full.
    * VesselNotFoundError - no vessel carries the requested name.
    * PaymentError / OverpaymentError - rejected payments.
    * FleetFileError / FileErrorKind - the data file could not be opened.

Messages match what operators have always seen at the prompt so the console
can print ``str(error)`` directly.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class MarinaError(Exception):
    """Base class for recoverable marina errors."""


class ParseErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    UNKNOWN_CATEGORY = "unknown_category"
    EMPTY_VALUE = "empty_value"
    OUT_OF_RANGE = "out_of_range"


_PARSE_MESSAGES = {
    ParseErrorKind.MISSING_FIELD: "Invalid CSV format",
    ParseErrorKind.UNKNOWN_CATEGORY: "Unknown location",
    ParseErrorKind.EMPTY_VALUE: "Incomplete data",
    ParseErrorKind.OUT_OF_RANGE: "Location number out of range",
}


class VesselParseError(MarinaError, ValueError):
    """A record line could not be turned into a vessel."""

    def __init__(
        self,
        kind: ParseErrorKind,
        detail: Optional[str] = None,
        *,
        summary: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.detail = detail
        message = f"Error: {summary or _PARSE_MESSAGES[kind]}."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class CapacityExceededError(MarinaError):
    """The store already holds its maximum number of vessels."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__("Error: Maximum capacity reached.")


class VesselNotFoundError(MarinaError, LookupError):
    """No vessel matches the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("No boat with that name")


class PaymentError(MarinaError):
    """A payment could not be applied."""


class OverpaymentError(PaymentError):
    """The payment is not less than the outstanding balance."""

    def __init__(self, balance: float, amount: float) -> None:
        self.balance = balance
        self.amount = amount
        super().__init__(f"That is more than the amount owed, ${balance:.2f}")


class FileErrorKind(str, Enum):
    OPEN_FAILED = "open_failed"


class FleetFileError(MarinaError):
    """The data file could not be opened."""

    def __init__(self, kind: FileErrorKind, path: Path, mode: str) -> None:
        self.kind = kind
        self.path = path
        self.mode = mode
        super().__init__(f"Error: Could not open file {path} for {mode}.")

"""Mini README: Whole-file persistence for the fleet.

Structure:
    * RejectedLine - a data file line that could not be parsed.
    * LoadResult - the loaded store plus what was skipped.
    * FleetFile - reads the data file into a store and writes it back.

The data file is read once at startup and rewritten in full at shutdown.
A file that cannot be opened for reading yields an empty fleet with a
warning; a file that cannot be opened for writing raises ``FleetFileError``
before anything is written, leaving the previous contents in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..configuration import DEFAULT_MAX_VESSELS
from ..fleet import (
    FileErrorKind,
    FleetFileError,
    FleetStore,
    VesselParseError,
    parse_vessel,
    serialize_vessel,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

# Undecodable bytes (e.g. Latin-1 names) are carried through to the saved file unchanged.
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


@dataclass(slots=True)
class RejectedLine:
    """A line skipped during load."""

    line_number: int
    text: str
    error: VesselParseError


@dataclass(slots=True)
class LoadResult:
    """Outcome of reading the data file."""

    store: FleetStore
    opened: bool = True
    rejected: List[RejectedLine] = field(default_factory=list)
    truncated: bool = False


class FleetFile:
    """Flat comma-separated data file holding one vessel per line."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        capacity: int = DEFAULT_MAX_VESSELS,
        strict_ranges: bool = False,
    ) -> None:
        self.path = Path(path)
        self.capacity = capacity
        self.strict_ranges = strict_ranges

    def load(self) -> LoadResult:
        """Read every vessel from the file into a new, sorted store."""

        try:
            handle = self.path.open("r", encoding=FILE_ENCODING, errors=FILE_ERRORS)
        except OSError as error:
            LOGGER.warning("Could not open %s for reading: %s", self.path, error)
            return LoadResult(store=FleetStore(capacity=self.capacity), opened=False)

        vessels = []
        rejected: List[RejectedLine] = []
        truncated = False
        with handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                if len(vessels) >= self.capacity:
                    LOGGER.warning(
                        "Fleet capacity of %s reached; ignoring the rest of %s",
                        self.capacity,
                        self.path,
                    )
                    truncated = True
                    break
                try:
                    vessels.append(parse_vessel(line, strict_ranges=self.strict_ranges))
                except VesselParseError as error:
                    LOGGER.warning("Skipping line %s of %s: %s", line_number, self.path, error)
                    rejected.append(
                        RejectedLine(line_number=line_number, text=line.rstrip("\r\n"), error=error)
                    )

        store = FleetStore(vessels, capacity=self.capacity)
        LOGGER.info("Loaded %s vessels from %s", len(store), self.path)
        return LoadResult(store=store, rejected=rejected, truncated=truncated)

    def save(self, store: FleetStore) -> None:
        """Overwrite the file with the store's vessels in name order."""

        try:
            handle = self.path.open("w", encoding=FILE_ENCODING, errors=FILE_ERRORS)
        except OSError as error:
            LOGGER.error("Could not open %s for writing: %s", self.path, error)
            raise FleetFileError(FileErrorKind.OPEN_FAILED, self.path, "writing") from error

        with handle:
            for vessel in store:
                handle.write(serialize_vessel(vessel) + "\n")
        LOGGER.info("Saved %s vessels to %s", len(store), self.path)

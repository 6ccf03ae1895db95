"""Mini README: In-memory fleet store ordered by vessel name.

Structure:
    * FleetStore - owns the vessels, keeps them sorted, and resolves names.

Names are compared case-insensitively everywhere (lookup, removal, ordering)
while the original casing is kept for display and storage. The store is
bounded by a capacity, 120 vessels unless configured otherwise, and re-sorts
after every insert so listings are always alphabetical.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from ..configuration import DEFAULT_MAX_VESSELS
from ..logging_utils import get_logger
from .errors import CapacityExceededError, VesselNotFoundError
from .models import Vessel

LOGGER = get_logger(__name__)


class FleetStore:
    """Sorted, bounded collection of vessels keyed by name."""

    def __init__(
        self,
        vessels: Iterable[Vessel] = (),
        *,
        capacity: int = DEFAULT_MAX_VESSELS,
    ) -> None:
        if capacity < 1:
            raise ValueError("Fleet capacity must be at least one vessel")
        self._capacity = capacity
        self._vessels: List[Vessel] = []
        for vessel in vessels:
            self._append(vessel)
        self.sort()
        LOGGER.debug("Fleet store initialised with %s vessels", len(self._vessels))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._vessels) >= self._capacity

    def __len__(self) -> int:
        return len(self._vessels)

    def __iter__(self) -> Iterator[Vessel]:
        return iter(self.all())

    def _append(self, vessel: Vessel) -> None:
        if self.is_full:
            raise CapacityExceededError(self._capacity)
        self._vessels.append(vessel)

    def sort(self) -> None:
        """Re-establish ascending case-insensitive name order."""

        self._vessels.sort(key=lambda vessel: vessel.sort_key)

    def insert(self, vessel: Vessel) -> None:
        """Add a vessel and re-sort; duplicate names are allowed."""

        self._append(vessel)
        self.sort()
        LOGGER.info("Added vessel %s (%s)", vessel.name, vessel.category.value)

    def find_by_name(self, name: str) -> int:
        """Return the index of the first vessel called ``name``, ignoring case."""

        for index, vessel in enumerate(self._vessels):
            if vessel.matches(name):
                return index
        LOGGER.debug("No vessel named %r", name)
        raise VesselNotFoundError(name)

    def get(self, index: int) -> Vessel:
        return self._vessels[index]

    def replace(self, index: int, vessel: Vessel) -> None:
        """Swap in an updated copy of the vessel stored at ``index``."""

        current = self._vessels[index]
        if not current.matches(vessel.name) or current.category is not vessel.category:
            raise ValueError(
                f"Replacement for {current.name} must keep its name and category"
            )
        self._vessels[index] = vessel

    def remove(self, name: str) -> Vessel:
        """Delete the first vessel called ``name`` and return it."""

        index = self.find_by_name(name)
        removed = self._vessels.pop(index)
        LOGGER.info("Removed vessel %s", removed.name)
        return removed

    def all(self) -> Tuple[Vessel, ...]:
        """Return the vessels in name order."""

        return tuple(self._vessels)

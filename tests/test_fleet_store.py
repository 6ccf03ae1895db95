"""Mini README: Tests covering the fleet store ordering and lookups.

Structure:
    * ordering after construction and insert.
    * case-insensitive lookup and removal.
    * capacity enforcement and guarded replacement.
"""

from __future__ import annotations

import pytest

from marina.fleet import (
    CapacityExceededError,
    FleetStore,
    LandLocation,
    SlipLocation,
    Vessel,
    VesselNotFoundError,
)


def _vessel(name: str, fees: float = 0.0) -> Vessel:
    return Vessel(
        name=name,
        length_ft=20.0,
        location=SlipLocation(slip_number=1),
        outstanding_fees=fees,
    )


def _names(store: FleetStore) -> list:
    return [vessel.name for vessel in store.all()]


def test_insert_keeps_case_insensitive_order() -> None:
    """Listings should be alphabetical regardless of name casing."""

    store = FleetStore([_vessel("delta"), _vessel("Alpha")])
    store.insert(_vessel("charlie"))
    store.insert(_vessel("Bravo"))

    assert _names(store) == ["Alpha", "Bravo", "charlie", "delta"]


@pytest.mark.parametrize("requested", ["Osprey", "OSPREY", "osprey"])
def test_remove_ignores_case(requested: str) -> None:
    store = FleetStore([_vessel("Osprey"), _vessel("Heron"), _vessel("Tern")])

    removed = store.remove(requested)

    assert removed.name == "Osprey"
    assert _names(store) == ["Heron", "Tern"]


def test_remove_unknown_name_raises_and_keeps_store() -> None:
    store = FleetStore([_vessel("Heron")])

    with pytest.raises(VesselNotFoundError):
        store.remove("Gannet")
    assert _names(store) == ["Heron"]


def test_duplicate_names_are_allowed_and_removed_one_at_a_time() -> None:
    store = FleetStore([_vessel("Heron", 1.0)])
    store.insert(_vessel("HERON", 2.0))

    assert len(store) == 2
    store.remove("heron")
    assert len(store) == 1
    store.remove("heron")
    assert len(store) == 0


def test_find_by_name_returns_index() -> None:
    store = FleetStore([_vessel("Tern"), _vessel("Heron")])

    assert store.find_by_name("tern") == 1
    assert store.get(0).name == "Heron"
    with pytest.raises(VesselNotFoundError):
        store.find_by_name("Ter")


def test_insert_at_capacity_fails_without_change() -> None:
    """A full store refuses new vessels and keeps its contents."""

    store = FleetStore([_vessel(f"Boat {index:03d}") for index in range(120)])
    before = store.all()

    assert store.is_full
    with pytest.raises(CapacityExceededError):
        store.insert(_vessel("Latecomer"))
    assert store.all() == before


def test_all_returns_snapshot() -> None:
    store = FleetStore([_vessel("Heron")])
    snapshot = store.all()
    store.insert(_vessel("Avocet"))

    assert isinstance(snapshot, tuple)
    assert [vessel.name for vessel in snapshot] == ["Heron"]


def test_replace_requires_same_identity() -> None:
    store = FleetStore([_vessel("Heron")])

    store.replace(0, store.get(0).with_fees(42.0))
    assert store.get(0).outstanding_fees == pytest.approx(42.0)

    with pytest.raises(ValueError):
        store.replace(0, _vessel("Tern"))
    with pytest.raises(ValueError):
        store.replace(0, Vessel(name="Heron", length_ft=20.0, location=LandLocation(bay="A")))


def test_name_matching_uses_simple_lowercase() -> None:
    """Only plain case differences count; 'ß' is not treated as 'ss'."""

    store = FleetStore([_vessel("Straße")])

    assert store.find_by_name("STRAßE") == 0
    with pytest.raises(VesselNotFoundError):
        store.find_by_name("STRASSE")

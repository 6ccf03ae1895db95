"""Mini README: Tests for monthly charges and payments.

Structure:
    * monthly charges per category, applied on every call.
    * payment boundaries, including the refused exact-balance payment.
"""

from __future__ import annotations

import pytest

from marina.billing import MONTHLY_RATES, BillingEngine
from marina.fleet import (
    FleetStore,
    LandLocation,
    LocationCategory,
    OverpaymentError,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
    VesselNotFoundError,
)


def _store(*vessels: Vessel) -> FleetStore:
    return FleetStore(vessels)


def test_monthly_charge_on_slip_vessel_accumulates() -> None:
    """A 30ft slip vessel accrues $375 per month, every time it is run."""

    store = _store(Vessel(name="Alice", length_ft=30.0, location=SlipLocation(slip_number=5)))
    engine = BillingEngine()

    engine.apply_monthly_charges(store)
    assert store.get(0).outstanding_fees == pytest.approx(375.0)

    engine.apply_monthly_charges(store)
    assert store.get(0).outstanding_fees == pytest.approx(750.0)


def test_rates_follow_location_category() -> None:
    store = _store(
        Vessel(name="Land", length_ft=10.0, location=LandLocation(bay="A")),
        Vessel(name="Storage", length_ft=10.0, location=StorageLocation(spot=3)),
        Vessel(name="Trailer", length_ft=10.0, location=TrailerLocation(tag="T1"), outstanding_fees=5.0),
    )

    total = BillingEngine().apply_monthly_charges(store)

    fees = {vessel.name: vessel.outstanding_fees for vessel in store.all()}
    assert fees["Land"] == pytest.approx(140.0)
    assert fees["Storage"] == pytest.approx(112.0)
    assert fees["Trailer"] == pytest.approx(255.0)
    assert total == pytest.approx(502.0)
    assert MONTHLY_RATES[LocationCategory.TRAILER] == pytest.approx(25.0)


def test_exact_balance_payment_is_refused() -> None:
    store = _store(
        Vessel(name="Alice", length_ft=20.0, location=SlipLocation(slip_number=5), outstanding_fees=100.0)
    )

    with pytest.raises(OverpaymentError) as excinfo:
        BillingEngine().record_payment(store, "alice", 100.0)

    assert "$100.00" in str(excinfo.value)
    assert store.get(0).outstanding_fees == pytest.approx(100.0)


def test_payment_just_below_balance_leaves_a_cent() -> None:
    store = _store(
        Vessel(name="Alice", length_ft=20.0, location=SlipLocation(slip_number=5), outstanding_fees=100.0)
    )

    updated = BillingEngine().record_payment(store, "Alice", 99.99)

    assert updated.outstanding_fees == pytest.approx(0.01)
    assert store.get(0).outstanding_fees == pytest.approx(0.01)


def test_payment_for_unknown_vessel_raises() -> None:
    with pytest.raises(VesselNotFoundError):
        BillingEngine().record_payment(_store(), "Ghost", 10.0)


def test_engine_rejects_incomplete_rate_table() -> None:
    with pytest.raises(ValueError):
        BillingEngine(rates={LocationCategory.SLIP: 10.0})

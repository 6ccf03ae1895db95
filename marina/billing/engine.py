"""Mini README: Monthly billing and payments for the fleet.

Structure:
    * MONTHLY_RATES - dollars per foot per month for each location category.
    * BillingEngine - applies monthly charges and records payments.

Monthly charges are applied unconditionally each time they are requested,
so running the month twice bills twice. Payments must be strictly less than
the balance owed; paying the exact balance is refused.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..fleet import FleetStore, LocationCategory, OverpaymentError, Vessel
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MONTHLY_RATES: Dict[LocationCategory, float] = {
    LocationCategory.SLIP: 12.50,
    LocationCategory.LAND: 14.00,
    LocationCategory.TRAILER: 25.00,
    LocationCategory.STORAGE: 11.20,
}


class BillingEngine:
    """Compute charges and settle payments against a fleet store."""

    def __init__(self, rates: Optional[Mapping[LocationCategory, float]] = None) -> None:
        self.rates: Dict[LocationCategory, float] = dict(rates or MONTHLY_RATES)
        missing = set(LocationCategory) - set(self.rates)
        if missing:
            raise ValueError(
                "Rates missing for: " + ", ".join(sorted(category.value for category in missing))
            )

    def monthly_charge(self, vessel: Vessel) -> float:
        """Return one month's charge for ``vessel``."""

        return vessel.length_ft * self.rates[vessel.category]

    def apply_monthly_charges(self, store: FleetStore) -> float:
        """Add a month's charge to every vessel and return the total billed."""

        total = 0.0
        for index, vessel in enumerate(store.all()):
            charge = self.monthly_charge(vessel)
            store.replace(index, vessel.with_fees(vessel.outstanding_fees + charge))
            total += charge
        LOGGER.info("Applied monthly charges to %s vessels totalling $%.2f", len(store), total)
        return total

    def record_payment(self, store: FleetStore, name: str, amount: float) -> Vessel:
        """Subtract ``amount`` from the named vessel's balance."""

        index = store.find_by_name(name)
        vessel = store.get(index)
        if amount >= vessel.outstanding_fees:
            LOGGER.warning(
                "Refused payment of $%.2f for %s owing $%.2f",
                amount,
                vessel.name,
                vessel.outstanding_fees,
            )
            raise OverpaymentError(balance=vessel.outstanding_fees, amount=amount)
        updated = vessel.with_fees(vessel.outstanding_fees - amount)
        store.replace(index, updated)
        LOGGER.info(
            "Recorded payment of $%.2f for %s, now owes $%.2f",
            amount,
            updated.name,
            updated.outstanding_fees,
        )
        return updated

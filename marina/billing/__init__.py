"""Mini README: Billing helpers for the marina fleet.

Groups the rate table and the engine that applies monthly charges and
accepts payments against each vessel's outstanding balance.
"""

from .engine import MONTHLY_RATES, BillingEngine

__all__ = ["BillingEngine", "MONTHLY_RATES"]

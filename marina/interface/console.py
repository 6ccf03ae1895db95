"""Mini README: Interactive text console for the marina fleet.

Structure:
    * format_vessel_line - one inventory row, column-aligned.
    * MarinaConsole - the single-letter command loop.

Commands are chosen by the first letter of the reply to the menu prompt:
(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth and e(X)it. Errors raised by
the core are printed and the loop carries on with the store untouched. End
of input behaves like ``X`` so piped sessions still reach the save step.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import typer

from ..billing import BillingEngine
from ..fleet import (
    CapacityExceededError,
    FleetStore,
    LandLocation,
    MarinaError,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    Vessel,
    lenient_float,
    parse_vessel,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

WELCOME_BANNER = "\nWelcome to Alans' Boat Management\n--------------------------------------------\n"
MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it "
ADD_PROMPT = "Please enter the boat data in CSV format                 "
NAME_PROMPT = "Please enter the boat name                               "
AMOUNT_PROMPT = "Please enter the amount to be paid"


def printable(text: str) -> str:
    """Replace bytes kept from a non-UTF-8 data file so the text can be echoed."""

    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _format_location(vessel: Vessel) -> str:
    location = vessel.location
    keyword = vessel.category.value
    if isinstance(location, SlipLocation):
        return f"{keyword:>8}   # {location.slip_number:2d}"
    if isinstance(location, LandLocation):
        return f"{keyword:>8}      {printable(location.bay)}"
    if isinstance(location, TrailerLocation):
        return f"{keyword:>8} {printable(location.tag):>6}"
    if isinstance(location, StorageLocation):
        return f"{keyword:>8}   # {location.spot:2d}"
    raise TypeError(f"Unsupported location {location!r}")


def format_vessel_line(vessel: Vessel) -> str:
    """Render a vessel as an inventory row."""

    return (
        f"{printable(vessel.name):<20} {vessel.length_ft:3.0f}' "
        f"{_format_location(vessel)}"
        f"   Owes ${vessel.outstanding_fees:7.2f}"
    )


def _prompt(message: str) -> Optional[str]:
    """Ask for a line of input, returning None once input is exhausted."""

    try:
        return typer.prompt(message, default="", show_default=False)
    except typer.Abort:
        return None


class MarinaConsole:
    """Menu loop dispatching operator commands to the store and billing engine."""

    def __init__(
        self,
        store: FleetStore,
        billing: Optional[BillingEngine] = None,
        *,
        strict_ranges: bool = False,
        echo: Callable[[str], None] = typer.echo,
        prompt: Callable[[str], Optional[str]] = _prompt,
    ) -> None:
        self.store = store
        self.billing = billing or BillingEngine()
        self.strict_ranges = strict_ranges
        self._echo = echo
        self._prompt = prompt
        self._commands: Dict[str, Callable[[], None]] = {
            "I": self.show_inventory,
            "A": self.add_vessel,
            "R": self.remove_vessel,
            "P": self.take_payment,
            "M": self.apply_month,
        }

    def run(self) -> None:
        """Loop until the operator exits or input runs out."""

        self._echo(WELCOME_BANNER)
        while True:
            reply = self._prompt(MENU_PROMPT)
            if reply is None:
                LOGGER.debug("Input exhausted; leaving command loop")
                return
            choice = reply[:1].upper()
            if choice == "X":
                return
            command = self._commands.get(choice)
            if command is None:
                self._echo(f"Invalid option {choice}\n")
                continue
            try:
                command()
            except MarinaError as error:
                self._echo(f"{printable(str(error))}\n")

    def show_inventory(self) -> None:
        for vessel in self.store:
            self._echo(format_vessel_line(vessel))
        self._echo("")

    def add_vessel(self) -> None:
        line = self._prompt(ADD_PROMPT)
        if line is None:
            return
        if self.store.is_full:
            raise CapacityExceededError(self.store.capacity)
        self.store.insert(parse_vessel(line, strict_ranges=self.strict_ranges))

    def remove_vessel(self) -> None:
        name = self._prompt(NAME_PROMPT)
        if name is None:
            return
        self.store.remove(name)

    def take_payment(self) -> None:
        name = self._prompt(NAME_PROMPT.rstrip())
        if name is None:
            return
        # Unknown names are reported before asking for an amount.
        self.store.find_by_name(name)
        amount_text = self._prompt(AMOUNT_PROMPT)
        if amount_text is None:
            return
        self.billing.record_payment(self.store, name, lenient_float(amount_text))

    def apply_month(self) -> None:
        self.billing.apply_monthly_charges(self.store)
        self._echo("")

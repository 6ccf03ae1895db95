"""Mini README: Operator-facing interfaces for the marina manager.

Exports the interactive text console used by the command-line entry point.
"""

from .console import MarinaConsole, format_vessel_line, printable

__all__ = ["MarinaConsole", "format_vessel_line", "printable"]

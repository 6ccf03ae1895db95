"""Mini README: Persistence adapters for the marina fleet.

Only the flat data file is supported; it is read at startup and rewritten
when the operator exits.
"""

from .flat_file import FleetFile, LoadResult, RejectedLine

__all__ = ["FleetFile", "LoadResult", "RejectedLine"]

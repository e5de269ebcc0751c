from __future__ import annotations


class InvalidProcessError(ValueError):
    """
    Raised when a process record cannot be scheduled: non-numeric or negative
    arrival, non-positive burst, or a duplicate id.
    """

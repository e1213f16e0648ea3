from __future__ import annotations

from enum import Enum

ALL_CATEGORIES = "All"


class Category(Enum):
    """
    Closed set of spending categories offered by the history filter.
    """
    FOOD = "Food"
    TRANSPORT = "Transport"
    BILLS = "Bills"
    SNACKS = "Snacks"

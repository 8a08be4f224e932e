"""Services module initialization."""
from .filter_state import FilterState
from .settings import Settings

__all__ = ["FilterState", "Settings"]

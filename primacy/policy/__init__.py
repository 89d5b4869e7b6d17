from .engine import PrimarySelector, select_primary
from .rules import SELECTION_RULES

__all__ = ["PrimarySelector", "select_primary", "SELECTION_RULES"]

"""Utility helpers package."""

from .decimal_utils import coerce_decimal, round_money
from .utils import get_project_root

__all__ = ["coerce_decimal", "round_money", "get_project_root"]

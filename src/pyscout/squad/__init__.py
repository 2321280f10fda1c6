"""Formation slot filling."""

from .lineup import build_slot_assignments

__all__ = ["build_slot_assignments"]

"""Shared game utilities."""

from .turn_management_mixin import TurnManagementMixin

__all__ = [
    "TurnManagementMixin",
]

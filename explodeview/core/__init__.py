"""Core utilities shared by explodeview subsystems."""

from .event import ChangeEvent

__all__ = ["ChangeEvent"]

"""Sequence containers: a growable vector with explicit capacity and a singly linked list."""

__version__ = "0.1.0"
__all__ = ["vector", "linked_list"]
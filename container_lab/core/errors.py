# container_lab/core/errors.py
from __future__ import annotations


class ContainerError(Exception):
    """Base class for container conditions raised to the immediate caller."""


class EmptyContainerError(ContainerError, LookupError):
    """first/last/peek/pop on a container with no elements."""

    def __init__(self, container: str, operation: str):
        super().__init__(f"{operation}() on empty {container}")
        self.container = container
        self.operation = operation


class InvalidRangeError(ContainerError, ValueError):
    """Range query whose low bound sorts after its high bound."""

    def __init__(self, low, high):
        super().__init__(f"invalid range: low {low!r} > high {high!r}")
        self.low = low
        self.high = high

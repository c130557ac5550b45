"""Compute backends for row interchanges."""

from pypivot.laswp.backends.cpu import CPULaswpBackend

__all__ = ["CPULaswpBackend"]

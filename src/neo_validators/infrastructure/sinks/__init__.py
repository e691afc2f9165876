"""Violation sink implementations."""

from .violation_collector import ViolationCollector

__all__ = ["ViolationCollector"]

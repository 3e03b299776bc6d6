"""Grading rules."""

from .base import BusinessRule, PolicyViolation
from .composition import CompositionChecker, count_classes

__all__ = [
    "BusinessRule",
    "CompositionChecker",
    "PolicyViolation",
    "count_classes",
]

"""Vastu compliance scoring for residential plots."""

from .base import VastuCheck, VastuFinding
from .scorer import VastuScorer

__all__ = [
    "VastuCheck",
    "VastuFinding",
    "VastuScorer",
]

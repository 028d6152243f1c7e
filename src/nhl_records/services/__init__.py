"""
Service layer: orchestrates client calls and aggregations.

Presentation code calls these instead of stitching requests and joins together.
"""

from .franchises import FranchiseAnalytics

__all__ = ["FranchiseAnalytics"]

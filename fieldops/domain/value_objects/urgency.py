"""
Service request urgency value object.
"""

from enum import Enum


class Urgency(str, Enum):
    """Service request urgency enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

"""Enumeration types for the partner portfolio scoring engine."""
from enum import Enum


class AIPosture(str, Enum):
    """How far a portfolio company has gone with AI."""
    NONE = "None"
    EXPLORING = "Exploring"
    ACTIVE = "Active"
    LEADING = "Leading"


class DataPosture(str, Enum):
    """How usable the company's data is."""
    DISCONNECTED = "Disconnected"
    SCATTERED = "Scattered"
    CONNECTED = "Connected"
    OPTIMIZED = "Optimized"


class ValuePressure(str, Enum):
    """Pressure to show value from AI."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class DecisionCadence(str, Enum):
    """How quickly leadership makes decisions."""
    SLOW = "Slow"
    MODERATE = "Moderate"
    FAST = "Fast"
    URGENT = "Urgent"


class SponsorStrength(str, Enum):
    """Strength of the executive sponsor."""
    NONE = "None"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


class Willingness60d(str, Enum):
    """Willingness to engage within the next 60 days."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Recommendation(str, Enum):
    """Next-step label assigned to a scored portfolio company."""
    EXEC_BOOTCAMP = "Exec Bootcamp"
    LITERACY_SPRINT = "Literacy Sprint"
    DIAGNOSTIC = "Diagnostic"
    NOT_NOW = "Not now"


# Recommendations that qualify a company as a lead
QUALIFIED_RECOMMENDATIONS: tuple[str, ...] = (
    Recommendation.EXEC_BOOTCAMP.value,
    Recommendation.LITERACY_SPRINT.value,
)

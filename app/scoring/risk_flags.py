"""Risk flag detector.

Each condition is checked once, in fixed order, so a flag never repeats.
"""
from typing import List

from app.models.enums import DataPosture, SponsorStrength
from app.models.portfolio import PortfolioItem

NO_EXEC_SPONSOR = "No exec sponsor"
DATA_NOT_ACCESSIBLE = "Data not accessible"
COMPLIANCE_SENSITIVITY = "Compliance sensitivity"


def get_risk_flags(item: PortfolioItem) -> List[str]:
    """Return human-readable risk flags for an item, in insertion order."""
    flags: List[str] = []

    if item.sponsor_strength == SponsorStrength.NONE.value:
        flags.append(NO_EXEC_SPONSOR)

    if item.data_posture == DataPosture.DISCONNECTED.value:
        flags.append(DATA_NOT_ACCESSIBLE)

    # value_pressure may carry free text from older intake forms
    pressure = item.value_pressure
    if isinstance(pressure, str) and "compliance" in pressure.lower():
        flags.append(COMPLIANCE_SENSITIVITY)

    return flags

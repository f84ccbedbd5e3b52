"""Pydantic schemas for the True Wage Calculator."""

from truewage.schemas.fields import (
    FieldId,
    InputField,
    PayMode,
    Provenance,
    RolePreset,
    SessionState,
)
from truewage.schemas.true_wage import (
    InsufficientData,
    NothingToExport,
    TrueWageResult,
    WageSnapshot,
)

__all__ = [
    "FieldId",
    "InputField",
    "PayMode",
    "Provenance",
    "RolePreset",
    "SessionState",
    "WageSnapshot",
    "TrueWageResult",
    "InsufficientData",
    "NothingToExport",
]

"""
Input Field Schemas

Field identifiers, provenance tags, pay modes, role presets, and the
session state owned by the provenance tracker.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from truewage.services.numeric import to_number


class FieldId(str, Enum):
    """Numeric inputs of the calculator."""
    SCHEDULED_HOURS = "scheduled_hours"
    UNPAID_OVERTIME = "unpaid_overtime"
    UNPAID_BREAK_MINS = "unpaid_break_mins"
    COMMUTE_MINS_ONE_WAY = "commute_mins_one_way"
    DAYS_PER_WEEK = "days_per_week"
    PTO_WEEKS = "pto_weeks"
    PREP_MINS_DAILY = "prep_mins_daily"
    ANNUAL_BONUS = "annual_bonus"
    BENEFITS_VALUE = "benefits_value"
    ANNUAL_SALARY = "annual_salary"
    HOURLY_RATE = "hourly_rate"
    STRAIN_PCT = "strain_pct"  # bounded 0-20


class Provenance(str, Enum):
    """How a field's current value arrived."""
    UNSET = "unset"
    PRESET_FILLED = "preset_filled"
    USER_EDITED = "user_edited"


class PayMode(str, Enum):
    """Which base-pay formula is active."""
    SALARY = "salary"
    HOURLY = "hourly"


class RolePreset(str, Enum):
    """Named bundles of overtime/break/prep/strain defaults."""
    CUSTOM = "custom"  # apply nothing
    HOURLY = "hourly"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    DIRECTOR = "director"


# Fields only one pay mode reads
SALARY_ONLY_FIELDS = frozenset({FieldId.ANNUAL_SALARY})
HOURLY_ONLY_FIELDS = frozenset({FieldId.HOURLY_RATE})


class InputField(BaseModel):
    """
    A single calculator input.

    The raw text is kept as entered so that emptiness can be told apart
    from an explicit zero; `value` is always the coerced number.
    """

    field_id: FieldId
    text: str = Field(default="", description="Raw content as entered")
    provenance: Provenance = Field(default=Provenance.UNSET)

    @computed_field
    @property
    def value(self) -> Decimal:
        """Numeric magnitude of the text (0 when empty or malformed)."""
        return to_number(self.text)


def _blank_fields() -> dict[FieldId, InputField]:
    return {field_id: InputField(field_id=field_id) for field_id in FieldId}


class SessionState(BaseModel):
    """Field collection plus the single active pay mode and role."""

    fields: dict[FieldId, InputField] = Field(default_factory=_blank_fields)
    pay_mode: PayMode = PayMode.SALARY
    role: RolePreset = RolePreset.CUSTOM

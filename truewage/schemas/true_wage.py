"""
True Wage Schemas

Input snapshot and outcome models for the true hourly wage calculation.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from truewage.schemas.fields import PayMode, RolePreset
from truewage.services.numeric import to_number

INSUFFICIENT_DATA_MESSAGE = "Please enter your pay and time details, then calculate."
NOTHING_TO_EXPORT_MESSAGE = "Calculate first."


class WageSnapshot(BaseModel):
    """
    Immutable copy of every input value plus the active pay mode.

    Values are raw magnitudes: negatives are allowed here and clamped by
    the engine. Any non-finite or malformed value is coerced to 0 on
    construction, so the engine only ever sees finite numbers.
    """

    model_config = ConfigDict(frozen=True)

    pay_mode: PayMode = Field(default=PayMode.SALARY, description="Active base-pay formula")
    role: RolePreset = Field(default=RolePreset.CUSTOM, description="Active role preset")

    # Time inputs
    scheduled_hours: Decimal = Field(default=Decimal("0"), description="Scheduled hours per week")
    unpaid_overtime: Decimal = Field(
        default=Decimal("0"),
        description="Unpaid overtime hours per week",
    )
    unpaid_break_mins: Decimal = Field(
        default=Decimal("0"),
        description="Unpaid break minutes per work day",
    )
    commute_mins_one_way: Decimal = Field(
        default=Decimal("0"),
        description="Commute minutes, one way",
    )
    days_per_week: Decimal = Field(default=Decimal("0"), description="Work days per week")
    pto_weeks: Decimal = Field(default=Decimal("0"), description="Paid time off weeks per year")
    prep_mins_daily: Decimal = Field(
        default=Decimal("0"),
        description="Unpaid prep minutes per work day (getting ready, winding down)",
    )

    # Pay inputs
    annual_salary: Decimal = Field(default=Decimal("0"), description="Annual salary (salary mode)")
    hourly_rate: Decimal = Field(default=Decimal("0"), description="Hourly rate (hourly mode)")
    annual_bonus: Decimal = Field(default=Decimal("0"), description="Annual bonus")
    benefits_value: Decimal = Field(
        default=Decimal("0"),
        description="Annual value of benefits counted as pay",
    )

    # Work strain
    strain_pct: Decimal = Field(
        default=Decimal("0"),
        description="Subjective quality-of-life discount, clamped to 0-20%",
    )

    @field_validator(
        "scheduled_hours",
        "unpaid_overtime",
        "unpaid_break_mins",
        "commute_mins_one_way",
        "days_per_week",
        "pto_weeks",
        "prep_mins_daily",
        "annual_salary",
        "hourly_rate",
        "annual_bonus",
        "benefits_value",
        "strain_pct",
        mode="before",
    )
    @classmethod
    def coerce_finite(cls, value: object) -> Decimal:
        return to_number(value)


class TrueWageResult(BaseModel):
    """
    Output of a successful true wage calculation.

    Hour and money figures are unrounded; rounding happens at display time.
    """

    model_config = ConfigDict(frozen=True)

    annual_pay_counted: Decimal = Field(..., description="Base pay + bonus + benefits, floored at 0")
    working_weeks: Decimal = Field(..., ge=0, le=52, description="52 minus PTO weeks")
    working_days_per_year: Decimal = Field(..., ge=0)

    # Annual hour categories
    scheduled_hours_year: Decimal
    overtime_hours_year: Decimal
    break_hours_year: Decimal
    commute_hours_year: Decimal = Field(..., description="Round-trip commute hours per year")
    prep_hours_year: Decimal
    total_hours_year: Decimal = Field(..., description="Sum of all five categories")

    # Rates
    nominal_hourly: Decimal = Field(..., description="Pay divided by scheduled hours only")
    true_hourly: Decimal = Field(..., description="Pay divided by total hours")
    strain_pct: Decimal = Field(..., ge=0, le=20, description="Clamped strain percentage")
    true_hourly_after_strain: Decimal
    headline_hourly: Decimal = Field(
        ...,
        description="After-strain wage when strain is used, otherwise the true wage",
    )
    strain_applied: bool = Field(..., description="True when strain_pct > 0")

    # Insights, valued at the nominal rate
    unpaid_hours_year: Decimal = Field(..., description="Overtime + break + prep hours")
    commute_weeks_equivalent: Decimal = Field(..., description="Commute hours / 40")
    unpaid_weeks_equivalent: Decimal = Field(..., description="Unpaid hours / 40")
    commute_value: Decimal = Field(..., description="Commute hours at the nominal rate")
    unpaid_value: Decimal = Field(..., description="Unpaid hours at the nominal rate")
    drop_pct: Decimal = Field(
        ...,
        ge=0,
        le=Decimal("99.9"),
        description="How far the pre-strain true wage sits below nominal",
    )


class InsufficientData(BaseModel):
    """Outcome when pay or total hours are not positive; nothing is shown."""

    model_config = ConfigDict(frozen=True)

    message: str = INSUFFICIENT_DATA_MESSAGE
    annual_pay_counted: Decimal = Decimal("0")
    total_hours_year: Decimal = Decimal("0")


class NothingToExport(BaseModel):
    """Outcome of an export request made before any successful calculation."""

    model_config = ConfigDict(frozen=True)

    message: str = NOTHING_TO_EXPORT_MESSAGE

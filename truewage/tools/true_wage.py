"""
True Wage MCP Tools

The calculator exposed as MCP tools: a stateless calculation plus a
single-user session that tracks which fields the user has edited.
"""

import logging
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Literal

from fastmcp import FastMCP

from truewage.schemas.fields import FieldId
from truewage.schemas.true_wage import InsufficientData, TrueWageResult, WageSnapshot
from truewage.services import messaging
from truewage.services.calculator_session import CalculatorSession
from truewage.services.presets import BASELINE_DEFAULTS, ROLE_PRESETS
from truewage.services.wage_calculator import calculate_true_wage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(server: FastMCP):
    """MCP server lifespan manager."""
    logger.info("True Wage Calculator tools starting...")
    yield
    logger.info("True Wage Calculator tools shutting down...")


mcp = FastMCP(
    "True Wage Calculator",
    lifespan=lifespan,
    instructions=(
        "Estimates an effective hourly wage by counting unpaid overtime, "
        "unpaid breaks, commute and prep time against annual pay, with an "
        "optional work strain discount."
    ),
)

# Single-user session driven by the session tools
session = CalculatorSession()

FieldName = Literal[
    "scheduled_hours",
    "unpaid_overtime",
    "unpaid_break_mins",
    "commute_mins_one_way",
    "days_per_week",
    "pto_weeks",
    "prep_mins_daily",
    "annual_bonus",
    "benefits_value",
    "annual_salary",
    "hourly_rate",
    "strain_pct",
]
RoleName = Literal["custom", "hourly", "supervisor", "manager", "director"]
PayModeName = Literal["salary", "hourly"]


def _outcome_to_dict(outcome: TrueWageResult | InsufficientData) -> dict:
    """Convert an outcome to a JSON-friendly dict with float values."""
    display = messaging.describe(outcome)

    if isinstance(outcome, InsufficientData):
        return {
            "status": "insufficient_data",
            "message": outcome.message,
            "display": display,
        }

    figures = {
        name: float(value) if isinstance(value, Decimal) else value
        for name, value in outcome.model_dump().items()
    }
    return {
        "status": "ok",
        **figures,
        "display": display,
    }


def _session_to_dict() -> dict:
    tracker = session.tracker
    return {
        "pay_mode": tracker.pay_mode.value,
        "role": tracker.role.value,
        "relevant_fields": [field_id.value for field_id in tracker.relevant_fields()],
        "fields": {
            field_id.value: {
                "text": field.text,
                "value": float(field.value),
                "provenance": field.provenance.value,
            }
            for field_id, field in tracker.state.fields.items()
        },
        "strain_label": messaging.strain_label(tracker.field(FieldId.STRAIN_PCT).text),
    }


@mcp.tool()
async def calculate_true_hourly_wage(
    pay_mode: PayModeName = "salary",
    annual_salary: float = 0.0,
    hourly_rate: float = 0.0,
    scheduled_hours: float = 40.0,
    unpaid_overtime: float = 0.0,
    unpaid_break_mins: float = 30.0,
    commute_mins_one_way: float = 0.0,
    days_per_week: float = 5.0,
    pto_weeks: float = 3.0,
    prep_mins_daily: float = 0.0,
    annual_bonus: float = 0.0,
    benefits_value: float = 0.0,
    strain_pct: float = 0.0,
) -> dict:
    """
    Calculate the true hourly wage from explicit inputs.

    Unpaid overtime, unpaid breaks, round-trip commute and prep time are
    added to scheduled hours, and annual pay (base + bonus + benefits) is
    divided across all of it.

    Args:
        pay_mode: "salary" uses annual_salary, "hourly" uses hourly_rate
        annual_salary: Annual salary (salary mode)
        hourly_rate: Hourly rate (hourly mode)
        scheduled_hours: Scheduled hours per week
        unpaid_overtime: Unpaid overtime hours per week
        unpaid_break_mins: Unpaid break minutes per day
        commute_mins_one_way: One-way commute in minutes
        days_per_week: Work days per week
        pto_weeks: Paid time off weeks per year
        prep_mins_daily: Unpaid prep minutes per day
        annual_bonus: Annual bonus
        benefits_value: Annual value of benefits
        strain_pct: Optional work strain discount, 0-20

    Returns:
        Dictionary with all annual figures, rates, insights and display
        strings, or status "insufficient_data"

    Example:
        $80,000 salary, 40 h/week, 5 h unpaid OT, 30 min break,
        20 min commute, 5 days, 2 weeks PTO:
        - Total hours: 2541.67/year
        - True hourly: $31.48 vs nominal $40.00
    """
    snapshot = WageSnapshot(
        pay_mode=pay_mode,
        annual_salary=Decimal(str(annual_salary)),
        hourly_rate=Decimal(str(hourly_rate)),
        scheduled_hours=Decimal(str(scheduled_hours)),
        unpaid_overtime=Decimal(str(unpaid_overtime)),
        unpaid_break_mins=Decimal(str(unpaid_break_mins)),
        commute_mins_one_way=Decimal(str(commute_mins_one_way)),
        days_per_week=Decimal(str(days_per_week)),
        pto_weeks=Decimal(str(pto_weeks)),
        prep_mins_daily=Decimal(str(prep_mins_daily)),
        annual_bonus=Decimal(str(annual_bonus)),
        benefits_value=Decimal(str(benefits_value)),
        strain_pct=Decimal(str(strain_pct)),
    )

    return _outcome_to_dict(calculate_true_wage(snapshot))


@mcp.tool()
async def list_role_presets() -> dict:
    """
    List role presets and the baseline defaults.

    Presets fill unpaid overtime, break minutes, prep minutes and strain
    percentage. "custom" fills nothing.
    """
    return {
        "presets": {
            role.value: (
                {field_id.value: value for field_id, value in values.items()}
                if values is not None
                else None
            )
            for role, values in ROLE_PRESETS.items()
        },
        "baseline_defaults": {
            field_id.value: text for field_id, text in BASELINE_DEFAULTS.items()
        },
    }


@mcp.tool()
async def get_session() -> dict:
    """Current session fields with their provenance, pay mode and role."""
    return _session_to_dict()


@mcp.tool()
async def edit_field(field: FieldName, text: str) -> dict:
    """
    Enter a value into a session field as the user.

    The field becomes user-edited: later role presets will not change it
    until the session is reset.

    Args:
        field: Field identifier
        text: Raw content (non-numeric characters are ignored)
    """
    session.edit_field(field, text)
    return _session_to_dict()


@mcp.tool()
async def select_role(role: RoleName) -> dict:
    """
    Select the active role preset and apply it.

    Only fields not edited by the user are filled.

    Args:
        role: Role preset key
    """
    written = session.select_role(role)
    return {
        **_session_to_dict(),
        "fields_written": [field_id.value for field_id in written],
    }


@mcp.tool()
async def select_pay_mode(mode: PayModeName) -> dict:
    """
    Switch between salary and hourly pay.

    Field values and provenance are kept for both modes.

    Args:
        mode: "salary" or "hourly"
    """
    session.select_pay_mode(mode)
    return _session_to_dict()


@mcp.tool()
async def reset_session() -> dict:
    """Clear all fields back to baseline defaults, salary mode, custom role."""
    session.reset()
    return {
        **_session_to_dict(),
        "display": messaging.describe(None),
    }


@mcp.tool()
async def calculate_session() -> dict:
    """Calculate the true hourly wage from the current session fields."""
    return _outcome_to_dict(session.calculate())


@mcp.tool()
async def copy_session_summary() -> dict:
    """
    Plain-text summary of the last session calculation.

    Returns status "nothing_to_export" if the session has not been
    calculated since the last change.
    """
    summary = session.copy_summary()
    if isinstance(summary, str):
        return {"status": "ok", "summary": summary}

    return {"status": "nothing_to_export", "message": summary.message}

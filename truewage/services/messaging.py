"""
Result Messaging

Human-readable comparison and insight lines for a calculation outcome.
"""

from decimal import Decimal

from truewage.config import get_settings
from truewage.schemas.true_wage import InsufficientData, TrueWageResult
from truewage.services.numeric import (
    PLACEHOLDER,
    format_hours,
    format_money,
    format_number,
    to_number,
)

EMPTY_STATE_MESSAGE = "Enter details and calculate."


def _money(value: Decimal | None) -> str:
    return format_money(value, get_settings().currency_symbol)


def strain_label(strain_pct: Decimal | float | str) -> str:
    """Label shown next to the strain slider, e.g. "6%"."""
    return f"{format_number(to_number(strain_pct), 1)}%"


def compare_text(result: TrueWageResult) -> str:
    """
    Compare the headline wage with the nominal rate.

    Example:
        "Nominal hourly ≈ $40.00. True wage is −$8.52 per hour."
    """
    delta = result.headline_hourly - result.nominal_hourly
    sign = "+" if delta >= 0 else "−"

    strain_note = ""
    if result.strain_applied:
        strain_note = f" (after {format_number(result.strain_pct, 1)}% work strain adjustment)"

    return (
        f"Nominal hourly ≈ {_money(result.nominal_hourly)}. "
        f"True wage{strain_note} is {sign}{_money(abs(delta))} per hour."
    )


def commute_insight(result: TrueWageResult) -> tuple[str, str]:
    """Commute hours per year and what they are worth at the nominal rate."""
    return (
        format_hours(result.commute_hours_year),
        f"{format_number(result.commute_weeks_equivalent, 1)} workweeks "
        f"(~{_money(result.commute_value)} of time at nominal rate)",
    )


def unpaid_insight(result: TrueWageResult) -> tuple[str, str]:
    """Unpaid overtime, break and prep hours and their value."""
    return (
        format_hours(result.unpaid_hours_year),
        f"{format_number(result.unpaid_weeks_equivalent, 1)} workweeks "
        f"(~{_money(result.unpaid_value)} of time at nominal rate)",
    )


def drop_insight(result: TrueWageResult) -> tuple[str, str]:
    """How far the time-based wage sits below nominal."""
    drop = format_number(result.drop_pct, 1)
    if result.strain_applied:
        strain_extra = (
            " With strain adjustment, the displayed true wage is further reduced by "
            f"{format_number(result.strain_pct, 1)}%."
        )
    else:
        strain_extra = (
            " Add a work strain adjustment if you want a subjective quality-of-life reduction."
        )
    return (
        f"{drop}% lower",
        f"Your true wage (time-based) is ~{drop}% below nominal.{strain_extra}",
    )


def describe(outcome: TrueWageResult | InsufficientData | None) -> dict[str, str]:
    """
    Every display string for an outcome, keyed by panel.

    Insufficient data (or no calculation yet) renders placeholders and a
    prompt instead of partial figures.
    """
    if not isinstance(outcome, TrueWageResult):
        prompt = outcome.message if outcome is not None else EMPTY_STATE_MESSAGE
        blank_money = _money(None)
        return {
            "true_hourly": blank_money,
            "compare_text": prompt,
            "annual_pay": blank_money,
            "working_weeks": PLACEHOLDER,
            "scheduled_hours_year": PLACEHOLDER,
            "overtime_hours_year": PLACEHOLDER,
            "commute_hours_year": PLACEHOLDER,
            "break_hours_year": PLACEHOLDER,
            "prep_hours_year": PLACEHOLDER,
            "total_hours_year": PLACEHOLDER,
            "commute": PLACEHOLDER,
            "commute_sub": PLACEHOLDER,
            "unpaid": PLACEHOLDER,
            "unpaid_sub": PLACEHOLDER,
            "drop": PLACEHOLDER,
            "drop_sub": PLACEHOLDER,
        }

    commute, commute_sub = commute_insight(outcome)
    unpaid, unpaid_sub = unpaid_insight(outcome)
    drop, drop_sub = drop_insight(outcome)

    return {
        "true_hourly": _money(outcome.headline_hourly),
        "compare_text": compare_text(outcome),
        "annual_pay": _money(outcome.annual_pay_counted),
        "working_weeks": format_number(outcome.working_weeks, 1),
        "scheduled_hours_year": format_number(outcome.scheduled_hours_year, 1),
        "overtime_hours_year": format_number(outcome.overtime_hours_year, 1),
        "commute_hours_year": format_number(outcome.commute_hours_year, 1),
        "break_hours_year": format_number(outcome.break_hours_year, 1),
        "prep_hours_year": format_number(outcome.prep_hours_year, 1),
        "total_hours_year": format_number(outcome.total_hours_year, 1),
        "commute": commute,
        "commute_sub": commute_sub,
        "unpaid": unpaid,
        "unpaid_sub": unpaid_sub,
        "drop": drop,
        "drop_sub": drop_sub,
    }

"""
True Wage Calculator

Pure calculation of the effective hourly wage once unpaid time
(overtime, breaks, commute, prep) is counted against annual pay.
"""

import logging
from decimal import Decimal

from truewage.schemas.fields import PayMode
from truewage.schemas.true_wage import InsufficientData, TrueWageResult, WageSnapshot
from truewage.services.numeric import ZERO, clamp

logger = logging.getLogger(__name__)

WEEKS_PER_YEAR = Decimal("52")
MINUTES_PER_HOUR = Decimal("60")
HOURS_PER_WORKWEEK = Decimal("40")  # used to express hours as "workweeks"
MAX_STRAIN_PCT = Decimal("20")
MAX_DROP_PCT = Decimal("99.9")


def get_working_weeks(pto_weeks: Decimal) -> Decimal:
    """Weeks actually worked, always within [0, 52]."""
    return clamp(WEEKS_PER_YEAR - pto_weeks, ZERO, WEEKS_PER_YEAR)


def calculate_true_wage(snapshot: WageSnapshot) -> TrueWageResult | InsufficientData:
    """
    Calculate the true hourly wage for a snapshot of inputs.

    Algorithm:
    1. Working weeks = 52 - PTO weeks, clamped to [0, 52]
    2. Working days = days per week x working weeks
    3. Base pay from salary, or hourly rate x scheduled hours x working weeks
    4. Annual pay counted = base pay + bonus + benefits, floored at 0
    5. Annualize scheduled, overtime, break, commute (round trip) and prep hours
    6. Stop with InsufficientData if pay or total hours is not positive
    7. True hourly = pay / total hours; nominal hourly = pay / scheduled hours
    8. Apply the work strain discount (clamped to 0-20%)
    9. Value commute and unpaid time at the nominal rate

    Example:
        Salary $80,000, 40 h/week, 5 h unpaid overtime, 30 min break,
        20 min commute each way, 5 days, 2 weeks PTO:
        - 50 working weeks, 250 working days
        - 2000 + 250 + 125 + 166.67 = 2541.67 hours
        - True hourly: $80,000 / 2541.67 = $31.48
        - Nominal hourly: $80,000 / 2000 = $40.00
    """
    # Step 1-2: Working time
    working_weeks = get_working_weeks(snapshot.pto_weeks)
    working_days_per_year = max(ZERO, snapshot.days_per_week) * working_weeks

    # Step 3: Base pay (left unclamped; the floor below absorbs negatives)
    if snapshot.pay_mode == PayMode.SALARY:
        base_pay = snapshot.annual_salary
    else:
        base_pay = snapshot.hourly_rate * snapshot.scheduled_hours * working_weeks

    # Step 4: Annual pay counted
    annual_pay_counted = max(ZERO, base_pay + snapshot.annual_bonus + snapshot.benefits_value)

    # Step 5: Annual hours by category
    scheduled_hours_year = max(ZERO, snapshot.scheduled_hours) * working_weeks
    overtime_hours_year = max(ZERO, snapshot.unpaid_overtime) * working_weeks
    break_hours_year = (
        max(ZERO, snapshot.unpaid_break_mins) / MINUTES_PER_HOUR
    ) * working_days_per_year
    commute_hours_year = (
        max(ZERO, snapshot.commute_mins_one_way) * 2 / MINUTES_PER_HOUR
    ) * working_days_per_year
    prep_hours_year = (
        max(ZERO, snapshot.prep_mins_daily) / MINUTES_PER_HOUR
    ) * working_days_per_year

    total_hours_year = (
        scheduled_hours_year
        + overtime_hours_year
        + break_hours_year
        + commute_hours_year
        + prep_hours_year
    )

    # Step 6: Nothing meaningful to show without pay and time
    if annual_pay_counted <= 0 or total_hours_year <= 0:
        logger.debug(
            f"Insufficient data: pay={annual_pay_counted} hours={total_hours_year}"
        )
        return InsufficientData(
            annual_pay_counted=annual_pay_counted,
            total_hours_year=total_hours_year,
        )

    # Step 7: Rates. The floor of one hour keeps nominal finite when only
    # commute/break/prep time is entered.
    true_hourly = annual_pay_counted / total_hours_year
    nominal_hourly = annual_pay_counted / max(Decimal("1"), scheduled_hours_year)

    # Step 8: Work strain
    strain_pct = clamp(snapshot.strain_pct, ZERO, MAX_STRAIN_PCT)
    strain_factor = strain_pct / 100
    true_hourly_after_strain = true_hourly * (1 - strain_factor)

    strain_applied = strain_pct > 0
    headline_hourly = true_hourly_after_strain if strain_applied else true_hourly

    # Step 9: Insights at the nominal (paid) rate
    unpaid_hours_year = overtime_hours_year + break_hours_year + prep_hours_year

    # Drop is measured on the pre-strain true wage
    drop_pct = clamp((1 - true_hourly / nominal_hourly) * 100, ZERO, MAX_DROP_PCT)

    return TrueWageResult(
        annual_pay_counted=annual_pay_counted,
        working_weeks=working_weeks,
        working_days_per_year=working_days_per_year,
        scheduled_hours_year=scheduled_hours_year,
        overtime_hours_year=overtime_hours_year,
        break_hours_year=break_hours_year,
        commute_hours_year=commute_hours_year,
        prep_hours_year=prep_hours_year,
        total_hours_year=total_hours_year,
        nominal_hourly=nominal_hourly,
        true_hourly=true_hourly,
        strain_pct=strain_pct,
        true_hourly_after_strain=true_hourly_after_strain,
        headline_hourly=headline_hourly,
        strain_applied=strain_applied,
        unpaid_hours_year=unpaid_hours_year,
        commute_weeks_equivalent=commute_hours_year / HOURS_PER_WORKWEEK,
        unpaid_weeks_equivalent=unpaid_hours_year / HOURS_PER_WORKWEEK,
        commute_value=nominal_hourly * commute_hours_year,
        unpaid_value=nominal_hourly * unpaid_hours_year,
        drop_pct=drop_pct,
    )

"""
True Wage Calculator Unit Tests

Tests for the true hourly wage calculation, its insufficient-data
outcome, and the insight metrics.
"""

from decimal import Decimal

import pytest

from truewage.schemas.fields import PayMode
from truewage.schemas.true_wage import (
    INSUFFICIENT_DATA_MESSAGE,
    InsufficientData,
    TrueWageResult,
    WageSnapshot,
)
from truewage.services.wage_calculator import calculate_true_wage, get_working_weeks


def _salary_example(**overrides) -> WageSnapshot:
    """Salary example: $80k, 40 h, 5 h unpaid OT, 30 min break, 20 min commute."""
    defaults = dict(
        pay_mode=PayMode.SALARY,
        annual_salary=Decimal("80000"),
        scheduled_hours=Decimal("40"),
        unpaid_overtime=Decimal("5"),
        unpaid_break_mins=Decimal("30"),
        commute_mins_one_way=Decimal("20"),
        days_per_week=Decimal("5"),
        pto_weeks=Decimal("2"),
        prep_mins_daily=Decimal("0"),
        annual_bonus=Decimal("0"),
        benefits_value=Decimal("0"),
        strain_pct=Decimal("0"),
    )
    defaults.update(overrides)
    return WageSnapshot(**defaults)


def _calculate(**overrides) -> TrueWageResult:
    result = calculate_true_wage(_salary_example(**overrides))
    assert isinstance(result, TrueWageResult)
    return result


class TestWorkingWeeks:
    """Test working week bounds."""

    @pytest.mark.parametrize(
        "pto_weeks, expected",
        [
            (Decimal("0"), Decimal("52")),
            (Decimal("3"), Decimal("49")),
            (Decimal("-10"), Decimal("52")),
            (Decimal("52"), Decimal("0")),
            (Decimal("75"), Decimal("0")),
        ],
    )
    def test_working_weeks_always_in_range(self, pto_weeks, expected):
        """Working weeks stay within [0, 52] for any PTO value."""
        assert get_working_weeks(pto_weeks) == expected


class TestSalaryCalculation:
    """Test salary mode calculation."""

    def test_salary_example(self):
        """
        Worked example:
        - 50 working weeks, 250 working days
        - 2000 scheduled + 250 OT + 125 break + 166.67 commute = 2541.67 h
        - True hourly: $80,000 / 2541.67 = $31.48
        - Nominal hourly: $80,000 / 2000 = $40.00
        """
        result = _calculate()

        assert result.working_weeks == Decimal("50")
        assert result.working_days_per_year == Decimal("250")
        assert result.scheduled_hours_year == Decimal("2000")
        assert result.overtime_hours_year == Decimal("250")
        assert result.break_hours_year == Decimal("125")
        assert float(result.commute_hours_year) == pytest.approx(166.6667, abs=1e-3)
        assert float(result.total_hours_year) == pytest.approx(2541.6667, abs=1e-3)
        assert result.annual_pay_counted == Decimal("80000")
        assert float(result.true_hourly) == pytest.approx(31.4754, abs=1e-4)
        assert result.nominal_hourly == Decimal("40")

    def test_bonus_and_benefits_counted(self):
        """Bonus and benefits are added to base pay."""
        result = _calculate(annual_bonus=Decimal("5000"), benefits_value=Decimal("15000"))

        assert result.annual_pay_counted == Decimal("100000")
        assert result.nominal_hourly == Decimal("50")

    def test_negative_salary_absorbed_by_floor(self):
        """A negative salary is not clamped on its own, only the total is."""
        result = _calculate(annual_salary=Decimal("-5000"), annual_bonus=Decimal("10000"))

        assert result.annual_pay_counted == Decimal("5000")

    def test_hourly_rate_ignored_in_salary_mode(self):
        """Salary mode never reads the hourly rate."""
        result = _calculate(hourly_rate=Decimal("500"))

        assert result.annual_pay_counted == Decimal("80000")


class TestHourlyCalculation:
    """Test hourly mode calculation."""

    def test_hourly_base_pay(self):
        """Base pay = rate x scheduled hours x working weeks."""
        snapshot = WageSnapshot(
            pay_mode=PayMode.HOURLY,
            hourly_rate=Decimal("25"),
            scheduled_hours=Decimal("40"),
            unpaid_break_mins=Decimal("30"),
            days_per_week=Decimal("5"),
            pto_weeks=Decimal("3"),
        )

        result = calculate_true_wage(snapshot)

        assert isinstance(result, TrueWageResult)
        # 25 x 40 x 49 = 49,000
        assert result.annual_pay_counted == Decimal("49000")
        # Nominal equals the hourly rate when nothing else is paid
        assert result.nominal_hourly == Decimal("25")
        # 1960 scheduled + 122.5 break
        assert result.total_hours_year == Decimal("2082.5")
        assert float(result.true_hourly) == pytest.approx(23.5294, abs=1e-4)

    def test_annual_salary_ignored_in_hourly_mode(self):
        """Hourly mode never reads the annual salary."""
        snapshot = WageSnapshot(
            pay_mode=PayMode.HOURLY,
            annual_salary=Decimal("1000000"),
            hourly_rate=Decimal("20"),
            scheduled_hours=Decimal("40"),
            days_per_week=Decimal("5"),
            pto_weeks=Decimal("2"),
        )

        result = calculate_true_wage(snapshot)

        assert result.annual_pay_counted == Decimal("40000")


class TestWorkStrain:
    """Test the optional work strain discount."""

    def test_no_strain_headline_is_true_hourly(self):
        result = _calculate()

        assert result.strain_applied is False
        assert result.headline_hourly == result.true_hourly
        assert result.true_hourly_after_strain == result.true_hourly

    def test_strain_reduces_headline(self):
        """10% strain leaves 90% of the true hourly wage."""
        result = _calculate(strain_pct=Decimal("10"))

        assert result.strain_applied is True
        assert result.headline_hourly == result.true_hourly_after_strain
        assert float(result.headline_hourly) == pytest.approx(
            float(result.true_hourly) * 0.9, rel=1e-9
        )

    def test_strain_clamped_to_twenty(self):
        result = _calculate(strain_pct=Decimal("50"))

        assert result.strain_pct == Decimal("20")
        assert float(result.true_hourly_after_strain) == pytest.approx(
            float(result.true_hourly) * 0.8, rel=1e-9
        )

    def test_negative_strain_treated_as_unused(self):
        result = _calculate(strain_pct=Decimal("-5"))

        assert result.strain_pct == Decimal("0")
        assert result.strain_applied is False

    def test_drop_uses_pre_strain_wage(self):
        """Drop percentage ignores the strain discount."""
        plain = _calculate()
        strained = _calculate(strain_pct=Decimal("20"))

        assert plain.drop_pct == strained.drop_pct


class TestInsights:
    """Test insight metrics valued at the nominal rate."""

    def test_salary_example_insights(self):
        result = _calculate()

        # 250 OT + 125 break + 0 prep
        assert result.unpaid_hours_year == Decimal("375")
        assert result.unpaid_weeks_equivalent == Decimal("9.375")
        assert result.unpaid_value == Decimal("15000")
        assert float(result.commute_weeks_equivalent) == pytest.approx(4.1667, abs=1e-4)
        assert float(result.commute_value) == pytest.approx(6666.67, abs=1e-2)
        # (1 - 31.4754 / 40) x 100
        assert float(result.drop_pct) == pytest.approx(21.3115, abs=1e-4)

    def test_prep_counts_as_unpaid(self):
        """Prep minutes are annualized over working days and counted as unpaid."""
        result = _calculate(prep_mins_daily=Decimal("12"))

        # 12 / 60 x 250 = 50
        assert result.prep_hours_year == Decimal("50")
        assert result.unpaid_hours_year == Decimal("425")

    def test_drop_clamped_at_zero(self):
        """True hourly above nominal (under one scheduled hour) never goes negative."""
        snapshot = WageSnapshot(
            annual_salary=Decimal("1000"),
            scheduled_hours=Decimal("0"),
            commute_mins_one_way=Decimal("15"),
            days_per_week=Decimal("1"),
            pto_weeks=Decimal("51"),
        )

        result = calculate_true_wage(snapshot)

        assert isinstance(result, TrueWageResult)
        # Half an hour total, so true hourly (2000) exceeds nominal (1000)
        assert result.true_hourly > result.nominal_hourly
        assert result.drop_pct == Decimal("0")

    def test_drop_clamped_below_one_hundred(self):
        """Drop never exceeds 99.9% even when nearly all time is unpaid."""
        snapshot = WageSnapshot(
            annual_salary=Decimal("50000"),
            scheduled_hours=Decimal("0"),
            commute_mins_one_way=Decimal("600"),
            days_per_week=Decimal("5"),
            pto_weeks=Decimal("2"),
        )

        result = calculate_true_wage(snapshot)

        assert isinstance(result, TrueWageResult)
        # Nominal floored at one scheduled hour
        assert result.nominal_hourly == Decimal("50000")
        assert result.drop_pct == Decimal("99.9")


class TestTotalHours:
    """Test that unpaid categories only ever add time."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {},
            {"unpaid_overtime": Decimal("0"), "unpaid_break_mins": Decimal("0")},
            {"commute_mins_one_way": Decimal("90"), "prep_mins_daily": Decimal("45")},
            {"unpaid_overtime": Decimal("-10"), "unpaid_break_mins": Decimal("-30")},
            {"days_per_week": Decimal("7"), "pto_weeks": Decimal("0")},
        ],
    )
    def test_total_at_least_scheduled(self, overrides):
        result = _calculate(**overrides)

        assert result.total_hours_year >= result.scheduled_hours_year

    def test_total_is_sum_of_categories(self):
        result = _calculate(prep_mins_daily=Decimal("10"))

        assert result.total_hours_year == (
            result.scheduled_hours_year
            + result.overtime_hours_year
            + result.break_hours_year
            + result.commute_hours_year
            + result.prep_hours_year
        )


class TestInsufficientData:
    """Test the cannot-compute outcome."""

    def test_no_pay(self):
        """All pay fields at zero produce no result."""
        result = calculate_true_wage(_salary_example(annual_salary=Decimal("0")))

        assert isinstance(result, InsufficientData)
        assert result.message == INSUFFICIENT_DATA_MESSAGE

    def test_no_hours(self):
        """No days and no scheduled hours means zero total hours."""
        result = calculate_true_wage(
            _salary_example(
                scheduled_hours=Decimal("0"),
                unpaid_overtime=Decimal("0"),
                days_per_week=Decimal("0"),
            )
        )

        assert isinstance(result, InsufficientData)
        assert result.total_hours_year == Decimal("0")

    def test_all_pto(self):
        """52 or more weeks of PTO leaves no working time."""
        result = calculate_true_wage(_salary_example(pto_weeks=Decimal("60")))

        assert isinstance(result, InsufficientData)

    def test_negative_pay_total(self):
        result = calculate_true_wage(
            _salary_example(annual_salary=Decimal("-1000"), annual_bonus=Decimal("500"))
        )

        assert isinstance(result, InsufficientData)
        assert result.annual_pay_counted == Decimal("0")

    def test_non_finite_inputs_coerced_to_zero(self):
        """Infinite and NaN values enter the engine as 0."""
        snapshot = _salary_example(
            annual_salary=float("inf"),
            annual_bonus=float("nan"),
        )

        assert snapshot.annual_salary == Decimal("0")
        assert snapshot.annual_bonus == Decimal("0")
        assert isinstance(calculate_true_wage(snapshot), InsufficientData)

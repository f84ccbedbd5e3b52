"""
Summary Export Unit Tests

Tests for the copied plain-text summary.
"""

from truewage.config import get_settings
from truewage.schemas.fields import FieldId, PayMode, RolePreset
from truewage.schemas.true_wage import (
    NOTHING_TO_EXPORT_MESSAGE,
    InsufficientData,
    NothingToExport,
)
from truewage.services.numeric import format_money
from truewage.services.provenance_tracker import FieldProvenanceTracker
from truewage.services.summary_export import SUMMARY_FOOTNOTE, export_summary
from truewage.services.wage_calculator import calculate_true_wage


def _calculated_tracker() -> FieldProvenanceTracker:
    tracker = FieldProvenanceTracker()
    tracker.edit_field(FieldId.ANNUAL_SALARY, "80000")
    tracker.edit_field(FieldId.UNPAID_OVERTIME, "5")
    tracker.edit_field(FieldId.COMMUTE_MINS_ONE_WAY, "20")
    tracker.edit_field(FieldId.PTO_WEEKS, "2")
    return tracker


class TestExportSummary:
    """Test summary serialization."""

    def test_fixed_line_order(self):
        tracker = _calculated_tracker()
        result = calculate_true_wage(tracker.snapshot())
        settings = get_settings()

        summary = export_summary(result, tracker.pay_mode, tracker.role)

        assert summary.splitlines() == [
            f"{settings.app_name} ({settings.site_name})",
            "Mode: salary",
            "Role preset: custom",
            "True hourly wage: $31.48",
            "Annual pay counted: $80,000.00",
            "Total time cost (hrs/year): 2,541.7",
            "Commute (hrs/year): 166.7 hrs",
            "Unpaid time (hrs/year): 375 hrs",
            "Effective drop vs nominal: 21.3% lower",
            SUMMARY_FOOTNOTE,
        ]

    def test_headline_includes_strain(self):
        """The exported wage is the displayed (after-strain) figure."""
        tracker = _calculated_tracker()
        tracker.select_role(RolePreset.MANAGER)
        result = calculate_true_wage(tracker.snapshot())

        summary = export_summary(result, PayMode.SALARY, RolePreset.MANAGER)

        assert "Role preset: manager" in summary
        assert f"True hourly wage: {format_money(result.headline_hourly)}" in summary

    def test_nothing_to_export_without_calculation(self):
        outcome = export_summary(None, PayMode.SALARY)

        assert isinstance(outcome, NothingToExport)
        assert outcome.message == NOTHING_TO_EXPORT_MESSAGE

    def test_nothing_to_export_after_insufficient_data(self):
        outcome = export_summary(InsufficientData(), "hourly", "director")

        assert isinstance(outcome, NothingToExport)

"""
Calculator Session

Pairs the provenance tracker with the outcome of the last calculation.
Any input change discards that outcome, so a summary can only be copied
for figures that match the current fields.
"""

import logging

from truewage.schemas.fields import FieldId, PayMode, RolePreset
from truewage.schemas.true_wage import InsufficientData, NothingToExport, TrueWageResult
from truewage.services.provenance_tracker import FieldProvenanceTracker
from truewage.services.summary_export import export_summary
from truewage.services.wage_calculator import calculate_true_wage

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Single-user calculator: tracked fields plus the last outcome."""

    def __init__(self) -> None:
        self.tracker = FieldProvenanceTracker()
        self.last_outcome: TrueWageResult | InsufficientData | None = None

    def _discard_outcome(self) -> None:
        if self.last_outcome is not None:
            logger.debug("Inputs changed; discarding last calculation")
        self.last_outcome = None

    def edit_field(self, field_id: FieldId | str, text: str) -> None:
        self.tracker.edit_field(field_id, text)
        self._discard_outcome()

    def select_role(self, role: RolePreset | str) -> list[FieldId]:
        written = self.tracker.select_role(role)
        self._discard_outcome()
        return written

    def select_pay_mode(self, mode: PayMode | str) -> None:
        self.tracker.select_pay_mode(mode)
        self._discard_outcome()

    def reset(self) -> None:
        self.tracker.reset_all()
        self._discard_outcome()

    def calculate(self) -> TrueWageResult | InsufficientData:
        """Calculate from the current fields and remember the outcome."""
        self.last_outcome = calculate_true_wage(self.tracker.snapshot())
        return self.last_outcome

    def copy_summary(self) -> str | NothingToExport:
        """Summary of the last calculation, or NothingToExport if stale or missing."""
        return export_summary(self.last_outcome, self.tracker.pay_mode, self.tracker.role)

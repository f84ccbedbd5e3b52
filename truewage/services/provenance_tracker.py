"""
Field Provenance Tracker

Owns the calculator's session state and decides, for every keystroke,
role switch and pay mode switch, whether a field's value may change.

Precedence rules:
1. A field the user typed into is never overwritten until a full reset
2. A field filled by a preset (or by the baseline) is overwritten by the
   next preset that covers it
3. An empty field is always eligible for a preset value
"""

import logging

from truewage.schemas.fields import (
    HOURLY_ONLY_FIELDS,
    SALARY_ONLY_FIELDS,
    FieldId,
    InputField,
    PayMode,
    Provenance,
    RolePreset,
    SessionState,
)
from truewage.schemas.true_wage import WageSnapshot
from truewage.services.presets import BASELINE_DEFAULTS, get_preset

logger = logging.getLogger(__name__)

# The strain slider always holds a number, so "0" stands in for empty
STRAIN_EMPTY_SENTINEL = "0"


def is_empty_equivalent(field: InputField) -> bool:
    """True when the field has no meaningful content of its own."""
    if field.field_id == FieldId.STRAIN_PCT:
        return (field.text or STRAIN_EMPTY_SENTINEL) == STRAIN_EMPTY_SENTINEL
    return field.text.strip() == ""


def can_preset_overwrite(field: InputField) -> bool:
    """
    Decide whether a preset may replace the field's current value.

    User edits always win. Otherwise a preset may write into empty
    fields and into fields an earlier preset (or the baseline) filled.
    """
    if field.provenance == Provenance.USER_EDITED:
        return False
    return is_empty_equivalent(field) or field.provenance == Provenance.PRESET_FILLED


class FieldProvenanceTracker:
    """
    Single-user session: field values, their provenance, and the active
    pay mode and role.

    The tracker is the only writer of the session state. Calculations
    read it through `snapshot()`, never through a live reference.
    """

    def __init__(self) -> None:
        self.state = SessionState()
        self.reset_all()

    @property
    def pay_mode(self) -> PayMode:
        return self.state.pay_mode

    @property
    def role(self) -> RolePreset:
        return self.state.role

    def field(self, field_id: FieldId | str) -> InputField:
        return self.state.fields[FieldId(field_id)]

    def mark_edited(self, field_id: FieldId | str) -> None:
        """Stamp a field as user-edited. One-way until `reset_all()`."""
        self.field(field_id).provenance = Provenance.USER_EDITED

    def edit_field(self, field_id: FieldId | str, text: str) -> InputField:
        """Store text the user typed and protect it from presets."""
        field = self.field(field_id)
        field.text = text
        self.mark_edited(field.field_id)
        return field

    def apply_preset(self, preset: RolePreset | str) -> list[FieldId]:
        """
        Fill the preset's fields where the precedence rules allow it.

        Fields the preset does not cover are left alone. Custom is a
        no-op.

        Returns:
            The fields whose value was written
        """
        preset = RolePreset(preset)
        values = get_preset(preset)
        if values is None:
            return []

        written: list[FieldId] = []
        for field_id, value in values.items():
            field = self.state.fields[field_id]
            if not can_preset_overwrite(field):
                logger.debug(f"Preset {preset.value}: keeping user value for {field_id.value}")
                continue
            field.text = str(value)
            field.provenance = Provenance.PRESET_FILLED
            written.append(field_id)

        logger.debug(f"Preset {preset.value}: wrote {[f.value for f in written]}")
        return written

    def select_role(self, role: RolePreset | str) -> list[FieldId]:
        """Make `role` the single active role and apply its preset."""
        role = RolePreset(role)
        self.state.role = role
        if role == RolePreset.CUSTOM:
            return []
        return self.apply_preset(role)

    def select_pay_mode(self, mode: PayMode | str) -> None:
        """Make `mode` the single active pay mode. Field values are untouched."""
        self.state.pay_mode = PayMode(mode)

    def relevant_fields(self) -> list[FieldId]:
        """Fields the active pay mode reads."""
        hidden = HOURLY_ONLY_FIELDS if self.pay_mode == PayMode.SALARY else SALARY_ONLY_FIELDS
        return [field_id for field_id in FieldId if field_id not in hidden]

    def reset_all(self) -> None:
        """
        Clear every field and restore baseline defaults.

        All fields come back as preset-filled so that the next role
        selection can still replace the overtime, break, prep and strain
        baselines. Pay mode returns to salary and role to custom.
        """
        self.state = SessionState()
        for field_id, field in self.state.fields.items():
            field.text = BASELINE_DEFAULTS.get(field_id, "")
            field.provenance = Provenance.PRESET_FILLED

        logger.info("Session reset to baseline defaults")

    def snapshot(self) -> WageSnapshot:
        """Immutable copy of current values for the calculation engine."""
        values = {field_id.value: field.value for field_id, field in self.state.fields.items()}
        return WageSnapshot(pay_mode=self.pay_mode, role=self.role, **values)

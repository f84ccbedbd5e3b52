"""
Role Presets and Baseline Defaults

Common job-responsibility patterns for the overtime, break, prep and
strain fields, plus the values every field starts from.
"""

from truewage.schemas.fields import FieldId, RolePreset

# Values a role preset may fill in. Custom applies nothing.
ROLE_PRESETS: dict[RolePreset, dict[FieldId, int] | None] = {
    RolePreset.CUSTOM: None,
    RolePreset.HOURLY: {
        FieldId.UNPAID_OVERTIME: 0,
        FieldId.UNPAID_BREAK_MINS: 30,
        FieldId.PREP_MINS_DAILY: 10,
        FieldId.STRAIN_PCT: 0,
    },
    RolePreset.SUPERVISOR: {
        FieldId.UNPAID_OVERTIME: 3,
        FieldId.UNPAID_BREAK_MINS: 20,
        FieldId.PREP_MINS_DAILY: 15,
        FieldId.STRAIN_PCT: 3,
    },
    RolePreset.MANAGER: {
        FieldId.UNPAID_OVERTIME: 7,
        FieldId.UNPAID_BREAK_MINS: 10,
        FieldId.PREP_MINS_DAILY: 20,
        FieldId.STRAIN_PCT: 6,
    },
    RolePreset.DIRECTOR: {
        FieldId.UNPAID_OVERTIME: 12,
        FieldId.UNPAID_BREAK_MINS: 0,
        FieldId.PREP_MINS_DAILY: 30,
        FieldId.STRAIN_PCT: 10,
    },
}

# Content of every field after initialization and after a reset.
# Fields without a baseline start empty.
BASELINE_DEFAULTS: dict[FieldId, str] = {
    FieldId.SCHEDULED_HOURS: "40",
    FieldId.UNPAID_OVERTIME: "0",
    FieldId.UNPAID_BREAK_MINS: "30",
    FieldId.COMMUTE_MINS_ONE_WAY: "0",
    FieldId.DAYS_PER_WEEK: "5",
    FieldId.PTO_WEEKS: "3",
    FieldId.STRAIN_PCT: "0",
}


def get_preset(preset: RolePreset | str) -> dict[FieldId, int] | None:
    """
    Look up a role preset's field values.

    Returns None for custom. Raises ValueError for an unknown key.
    """
    return ROLE_PRESETS[RolePreset(preset)]

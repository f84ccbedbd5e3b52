"""
Summary Export

Plain-text summary of a calculation for copying to the clipboard.
"""

import logging

from truewage.config import get_settings
from truewage.schemas.fields import PayMode, RolePreset
from truewage.schemas.true_wage import InsufficientData, NothingToExport, TrueWageResult
from truewage.services import messaging

logger = logging.getLogger(__name__)

SUMMARY_FOOTNOTE = "Includes commute + unpaid overtime + unpaid breaks + prep (if entered)."


def export_summary(
    result: TrueWageResult | InsufficientData | None,
    pay_mode: PayMode | str,
    role: RolePreset | str = RolePreset.CUSTOM,
) -> str | NothingToExport:
    """
    Serialize a calculation into the fixed plain-text block.

    Line order: header, mode, role preset, true hourly wage, annual pay
    counted, total hours, commute hours, unpaid hours, drop vs nominal,
    footnote.

    Returns:
        The summary text, or NothingToExport when there is no successful
        calculation to describe
    """
    if not isinstance(result, TrueWageResult):
        logger.debug("Export requested before a successful calculation")
        return NothingToExport()

    settings = get_settings()
    display = messaging.describe(result)

    lines = [
        f"{settings.app_name} ({settings.site_name})",
        f"Mode: {PayMode(pay_mode).value}",
        f"Role preset: {RolePreset(role).value}",
        f"True hourly wage: {display['true_hourly']}",
        f"Annual pay counted: {display['annual_pay']}",
        f"Total time cost (hrs/year): {display['total_hours_year']}",
        f"Commute (hrs/year): {display['commute']}",
        f"Unpaid time (hrs/year): {display['unpaid']}",
        f"Effective drop vs nominal: {display['drop']}",
        SUMMARY_FOOTNOTE,
    ]
    return "\n".join(lines)

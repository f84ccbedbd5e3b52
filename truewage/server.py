"""
True Wage Calculator - MCP Server

FastMCP server exposing the calculator tools:
- calculate_true_hourly_wage: stateless calculation
- list_role_presets: preset table and baseline defaults
- Session tools: edit_field, select_role, select_pay_mode,
  reset_session, calculate_session, copy_session_summary
"""

import logging

from truewage.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Importing the tool module registers every tool on the server
from truewage.tools.true_wage import mcp  # noqa: E402


def main():
    """Run the MCP server."""
    logger.info(f"Starting {settings.app_name} MCP Server v{settings.app_version}")
    mcp.run()


if __name__ == "__main__":
    main()

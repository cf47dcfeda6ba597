"""Logging helpers. Everything goes to stderr; stdout carries the MCP stdio stream."""

import logging
import sys

logger = logging.getLogger("mcp_server_travel_amadeus")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send server (and amadeus SDK) logs to stderr at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def log_info(tool_name: str, message: str):
    """Structured info logging for MCP tools."""
    logger.info(f"[Amadeus:{tool_name}] {message}")


def log_error(tool_name: str, error_type: str, message: str):
    """Structured error logging for MCP tools."""
    logger.error(f"[Amadeus:{tool_name}] ERROR ({error_type}): {message}")

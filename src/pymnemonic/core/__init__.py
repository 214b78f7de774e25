# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pymnemonic (logging, telemetry).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .logging import init_logging, get_app_logger
from .telemetry import init_telemetry, get_telemetry

__all__ = [
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
]

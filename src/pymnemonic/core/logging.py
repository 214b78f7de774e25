# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pymnemonic (stdlib logging).
#
# Notes:
#	- Library modules only call get_app_logger(); nothing is configured on import.
#	- init_logging() is for the preview app and tests. It is idempotent and
#	  will not stack duplicate handlers.
#
#	Supported cfg keys (dotted form wins over the flat form):
#	- "logging.level" / "log_level"			(default: "INFO")
#	- "logging.console" / "log_console"		(default: True)
#	- "logging.file" / "log_file"			(default: None)
#	- "logging.format" / "log_format"		(default: standard format)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	pymnemonic dev				Initial coding / release
# 10/16/2026	pymnemonic dev				Only touch handlers this module installed
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER = "pymnemonic"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return a pymnemonic logger.

	Examples:
		get_app_logger()				-> pymnemonic
		get_app_logger("mnemonics")		-> pymnemonic.mnemonics
		get_app_logger("ui.menubar")	-> pymnemonic.ui.menubar
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER}.{component}")
	return logging.getLogger(APP_LOGGER)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the "pymnemonic" logger from cfg.

	Args:
		cfg:
			Anything with cfg.get(key, default) (AppConfig, dict) or None.
	"""
	global _SIGNATURE

	level = _coerce_level(_first(cfg, ("logging.level", "log_level"), "INFO"))
	console = bool(_first(cfg, ("logging.console", "log_console"), True))
	log_file = _first(cfg, ("logging.file", "log_file"), None)
	fmt = str(_first(cfg, ("logging.format", "log_format"), DEFAULT_FORMAT))

	signature = (level, console, str(log_file) if log_file else None, fmt)
	if signature == _SIGNATURE:
		return

	logger = get_app_logger()
	logger.setLevel(level)

	for h in _HANDLERS:
		logger.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	formatter = logging.Formatter(fmt=fmt, datefmt=DEFAULT_DATEFMT)

	if console:
		ch = logging.StreamHandler()
		ch.setFormatter(formatter)
		_HANDLERS.append(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(str(log_file)))
		os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(str(log_file), mode="a", encoding="utf-8")
		fh.setFormatter(formatter)
		_HANDLERS.append(fh)

	for h in _HANDLERS:
		h.setLevel(level)
		logger.addHandler(h)

	_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _first(cfg: Any | None, keys: tuple[str, ...], default: Any) -> Any:
	"""
	Return the first key present in cfg (None counts as absent).
	"""
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return default

	for key in keys:
		val = getter(key, None)
		if val is not None:
			return val
	return default


def _coerce_level(level: Any) -> int:
	"""
	Accept 10, "10", "debug", "DEBUG"; anything else is INFO.
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Drop installed handlers and forget the last configuration.
	"""
	global _SIGNATURE
	logger = get_app_logger()
	for h in _HANDLERS:
		logger.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_SIGNATURE = None

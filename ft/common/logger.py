"""Logging for FocusTimer.

Every run writes three files under ``PATHS.logs``: a rotating ``focustimer.log``
kept across runs, ``latest.log`` holding only the current run, and one full
DEBUG log per run in ``debug/``, of which only the newest few are kept.
Level and console echo for the first two follow ``settings.json`` once it has
been loaded (see ``apply_log_settings``).
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from ft.common.setup import PATHS

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "focustimer"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_ROTATE_BYTES = 2 * 1024 * 1024
_ROTATE_COUNT = 3

# Handlers whose level follows the log_level setting. The per-run debug log always stays at DEBUG.
_SETTING_DRIVEN = ("rotating", "latest", "console")


def _handler_name(logger, tag):
    return f"{logger.name}:{tag}"

def _find_handler(logger, tag):
    wanted = _handler_name(logger, tag)
    for h in logger.handlers:
        if h.get_name() == wanted:
            return h
    return None

# Attaches the handler under a stable name. A logger that already has a handler with that name keeps the old one
# and the new one is closed, so importing twice never doubles output.
def _attach(logger, tag, handler, level):
    if _find_handler(logger, tag) is not None:
        handler.close()
        return False
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.set_name(_handler_name(logger, tag))
    logger.addHandler(handler)
    return True

# Deletes all but the newest `keep` per-run debug logs. Returns the paths that were removed.
def prune_debug_runs(debug_dir: Path, name=LOGGER_NAME, keep=10):
    runs = sorted(debug_dir.glob(f"{name}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    removed = []
    for run in runs[keep:]:
        try:
            run.unlink()
            removed.append(run)
        except OSError:
            pass
    return removed

def get_logger(name=LOGGER_NAME, log_dir: Path | None = None, keep_debug_runs=10) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    log_dir = log_dir or PATHS.logs
    debug_dir = log_dir / "debug"
    debug_dir.mkdir(parents=True, exist_ok=True)

    if _find_handler(logger, "rotating") is None:
        _attach(logger, "rotating", RotatingFileHandler(
            log_dir / f"{name}.log", maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_COUNT, encoding="utf-8"),
            logging.INFO)
    if _find_handler(logger, "latest") is None:
        _attach(logger, "latest", logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8"),
                logging.INFO)
    if _find_handler(logger, "debug_run") is None:
        run_path = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        _attach(logger, "debug_run", logging.FileHandler(run_path, encoding="utf-8"), logging.DEBUG)
        prune_debug_runs(debug_dir, name, keep_debug_runs)

    return logger

# Applies the log_level and log_to_console settings to an already built logger.
def apply_log_settings(settings, logger=None):
    logger = logger or log
    level = getattr(logging, settings.get("log_level", "INFO"), logging.INFO)

    console = _find_handler(logger, "console")
    if settings.get("log_to_console", False):
        if console is None:
            _attach(logger, "console", logging.StreamHandler(), level)
    elif console is not None:
        logger.removeHandler(console)
        console.close()

    for tag in _SETTING_DRIVEN:
        h = _find_handler(logger, tag)
        if h is not None:
            h.setLevel(level)
    logger.debug(f"Log level set to {logging.getLevelName(level)}, console {'on' if settings.get('log_to_console') else 'off'}")

log = get_logger()
log.info("=== FOCUSTIMER STARTED ===")

from __future__ import annotations

import logging
import os
import sys
import threading
import traceback
from logging.handlers import RotatingFileHandler
from datetime import datetime


ROOT_DIR = os.path.normpath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
_LOG_DIR = os.path.normpath(os.getenv("POKELIB_LOG_DIR", os.path.join(ROOT_DIR, "debug", "logs")))
_LOG_NAME = "app.log"
LOGGER_NAME = "pokelib"


def ensure_log_dir() -> str:
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
    except OSError:
        pass
    return _LOG_DIR


def log_file_path() -> str:
    return os.path.join(ensure_log_dir(), _LOG_NAME)


def setup_logging(level: int = logging.DEBUG, console_level: int = logging.INFO) -> logging.Logger:
    """Configure a rotating file logger under debug/logs/app.log.

    Returns the configured top-level logger ("pokelib"). Safe to call twice.
    """
    ensure_log_dir()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers if called twice
    if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        fhandler = RotatingFileHandler(log_file_path(), maxBytes=512_000, backupCount=3, encoding="utf-8")
        fhandler.setLevel(logging.DEBUG)
        fhandler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s"))
        logger.addHandler(fhandler)

    # RotatingFileHandler is itself a StreamHandler subclass
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(console_level)
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)

    logger.debug("Logging initialized at %s", log_file_path())
    return logger


def install_excepthook(logger: logging.Logger | None = None) -> None:
    """Log uncaught exceptions, including those raised on background threads."""
    lg = logger or logging.getLogger(LOGGER_NAME)

    def _hook(exc_type, exc, tb):
        lg.error("Uncaught exception:")
        for line in traceback.format_exception(exc_type, exc, tb):
            lg.error(line.rstrip())
        # Chain to default hook for console visibility
        sys.__excepthook__(exc_type, exc, tb)

    def _thread_hook(args):
        lg.error("Uncaught exception in thread %s:", getattr(args.thread, "name", "?"))
        for line in traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback):
            lg.error(line.rstrip())

    sys.excepthook = _hook
    threading.excepthook = _thread_hook


def log_environment(logger: logging.Logger | None = None) -> None:
    """Log environment diagnostics helpful for GUI/Tk issues."""
    import platform
    lg = logger or logging.getLogger(LOGGER_NAME)
    lg.debug("Platform: %s", platform.platform())
    lg.debug("Python: %s", sys.version.replace("\n", " "))
    lg.debug("Thread: %s | main=%s", threading.current_thread().name, threading.current_thread() is threading.main_thread())
    try:
        import tkinter as tk
        lg.debug("TkVersion: %s | TclVersion: %s", getattr(tk, "TkVersion", "?"), getattr(tk, "TclVersion", "?"))
    except ImportError as e:
        lg.warning("tkinter import failed: %s", e)


def log_exception_context(msg: str, logger: logging.Logger | None = None) -> None:
    lg = logger or logging.getLogger(LOGGER_NAME)
    lg.error(msg)
    lg.error("Last exception:")
    lg.error(traceback.format_exc())


def crash_hint() -> str:
    """Return a short hint with the log file location to show users."""
    lf = log_file_path()
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"[{ts}] See log for details: {lf}"

"""Tk front end for PokéLib.

A thin window over `pokelib.state.AppState`: it polls the state, renders it and
calls the orchestrator triggers on user input.
"""

from __future__ import annotations

import threading

from pokelib.logging_utils import (
    setup_logging,
    install_excepthook,
    log_environment,
    log_exception_context,
    crash_hint,
)


def run() -> int:
    """Launch the GUI.

    Returns process exit code (0 on success).
    """
    # Initialize logging BEFORE importing Tk so import-time errors are captured
    logger = setup_logging()
    install_excepthook(logger)
    log_environment(logger)

    if threading.current_thread() is not threading.main_thread():
        logger.error("GUI must be launched from the main thread")
        print("[ERROR] GUI must be launched from the main thread.")
        return 2
    try:
        from gui.app import run as run_app
    except Exception:
        log_exception_context("Failed to load GUI module", logger)
        print("[ERROR] Failed to load GUI module.")
        print(crash_hint())
        return 2
    try:
        return int(run_app() or 0)
    except Exception:
        log_exception_context("Unhandled error in GUI mainloop", logger)
        print("[ERROR] Unhandled GUI error.")
        print(crash_hint())
        return 3

import logging
import sys
from datetime import datetime
from typing import Dict, Optional, Union

from loggers.config import configure_loggers


def setup_logging(
    session_id: str,
    log_file: Optional[str] = None,
    log_levels: Optional[Dict[str, Union[int, str]]] = None,
) -> None:
    """
    Configure logging for a calculator session.

    Sets up console output and, when ``log_file`` is given, a UTF-8 log file
    that is overwritten for each session.

    Args:
        session_id (str): Unique identifier for this calculator session.
        log_file (Optional[str]): Path of the log file, or None for console only.
        log_levels: Per-logger levels passed on to ``configure_loggers``.

    Side Effects:
        - Clears existing root logging handlers
        - Creates/overwrites ``log_file`` if given
        - Logs session start information with timestamp
    """
    # Clear any existing handlers
    logging.getLogger().handlers = []

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8", mode="w"))

    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=handlers)
    configure_loggers(log_levels)

    logging.info(f"\n{'='*70}")
    logging.info(f"New Pot Calculator Session Started - ID: {session_id}")
    logging.info(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.info(f"{'='*70}\n")

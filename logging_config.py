"""
Logging configuration: stderr console logger plus optional daily-rotating file.
"""

import logging
import logging.handlers
import os
import sys

import config


def setup_logger(name: str = "recsum", verbose: bool = False, log_file: str | None = None) -> logging.Logger:
    """Configure the root logger for a recsum run and return the named logger.

    Console output goes to stderr so it never mixes with hashes written to
    stdout. ``log_file`` falls back to ``config.LOG_FILE``; when neither is set
    nothing is written to disk.
    """
    if log_file is None:
        log_file = config.LOG_FILE

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(getattr(h, "_recsum", False) for h in root.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        console_handler.setLevel(logging.INFO)
        console_handler._recsum = True
        root.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(os.path.abspath(log_file))
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.handlers.TimedRotatingFileHandler(
                filename=log_file,
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter("%(asctime)s  %(levelname)-8s  %(threadName)s  %(message)s"))
            file_handler.suffix = "%Y-%m-%d"
            file_handler._recsum = True
            root.addHandler(file_handler)

    return logging.getLogger(name)

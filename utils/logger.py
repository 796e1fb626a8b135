"""
Logger utility - Console + file logging.
Console stays quiet (warnings only) so retry chatter from the cursor does not
flood callers. Everything at DEBUG and above goes to the log file with rotation.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from config.settings import LOG_FILE


def get_logger(name='tickfeed', log_file=LOG_FILE, verbose=False):
    """
    Get a configured logger.
    Default: only WARNING and above on console.
    Logs DEBUG and above to `log_file` unless it is empty.
    """
    logger = logging.getLogger(name)
    logger.propagate = False # Prevent double logging if root logger is configured

    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if not log_file:
        return logger

    try:
        # 5 MB per file, max 3 backups
        file_handler = RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=3)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
        ))
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not set up file logging: {e}", file=sys.stderr)

    return logger

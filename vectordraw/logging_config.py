"""Logging setup for the editor, the HTTP server and scripts."""
import logging
import sys
from typing import Optional

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler (and optionally a file handler) to the 'vectordraw' logger."""
    logger = logging.getLogger("vectordraw")
    logger.setLevel(level)
    # NiceGUI reloads call this again
    logger.handlers.clear()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger

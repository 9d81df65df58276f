"""Logging setup for the Duzza round scorer.

Library modules log to children of the 'duzza' logger ('duzza.roster',
'duzza.resolver', ...). Importing duzza adds no handlers; a script calls
setup_logging() once before scoring.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

FILE_FORMATTER = logging.Formatter(
    '%(asctime)s %(levelname)-7s %(name)s [%(filename)s:%(lineno)d] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
CONSOLE_FORMATTER = logging.Formatter('%(levelname)s: %(message)s')


def log_file_path(log_dir: Path, round_number: Optional[int] = None) -> Path:
    """Timestamped log file path, tagged with the round when one is given."""
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    prefix = 'duzza' if round_number is None else f'duzza_round_{round_number}'
    return log_dir / f'{prefix}_{stamp}.log'


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    round_number: Optional[int] = None,
) -> logging.Logger:
    """
    Configure the 'duzza' logger for a scoring run.

    Calling it again replaces (and closes) the handlers from the previous call.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level for the logger and every handler
        log_to_file: Write a timestamped log file under log_dir
        log_to_console: Log to stdout, interleaved with the printed round report
        round_number: Round being scored, used to name the log file

    Returns:
        The configured 'duzza' logger
    """
    logger = logging.getLogger('duzza')
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(level)

    handlers: list[logging.Handler] = []
    if log_to_file:
        log_dir = log_dir or Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path(log_dir, round_number), encoding='utf-8')
        file_handler.setFormatter(FILE_FORMATTER)
        handlers.append(file_handler)
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(CONSOLE_FORMATTER)
        handlers.append(console_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger

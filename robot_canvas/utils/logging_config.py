"""Logging configuration for the backend.

Every module logs through ``logging.getLogger(__name__)``; this sets up the
handlers once when the server starts.
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: Union[int, str] = logging.INFO,
) -> None:
    """Configure logging for the backend.

    Args:
        log_dir: Optional directory to save log files
        log_level: Logging level, as a number or a name like "DEBUG"
    """
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "robot_canvas.log"
    else:
        log_file = None

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    # urllib3 logs every connection at DEBUG, which drowns out the planner logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)

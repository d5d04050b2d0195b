import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configures the root logger for command line use.
    - Message format with time, level, logger and line.
    - Logs go to `stream` (stdout by default) and, when log_file is given,
      to that file as well.
    """
    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(path, mode="w", encoding="utf-8"))

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drop handlers from earlier calls so lines are not duplicated
    )

    logging.getLogger("noise_rng").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)

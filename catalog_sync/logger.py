import logging
import os
import re
import sys
from pathlib import Path
from typing import TextIO

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
TAG_PATTERN = re.compile(r"^\[(\w+)\]")

RESET = "\x1b[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\x1b[32;1m",
    logging.INFO: "\x1b[34;1m",
    logging.WARNING: "\x1b[33;1m",
    logging.ERROR: "\x1b[31;1m",
    logging.CRITICAL: "\x1b[30;47;1m",
}


def supports_color(stream: TextIO) -> bool:
    if "NO_COLOR" in os.environ:
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if not (hasattr(stream, "isatty") and stream.isatty()):
        return False
    return (
        sys.platform != "win32"
        or "WT_SESSION" in os.environ
        or os.environ.get("TERM_PROGRAM") == "vscode"
        or "PYCHARM_HOSTED" in os.environ
    )


class Formatter(logging.Formatter):
    """Plain or ANSI-colored output; with color, the level and the leading ``[Tag]`` are highlighted."""

    def __init__(self, *, color: bool = False):
        super().__init__("%(asctime)s %(levelname)-8s %(name)s %(message)s", DATE_FORMAT)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        if not self.color:
            return super().format(record)

        level_color = LEVEL_COLORS.get(record.levelno, LEVEL_COLORS[logging.DEBUG])
        timestamp = self.formatTime(record, self.datefmt)
        message = TAG_PATTERN.sub(lambda m: f"\x1b[36m{m.group(0)}{RESET}", record.getMessage())
        output = (
            f"\x1b[30;1m{timestamp}{RESET} {level_color}{record.levelname:<8}{RESET} "
            f"\x1b[35m{record.name}{RESET} {message}"
        )
        if record.exc_info:
            output += f"\n\x1b[31m{self.formatException(record.exc_info)}{RESET}"
        return output


def stream_handler(stream: TextIO | None = None) -> logging.Handler:
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(Formatter(color=supports_color(stream)))
    return handler


def file_handler(log_file: str | Path) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(Formatter())
    return handler


def setup_logging(level: str | int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """Attach handlers to the ``catalog_sync`` logger, replacing any set up earlier."""
    logger = logging.getLogger("catalog_sync")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(stream_handler())
    if log_file is not None:
        logger.addHandler(file_handler(log_file))
    return logger

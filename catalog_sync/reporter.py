import logging
from typing import Protocol


class Reporter(Protocol):
    def notice(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggerReporter:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("catalog_sync")

    def notice(self, message: str):
        self.logger.info(message)

    def error(self, message: str):
        self.logger.error(message)

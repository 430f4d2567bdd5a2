class CatalogSyncError(Exception):
    pass


class ConfigurationError(CatalogSyncError):
    """Bad paths or options, detected before any file is touched."""


class SourceDataError(CatalogSyncError):
    """The source catalog is unreadable or lacks required fields."""


class ReconciliationError(CatalogSyncError):
    def __init__(self, locale: str, cause: BaseException):
        super().__init__(str(cause) or type(cause).__name__)
        self.locale = locale
        self.cause = cause

from catalog_sync.diff import diff_keys
from catalog_sync.errors import CatalogSyncError, ConfigurationError, ReconciliationError, SourceDataError
from catalog_sync.models import Catalog, DiffResult, LocaleOutcome, LocaleReport, RunResult
from catalog_sync.reconciler import CatalogReconciler, destination_path, merge_added, purge_removed
from catalog_sync.reporter import LoggerReporter, Reporter
from catalog_sync.runner import run, run_sync
from catalog_sync.settings import Settings
from catalog_sync.storage import load_catalog, save_catalog

__all__ = [
    "Catalog",
    "CatalogReconciler",
    "CatalogSyncError",
    "ConfigurationError",
    "DiffResult",
    "LocaleOutcome",
    "LocaleReport",
    "LoggerReporter",
    "ReconciliationError",
    "Reporter",
    "RunResult",
    "Settings",
    "SourceDataError",
    "destination_path",
    "diff_keys",
    "load_catalog",
    "merge_added",
    "purge_removed",
    "run",
    "run_sync",
    "save_catalog",
]

import asyncio
import logging

from catalog_sync.errors import CatalogSyncError, ReconciliationError
from catalog_sync.models import LocaleOutcome, RunResult
from catalog_sync.reconciler import CatalogReconciler
from catalog_sync.reporter import LoggerReporter, Reporter
from catalog_sync.settings import Settings
from catalog_sync.validation import validate_locales, validate_paths, validate_source

logger = logging.getLogger("catalog_sync.runner")


async def run(settings: Settings, reporter: Reporter | None = None) -> RunResult:
    reporter = reporter or LoggerReporter()

    try:
        validate_paths(settings.source_dir, settings.source_file_path, settings.destination_dir)
        validate_locales(settings.LOCALES)
        source = validate_source(settings.source_file_path)
    except CatalogSyncError as e:
        reporter.error(f"[Run] {e}")
        return RunResult(success=False, error=str(e))

    if not settings.CHECK:
        try:
            settings.destination_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            reporter.error(f"[Run] Failed to create destination {settings.destination_dir}: {e}")
            return RunResult(success=False, error=str(e))

    reconciler = CatalogReconciler(source, settings, reporter)
    try:
        reports = await reconciler.reconcile_all(settings.LOCALES)
    except ReconciliationError as e:
        logger.debug(f"[Run] Locale {e.locale} failed", exc_info=e.cause)
        reporter.error("[Run] Failed to convert files.")
        return RunResult(success=False, error=str(e))

    if settings.CHECK:
        stale = [report.locale for report in reports if report.outcome is not LocaleOutcome.UNCHANGED]
        if stale:
            message = f"{len(stale)} catalog(s) out of date: {', '.join(stale)}"
            reporter.error(f"[Check] {message}")
            return RunResult(success=False, error=message, reports=reports)

    reporter.notice("[Run] Done!")
    return RunResult(success=True, reports=reports)


def run_sync(settings: Settings, reporter: Reporter | None = None) -> RunResult:
    return asyncio.run(run(settings, reporter))

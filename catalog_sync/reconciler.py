from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from catalog_sync.diff import diff_keys
from catalog_sync.errors import ReconciliationError
from catalog_sync.models import Catalog, LocaleOutcome, LocaleReport, Translations
from catalog_sync.storage import load_catalog_async, save_catalog_async

if TYPE_CHECKING:
    from catalog_sync.reporter import Reporter
    from catalog_sync.settings import Settings

logger = logging.getLogger("catalog_sync.reconciler")


def destination_path(destination_dir: str | Path, file_stem: str, locale: str) -> Path:
    return Path(destination_dir) / f"{file_stem}.{locale}.json"


def merge_added(destination: Mapping[str, Any], source: Mapping[str, Any], added: Iterable[str]) -> Translations:
    """Return a copy of ``destination`` with every ``added`` key appended in source order.

    Keys already in ``destination`` keep both their position and their value.
    """
    added = set(added)
    merged = dict(destination)
    for key in source:
        if key in added:
            merged[key] = source[key]
    return merged


def purge_removed(translations: Translations, removed: Iterable[str]) -> Translations:
    for key in removed:
        translations.pop(key, None)
    return translations


class CatalogReconciler:
    """Brings each locale catalog's key set in line with a shared, read-only source catalog."""

    def __init__(self, source: Catalog, settings: Settings, reporter: Reporter):
        self.source = source
        self.settings = settings
        self.reporter = reporter

    @property
    def check_only(self) -> bool:
        return self.settings.CHECK

    def path_for(self, locale: str) -> Path:
        return destination_path(self.settings.destination_dir, self.settings.file_stem, locale)

    async def reconcile_locale(self, locale: str) -> LocaleReport:
        path = self.path_for(locale)

        if not path.exists():
            return await self.create(locale, path)

        destination = await load_catalog_async(path)
        diff = diff_keys(self.source.translations, destination.translations if destination is not None else None)
        if diff is None:
            self.reporter.error(f"[Reconcile] Couldn't compare {path} with the source catalog, check its contents")
            return LocaleReport(locale, path, LocaleOutcome.SKIPPED)

        if self.check_only:
            return self.check(locale, path, diff.added, diff.removed)

        translations = merge_added(destination.translations, self.source.translations, diff.added)
        destination.translations = purge_removed(translations, diff.removed)

        # Rewritten even when nothing changed so formatting stays normalized.
        await save_catalog_async(path, destination, self.settings.INDENT)

        if diff.added:
            self.reporter.notice(f"[Reconcile] Added {len(diff.added)} key(s) to {path}")
        else:
            self.reporter.notice(f"[Reconcile] No keys to add to {path}")
        if diff.removed:
            self.reporter.notice(f"[Reconcile] Removed {len(diff.removed)} key(s) from {path}")
        else:
            self.reporter.notice(f"[Reconcile] No keys to remove from {path}")
        return LocaleReport(locale, path, LocaleOutcome.MERGED, diff.added, diff.removed)

    async def create(self, locale: str, path: Path) -> LocaleReport:
        if self.check_only:
            self.reporter.error(f"[Check] Missing catalog for {locale}: {path}")
            return LocaleReport(locale, path, LocaleOutcome.STALE, added=list(self.source.translations))

        catalog = self.source.clone(locale=locale)
        await save_catalog_async(path, catalog, self.settings.INDENT)
        self.reporter.notice(f"[Reconcile] New locale found, created {path}")
        return LocaleReport(locale, path, LocaleOutcome.CREATED, added=list(catalog.translations))

    def check(self, locale: str, path: Path, added: list[str], removed: list[str]) -> LocaleReport:
        if not added and not removed:
            self.reporter.notice(f"[Check] {path} is up-to-date")
            return LocaleReport(locale, path, LocaleOutcome.UNCHANGED)

        if added:
            self.reporter.error(f"[Check] {path} is missing {len(added)} key(s): {', '.join(added)}")
        if removed:
            self.reporter.error(f"[Check] {path} has {len(removed)} extra key(s): {', '.join(removed)}")
        return LocaleReport(locale, path, LocaleOutcome.STALE, added, removed)

    async def reconcile_all(self, locales: Iterable[str]) -> list[LocaleReport]:
        """Reconcile every locale concurrently and wait for all of them.

        Raises ``ReconciliationError`` for the first failed locale once every task
        has finished. Catalogs already written for other locales are kept.
        """
        locales = list(dict.fromkeys(locales))
        results = await asyncio.gather(*(self.reconcile_locale(locale) for locale in locales), return_exceptions=True)

        reports = []
        for locale, result in zip(locales, results):
            if isinstance(result, Exception):
                logger.debug(f"[Reconcile] Failed to reconcile {locale}", exc_info=result)
                raise ReconciliationError(locale, result) from result
            if isinstance(result, BaseException):
                raise result
            reports.append(result)
        return reports

from pathlib import Path

from catalog_sync.errors import ConfigurationError, SourceDataError
from catalog_sync.models import Catalog
from catalog_sync.storage import load_catalog


def validate_paths(source_dir: Path, source_file_path: Path, destination_dir: Path):
    if not source_dir.is_dir():
        raise ConfigurationError(f"Source {source_dir} doesn't exist or isn't a folder")
    if not source_file_path.is_file():
        raise ConfigurationError(f"Source file {source_file_path} doesn't exist")
    if destination_dir.exists() and not destination_dir.is_dir():
        raise ConfigurationError(f"Destination {destination_dir} isn't a folder")


def validate_locales(locales: list[str]):
    if not locales:
        raise ConfigurationError("No locales specified")


def validate_source(path: Path) -> Catalog:
    catalog = load_catalog(path)
    if catalog is None:
        raise SourceDataError(f"Failed to read JSON from {path}")
    if not catalog.has_field("locale"):
        raise SourceDataError(f"No locale found in {path}")
    if catalog.translations is None:
        raise SourceDataError(f"No translations found in {path}")
    return catalog

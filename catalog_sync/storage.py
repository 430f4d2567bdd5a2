import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from catalog_sync.models import Catalog

logger = logging.getLogger("catalog_sync.storage")

DEFAULT_INDENT = "\t"


def load_catalog(path: str | Path) -> Catalog | None:
    """Read and parse the catalog at ``path``.

    Returns ``None`` when the file is missing or unreadable, when it is not valid
    JSON, or when the top-level value is not an object. Callers decide whether
    that is fatal.
    """
    path = Path(path)
    if not path.is_file():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug(f"[Storage] Failed to read {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug(f"[Storage] {path} does not contain a JSON object")
        return None

    return Catalog.from_dict(data)


def dump_catalog(catalog: Catalog, indent: str | int = DEFAULT_INDENT) -> str:
    return json.dumps(catalog.to_dict(), ensure_ascii=False, indent=indent)


def save_catalog(path: str | Path, catalog: Catalog, indent: str | int = DEFAULT_INDENT):
    """Overwrite ``path`` with ``catalog`` through a temporary file and an atomic rename."""
    path = Path(path)
    content = dump_catalog(catalog, indent)
    mode = path.stat().st_mode & 0o777 if path.exists() else 0o644

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
        tmp_name = None
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)


async def load_catalog_async(path: str | Path) -> Catalog | None:
    return await asyncio.to_thread(load_catalog, path)


async def save_catalog_async(path: str | Path, catalog: Catalog, indent: str | int = DEFAULT_INDENT):
    await asyncio.to_thread(save_catalog, path, catalog, indent)

from collections.abc import Mapping
from typing import Any

from catalog_sync.models import DiffResult


def diff_keys(source: Mapping[str, Any] | None, destination: Mapping[str, Any] | None) -> DiffResult | None:
    """Compare two translation maps by key.

    ``added`` keeps the source order and ``removed`` keeps the destination order.
    Returns ``None`` if either side is not a mapping, which callers must treat as
    "cannot compare", never as "nothing changed".
    """
    if not isinstance(source, Mapping) or not isinstance(destination, Mapping):
        return None

    added = [key for key in source if key not in destination]
    removed = [key for key in destination if key not in source]
    return DiffResult(added=added, removed=removed)

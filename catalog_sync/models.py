import copy
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

# Translation values are opaque JSON and are only ever replaced whole.
Translations = dict[str, Any]


@dataclass
class Catalog:
    locale: str | None
    translations: Translations | None
    extras: dict[str, Any] = field(default_factory=dict)
    field_order: list[str] = field(default_factory=list, repr=False)

    @classmethod
    def from_dict(cls, data: dict):
        extras = {k: v for k, v in data.items() if k not in ("locale", "translations")}
        translations = data.get("translations")
        return cls(
            locale=data.get("locale"),
            translations=translations if isinstance(translations, dict) else None,
            extras=extras,
            field_order=list(data.keys()),
        )

    def has_field(self, name: str) -> bool:
        """Whether ``name`` is a top-level key, even one holding ``null``."""
        if self.field_order:
            return name in self.field_order
        return name in self.extras or getattr(self, name, None) is not None

    def to_dict(self) -> dict[str, Any]:
        values = {"locale": self.locale, "translations": self.translations, **self.extras}
        if not self.field_order:
            return values

        # Only keys that were read are written back, plus extras set since.
        data = {key: values[key] for key in self.field_order if key in values}
        for key, value in self.extras.items():
            data.setdefault(key, value)
        return data

    def clone(self, *, locale: str) -> "Catalog":
        cloned = copy.deepcopy(self)
        cloned.locale = locale
        if cloned.field_order and "locale" not in cloned.field_order:
            cloned.field_order.insert(0, "locale")
        return cloned


@dataclass
class DiffResult:
    added: list[str]
    removed: list[str]

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


class LocaleOutcome(Enum):
    CREATED = "created"
    MERGED = "merged"
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    STALE = "stale"


@dataclass
class LocaleReport:
    locale: str
    path: Path
    outcome: LocaleOutcome
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


@dataclass
class RunResult:
    success: bool
    error: str | None = None
    reports: list[LocaleReport] = field(default_factory=list)

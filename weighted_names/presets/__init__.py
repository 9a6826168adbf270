"""Locale preset registry.

Locales register via the @register_locale decorator.
The registry auto-discovers modules within weighted_names.presets.

These are based on census data collected by world governments and may not
perfectly represent the cultures in those nations.
"""

from __future__ import annotations

import importlib
import pkgutil

from .base import LocalePreset, format_full_name

__all__ = [
    "LocalePreset",
    "available_locales",
    "format_full_name",
    "get_locale",
    "register_locale",
]


_REGISTRY: dict[str, type[LocalePreset]] = {}


def register_locale(cls: type[LocalePreset]) -> type[LocalePreset]:
    code = getattr(cls, "code", None)
    if not isinstance(code, str) or not code:
        raise ValueError("Locale preset class must define a non-empty 'code' attribute")
    if code in _REGISTRY:
        raise ValueError(f"Duplicate locale registration: {code}")
    _REGISTRY[code] = cls
    return cls


def _auto_import_locales() -> None:
    # Each locale module registers its preset class on import.
    pkg_name = __name__
    for m in pkgutil.iter_modules(__path__):  # type: ignore[name-defined]
        if m.ispkg:
            continue
        if m.name in {"base", "__init__"}:
            continue
        importlib.import_module(f"{pkg_name}.{m.name}")


def available_locales() -> list[str]:
    _auto_import_locales()
    return sorted(_REGISTRY)


def get_locale(code: str) -> LocalePreset:
    """Return a preset instance for ``code`` (case-insensitive)."""

    _auto_import_locales()
    cls = _REGISTRY.get(code.strip().lower())
    if cls is None:
        raise KeyError(f"unknown locale {code!r}; available: {', '.join(sorted(_REGISTRY))}")
    return cls()

"""Configuration defaults and optional JSON/YAML overrides.

This module defines:
- Default generation settings (locale, count, which part of the name to draw).
- Optional custom name tables that replace the locale preset.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .names import NameList

PARTS = ("full", "given", "family")


@dataclass(frozen=True)
class CustomNames:
    """User-supplied tables. Either list may be None when only one part is drawn."""

    given: NameList | None = None
    family: NameList | None = None
    family_first: bool = False


@dataclass(frozen=True)
class AppConfig:
    locale: str = "us"
    count: int = 1
    part: str = "full"  # "full"|"given"|"family"
    separator: str = " "
    custom: CustomNames | None = None


def _name_table(raw: Any, key: str) -> NameList:
    """Build a NameList from any of the three accepted table shapes.

    - {"Foo": 2, "Bar": 1}
    - [["Foo", 2], ["Bar", 1]]
    - {"names": ["Foo", "Bar"], "weights": [2, 1]}
    """

    if isinstance(raw, dict) and set(raw) == {"names", "weights"}:
        names, weights = raw["names"], raw["weights"]
        if not isinstance(names, list) or not isinstance(weights, list):
            raise ValueError(f"names.{key}: 'names' and 'weights' must be lists")
        table = NameList([str(n) for n in names], weights)
    elif isinstance(raw, dict):
        table = NameList.from_mapping({str(k): v for k, v in raw.items()})
    elif isinstance(raw, list):
        pairs: list[tuple[str, Any]] = []
        for entry in raw:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise ValueError(f"names.{key}: expected [name, weight] pairs, got {entry!r}")
            pairs.append((str(entry[0]), entry[1]))
        table = NameList.from_pairs(pairs)
    else:
        raise ValueError(f"names.{key}: expected a mapping or a list of pairs")

    table.validate()
    return table


def _custom_names(raw: Any) -> CustomNames:
    if not isinstance(raw, dict):
        raise ValueError("'names' must be a mapping")
    given = _name_table(raw["given"], "given") if "given" in raw else None
    family = _name_table(raw["family"], "family") if "family" in raw else None
    if given is None and family is None:
        raise ValueError("'names' must define 'given' and/or 'family'")
    family_first = raw.get("family_first", False)
    if not isinstance(family_first, bool):
        raise ValueError(f"names.family_first must be true or false, got {family_first!r}")
    return CustomNames(given=given, family=family, family_first=family_first)


def load_config(path: Path | None) -> AppConfig:
    """Load optional config overrides.

    Supports JSON by default.
    YAML is supported if PyYAML is installed and the file extension is .yml/.yaml.

    Schema (all keys optional):
    {
      "locale": "jp",
      "count": 5,
      "part": "full",
      "separator": " ",
      "names": {
        "given": {"Foo": 2, "Bar": 1},
        "family": [["Baz", 3], ["Buzz", 2]],
        "family_first": false
      }
    }
    """

    if path is None:
        return AppConfig()

    path = path.expanduser().resolve()
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")

    raw: Any
    if path.suffix.lower() in {".yml", ".yaml"}:
        try:
            import yaml  # type: ignore
        except ImportError as e:  # pragma: no cover
            raise RuntimeError(
                "YAML config requested but PyYAML is not installed. Install with: pip install pyyaml"
            ) from e
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    else:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping: {path}")

    base = AppConfig()

    count = raw.get("count", base.count)
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError("count must be >= 0")

    part = str(raw.get("part", base.part))
    if part not in PARTS:
        raise ValueError(f"part must be one of {', '.join(PARTS)}")

    custom = _custom_names(raw["names"]) if "names" in raw else None

    return AppConfig(
        locale=str(raw.get("locale", base.locale)),
        count=count,
        part=part,
        separator=str(raw.get("separator", base.separator)),
        custom=custom,
    )

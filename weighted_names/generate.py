"""Name generation driver (source resolution, deterministic RNG, output records)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, TextIO

from .config import PARTS, AppConfig
from .names import FullNameList, NameList
from .presets import format_full_name, get_locale
from .utils.rng import make_rng

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateArgs:
    locale: str
    count: int = 1
    part: str = "full"  # "full"|"given"|"family"
    seed: int | None = None
    separator: str = " "


@dataclass(frozen=True)
class GeneratedName:
    given: str | None
    family: str | None
    display: str

    def to_record(self) -> dict[str, Any]:
        return {"given": self.given, "family": self.family, "display": self.display}


@dataclass(frozen=True)
class NameSource:
    """Where names are drawn from: a preset locale or the config's custom tables."""

    label: str
    given: NameList | None
    family: NameList | None
    family_first: bool

    def full_names(self) -> FullNameList:
        if self.given is None or self.family is None:
            raise ValueError(f"{self.label}: both given and family names are required for full names")
        return FullNameList(self.given, self.family)


def resolve_source(args: GenerateArgs, config: AppConfig) -> NameSource:
    if config.custom is not None:
        custom = config.custom
        return NameSource(
            label="custom",
            given=custom.given,
            family=custom.family,
            family_first=custom.family_first,
        )

    preset = get_locale(args.locale)
    return NameSource(
        label=preset.code,
        given=preset.given_names(),
        family=preset.family_names(),
        family_first=preset.family_first,
    )


def run_generation(args: GenerateArgs, config: AppConfig) -> list[GeneratedName]:
    """Draw ``args.count`` names.

    With a seed, output is reproducible for the same source and arguments.
    """

    if args.count < 0:
        raise ValueError("count must be >= 0")
    if args.part not in PARTS:
        raise ValueError(f"part must be one of {', '.join(PARTS)}")

    rng = make_rng(args.seed)
    source = resolve_source(args, config)

    log.debug("Sampling %d %s name(s) from %s (seed=%s)", args.count, args.part, source.label, args.seed)

    if args.part == "full":
        pairs = source.full_names().sample_batch(rng, args.count)
        return [
            GeneratedName(
                given=g,
                family=f,
                display=format_full_name((g, f), source.family_first, args.separator),
            )
            for g, f in pairs
        ]

    table = source.given if args.part == "given" else source.family
    if table is None:
        raise ValueError(f"{source.label}: no {args.part} names configured")
    names = table.sample_batch(rng, args.count)
    if args.part == "given":
        return [GeneratedName(given=n, family=None, display=n) for n in names]
    return [GeneratedName(given=None, family=n, display=n) for n in names]


def write_names(out: TextIO, names: list[GeneratedName], *, jsonl: bool = False) -> None:
    for name in names:
        if jsonl:
            out.write(json.dumps(name.to_record(), ensure_ascii=False) + "\n")
        else:
            out.write(name.display + "\n")

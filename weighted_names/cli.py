"""Command line interface for weighted_names."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import PARTS, load_config
from .generate import GenerateArgs, run_generation, write_names
from .presets import available_locales, get_locale


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="weighted-names",
        description=(
            "Print random names drawn from census-weighted locale presets\n"
            "or from custom weighted tables in a config file."
        ),
    )

    p.add_argument("--locale", default=None, help="Preset locale code (see --list-locales)")
    p.add_argument("--count", type=int, default=None, help="Number of names to draw")
    p.add_argument("--part", choices=PARTS, default=None, help="Draw full names, given names or family names")
    p.add_argument("--seed", type=int, default=None, help="Seed for deterministic reproducibility")
    p.add_argument("--separator", default=None, help="Separator between given and family name")
    p.add_argument("--jsonl", action="store_true", help="Print one JSON object per line")
    p.add_argument("--config", type=Path, default=None, help="Optional JSON/YAML config override")
    p.add_argument("--list-locales", action="store_true", help="List preset locales and exit")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = _build_parser()
    ns = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        if ns.list_locales:
            for code in available_locales():
                sys.stdout.write(f"{code}\t{get_locale(code).display_name}\n")
            return 0

        config = load_config(ns.config)
        if ns.locale is not None and config.custom is not None:
            # An explicit --locale beats custom tables from the config file.
            config = replace(config, custom=None)
        args = GenerateArgs(
            locale=ns.locale if ns.locale is not None else config.locale,
            count=ns.count if ns.count is not None else config.count,
            part=ns.part if ns.part is not None else config.part,
            seed=ns.seed,
            separator=ns.separator if ns.separator is not None else config.separator,
        )
        names = run_generation(args, config)
        write_names(sys.stdout, names, jsonl=bool(ns.jsonl))
        return 0
    except Exception as e:
        logging.getLogger(__name__).error(str(e))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

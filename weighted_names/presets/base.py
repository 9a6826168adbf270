"""Locale preset interface."""

from __future__ import annotations

from typing import ClassVar

from ..names import FullNameList, NameList

NameTable = tuple[tuple[str, float], ...]


class LocalePreset:
    """Base class for hard-coded locale name tables.

    Subclasses set the class attributes; every accessor builds a fresh list so
    callers can mutate what they get back without affecting other callers.
    """

    code: ClassVar[str]
    display_name: ClassVar[str]
    given_table: ClassVar[NameTable]
    family_table: ClassVar[NameTable]
    given_source: ClassVar[str] = ""
    family_source: ClassVar[str] = ""
    # Japanese order puts the family name first.
    family_first: ClassVar[bool] = False

    def given_names(self) -> NameList:
        return NameList.from_pairs(self.given_table)

    def family_names(self) -> NameList:
        return NameList.from_pairs(self.family_table)

    def full_names(self) -> FullNameList:
        return FullNameList(self.given_names(), self.family_names())


def format_full_name(pair: tuple[str, str], family_first: bool = False, separator: str = " ") -> str:
    given, family = pair
    if family_first:
        return f"{family}{separator}{given}"
    return f"{given}{separator}{family}"

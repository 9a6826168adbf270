"""Names weighted by their frequency in the United States of America."""

from __future__ import annotations

from ..names import FullNameList, NameList
from . import register_locale
from .base import LocalePreset

GIVEN_NAMES = (
    ("James", 10.836), ("John", 10.682), ("Robert", 10.264), ("Mary", 8.586),
    ("Michael", 8.586), ("William", 8.004), ("David", 7.717), ("Richard", 5.561),
    ("Charles", 4.974), ("Joseph", 4.585), ("Thomas", 4.507), ("Patricia", 3.504),
    ("Linda", 3.380), ("Barbara", 3.200), ("Elizabeth", 3.060), ("Jennifer", 3.044),
    ("Maria", 2.704), ("Susan", 2.593), ("Margaret", 2.508), ("Dorothy", 2.374),
)

FAMILY_NAMES = (
    ("Smith", 2.443), ("Johnson", 1.933), ("Williams", 1.625), ("Brown", 1.437),
    ("Jones", 1.425), ("Garcia", 1.166), ("Miller", 1.161), ("Davis", 1.116),
    ("Rodriguez", 1.095), ("Martinez", 1.060), ("Hernandez", 1.040), ("Lopez", 0.875),
    ("Gonzalez", 0.841), ("Wilson", 0.802), ("Anderson", 0.784), ("Thomas", 0.756),
    ("Taylor", 0.751), ("Moore", 0.724), ("Jackson", 0.708), ("Martin", 0.703),
)


@register_locale
class UnitedStatesPreset(LocalePreset):
    code = "us"
    display_name = "United States"
    given_table = GIVEN_NAMES
    family_table = FAMILY_NAMES
    given_source = "https://namecensus.com/first-names/"
    family_source = "https://www.thoughtco.com/most-common-us-surnames-1422656"


def given_names() -> NameList:
    return UnitedStatesPreset().given_names()


def family_names() -> NameList:
    return UnitedStatesPreset().family_names()


def full_names() -> FullNameList:
    return UnitedStatesPreset().full_names()

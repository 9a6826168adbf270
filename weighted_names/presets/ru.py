"""Names weighted by their frequency in the Russian Federation.

Family names are listed in both grammatical genders since the feminine form is
a separate entry in the frequency data.
"""

from __future__ import annotations

from ..names import FullNameList, NameList
from . import register_locale
from .base import LocalePreset

GIVEN_NAMES = (
    ("Sergey", 4.943), ("Aleksandr", 4.530), ("Elena", 4.312), ("Tatyana", 3.744),
    ("Olga", 3.609), ("Natalya", 3.605), ("Andrey", 3.487), ("Ekaterina", 3.285),
    ("Dmitriy", 3.196), ("Irina", 3.030), ("Vladimir", 2.940), ("Aleksey", 2.850),
    ("Svetlana", 2.768), ("Anastasiya", 2.769), ("Anna", 2.278), ("Maksim", 1.910),
    ("Marina", 1.882), ("Ivan", 1.834), ("Evgeniy", 1.799), ("Alexander", 1.748),
)

FAMILY_NAMES = (
    ("Ivanova", 0.928), ("Ivanov", 0.881), ("Kuznetsova", 0.454), ("Kuznetsov", 0.437),
    ("Petrov", 0.430), ("Smirnova", 0.428), ("Magomedov", 0.385), ("Petrova", 0.383),
    ("Smirnov", 0.366), ("Popov", 0.366), ("Popova", 0.366), ("Volkova", 0.304),
    ("Novikova", 0.258), ("Morozova", 0.240), ("Sokolova", 0.230), ("Pavlova", 0.223),
    ("Romanova", 0.222), ("Volkov", 0.219), ("Shevchenko", 0.218), ("Andreeva", 0.216),
)


@register_locale
class RussiaPreset(LocalePreset):
    code = "ru"
    display_name = "Russia"
    given_table = GIVEN_NAMES
    family_table = FAMILY_NAMES
    given_source = "https://forebears.io/russia/forenames"
    family_source = "https://forebears.io/russia/surnames"


def given_names() -> NameList:
    return RussiaPreset().given_names()


def family_names() -> NameList:
    return RussiaPreset().family_names()


def full_names() -> FullNameList:
    return RussiaPreset().full_names()

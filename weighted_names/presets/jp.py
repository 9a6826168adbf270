"""Names weighted by their frequency in Japan.

Japanese puts the family name first, which is why the package speaks of
"given" and "family" names rather than "first" and "last".
"""

from __future__ import annotations

from ..names import FullNameList, NameList
from . import register_locale
from .base import LocalePreset

GIVEN_NAMES = (
    ("Kenji", 1.545), ("Hiroshi", 1.511), ("Shigeru", 1.208), ("Sachiko", 1.042),
    ("Masako", 1.009), ("Katsumi", 0.989), ("Yoko", 0.959), ("Michiko", 0.911),
    ("Toshio", 0.871), ("Yoshiko", 0.871), ("Hiromi", 0.830), ("Hiroko", 0.826),
    ("Yoshio", 0.790), ("Kazuo", 0.760), ("Akira", 0.753), ("Keiko", 0.739),
    ("Hisako", 0.728), ("Yoshimi", 0.705), ("Fumiko", 0.675), ("Masao", 0.671),
)

FAMILY_NAMES = (
    ("Sato", 1.957), ("Suzuki", 1.889), ("Tanaka", 1.414), ("Watanabe", 1.364),
    ("Takahashi", 1.343), ("Ito", 1.240), ("Yamamoto", 1.131), ("Nakamura", 1.124),
    ("Kobayashi", 1.075), ("Saito", 1.038), ("Kato", 0.936), ("Yoshida", 0.867),
    ("Yamada", 0.848), ("Sasaki", 0.707), ("Matsumoto", 0.685), ("Yamaguchi", 0.674),
    ("Inoue", 0.649), ("Kimura", 0.601), ("Shimizu", 0.574), ("Hayashi", 0.572),
)


@register_locale
class JapanPreset(LocalePreset):
    code = "jp"
    display_name = "Japan"
    given_table = GIVEN_NAMES
    family_table = FAMILY_NAMES
    given_source = "https://forebears.io/japan/forenames"
    family_source = "https://forebears.io/japan/surnames"
    family_first = True


def given_names() -> NameList:
    return JapanPreset().given_names()


def family_names() -> NameList:
    return JapanPreset().family_names()


def full_names() -> FullNameList:
    return JapanPreset().full_names()

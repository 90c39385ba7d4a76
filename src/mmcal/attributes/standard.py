from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute

MONTH_NAMES = (
    "First Waso", "Tagu", "Kason", "Nayon", "Waso", "Wagaung", "Tawthalin",
    "Thadingyut", "Tazaungmon", "Nadaw", "Pyatho", "Tabodwe", "Tabaung",
    "Late Tagu", "Late Kason",
)
MONTH_NAMES_MM = (
    "ပ-ဝါဆို", "တန်ခူး", "ကဆုန်", "နယုန်", "ဝါဆို", "ဝါခေါင်", "တော်သလင်း",
    "သီတင်းကျွတ်", "တန်ဆောင်မုန်း", "နတ်တော်", "ပြာသို", "တပို့တွဲ", "တပေါင်း",
    "နှောင်းတန်ခူး", "နှောင်းကဆုန်",
)
MOON_PHASE_NAMES = ("Waxing", "Full moon", "Waning", "New moon")
MOON_PHASE_NAMES_MM = ("လဆန်း", "လပြည့်", "လဆုတ်", "လကွယ်")
# week_day 0 is Saturday
WEEKDAY_NAMES = ("Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
WEEKDAY_NAMES_MM = ("စနေ", "တနင်္ဂနွေ", "တနင်္လာ", "အင်္ဂါ", "ဗုဒ္ဓဟူး", "ကြာသပတေး", "သောကြာ")

_MM_DIGITS = str.maketrans("0123456789", "၀၁၂၃၄၅၆၇၈၉")


def month_name(month: int, year_type: int, *, burmese: bool = False) -> str:
    names = MONTH_NAMES_MM if burmese else MONTH_NAMES
    # The only Waso of a watat year is its second one.
    if month == 4 and year_type > 0:
        return ("ဒု-" if burmese else "Second ") + names[4]
    return names[month]


def names(info) -> Dict[str, Any]:
    m = info.myanmar
    return {
        "month_name": month_name(m.month, m.year_type),
        "moon_phase_name": MOON_PHASE_NAMES[m.moon_phase],
        "weekday_name": WEEKDAY_NAMES[m.week_day],
    }


def names_mm(info) -> Dict[str, Any]:
    m = info.myanmar
    return {
        "month_name_mm": month_name(m.month, m.year_type, burmese=True),
        "moon_phase_name_mm": MOON_PHASE_NAMES_MM[m.moon_phase],
        "weekday_name_mm": WEEKDAY_NAMES_MM[m.week_day],
        "year_mm": str(m.myanmar_year).translate(_MM_DIGITS),
        "fortnight_day_mm": str(m.fortnight_day).translate(_MM_DIGITS),
    }


def sasana_year(info) -> Dict[str, Any]:
    return {"sasana_year": info.myanmar.buddhist_year}


def sabbath(info) -> Dict[str, Any]:
    # Sabbath on waxing 8, full moon, waning 8 and new moon; the eve is the day before.
    md, mml = info.myanmar.month_day, info.myanmar.month_length
    return {
        "sabbath": md in (8, 15, 23) or md == mml,
        "sabbath_eve": md in (7, 14, 22) or md == mml - 1,
    }


register_attribute("names", names)
register_attribute("names_mm", names_mm)
register_attribute("sasana_year", sasana_year)
register_attribute("sabbath", sabbath)

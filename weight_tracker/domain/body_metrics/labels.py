"""Localized names for calendar buckets."""

from __future__ import annotations

from datetime import date
from typing import Dict, Tuple

# Weekday names are Sunday-first to match ``weekday_index``.
WEEKDAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "ca": ("Diumenge", "Dilluns", "Dimarts", "Dimecres", "Dijous", "Divendres", "Dissabte"),
    "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
}

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "ca": (
        "Gener", "Febrer", "Març", "Abril", "Maig", "Juny",
        "Juliol", "Agost", "Setembre", "Octubre", "Novembre", "Desembre",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

SUPPORTED_LOCALES = tuple(WEEKDAY_NAMES)


def _check_locale(locale: str) -> str:
    if locale not in WEEKDAY_NAMES:
        raise ValueError(f"Unsupported locale {locale!r}; expected one of {SUPPORTED_LOCALES}")
    return locale


def weekday_index(day: date) -> int:
    """Return the weekday with 0 = Sunday ... 6 = Saturday."""

    return day.isoweekday() % 7


def weekday_name(index: int, locale: str = "ca") -> str:
    return WEEKDAY_NAMES[_check_locale(locale)][index]


def day_label(day: date, locale: str = "ca") -> str:
    name = weekday_name(weekday_index(day), locale)
    return f"{name}, {day:%d/%m/%Y}"


def week_label(iso_year: int, week: int, locale: str = "ca") -> str:
    prefix = "Setmana" if _check_locale(locale) == "ca" else "Week"
    return f"{prefix} {week}, {iso_year}"


def month_label(year: int, month_index: int, locale: str = "ca") -> str:
    name = MONTH_NAMES[_check_locale(locale)][month_index]
    if locale == "ca":
        return f"{name} de {year}"
    return f"{name} {year}"

"""Birth/founding date of a kennitala.

Раскладка: DDMMYYRRXC.
- DD: день, у организаций +40 (снимается через mod 40);
- MM: месяц 1..12;
- YY: две младшие цифры года;
- C: маркер века, век = 18 + ((C + 2) mod 10), т.е. 8 -> 1800, 9 -> 1900, 0 -> 2000.

Примеры (doctest):
>>> birth_date_from_cleaned("0101902079")
datetime.date(1990, 1, 1)
>>> birth_date_from_cleaned("5503050030")
datetime.date(2005, 3, 15)
>>> birth_date_from_cleaned("3104902079") is None
True
>>> get_birth_date("8012345678") is None
True
"""
from __future__ import annotations

from datetime import date

from kennitala.util.clean import clean_if_shaped

COMPANY_DAY_OFFSET = 40


def century_of(marker: str) -> int:
    """Century (as in 19 for the 1900s) encoded by the last digit."""
    return 18 + ((int(marker) + 2) % 10)


def century_digit(year: int) -> str:
    """Inverse of `century_of` for years 1800..2799."""
    return f"{year:04d}"[1]


def birth_date_from_cleaned(cleaned: str) -> date | None:
    """Date encoded by an already cleaned 10-digit value, or None if it isn't a real date."""
    day = int(cleaned[0:2]) % COMPANY_DAY_OFFSET
    month = int(cleaned[2:4])
    year = century_of(cleaned[9]) * 100 + int(cleaned[4:6])
    try:
        # date() не нормализует: 31.04, 29.02 невисокосного года, месяц 0/13 -> ValueError
        return date(year, month, day)
    except ValueError:
        return None


def get_birth_date(value: str) -> date | None:
    """Best-effort date of a roughly kennitala-shaped string, without validating it.

    Returns None for malformed strings, temporary codes (8/9) and nonsensical dates.
    """
    cleaned = clean_if_shaped(value)
    if not cleaned or cleaned[0] in "89":
        return None
    return birth_date_from_cleaned(cleaned)

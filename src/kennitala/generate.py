"""Генерация технически валидной кенниталы (возможно, реально существующей!).

Алгоритм для обычных кодов:
- дата рождения/основания: переданная, если попадает в допустимый диапазон,
  иначе случайная за последние 100 (person) / 50 (company) лет;
- DDMMYY (+40 к дню у организаций) и маркер века из года;
- перебор: случайный RR (организации 00..99, люди 20..99), затем X = 0..9 по порядку,
  первый кандидат, прошедший `is_valid_kennitala`, возвращается.

Для одного RR подходящий X не находится примерно в 1 случае из 11,
поэтому повторов обычно ноль-один; цикл всё равно ограничен MAX_ATTEMPTS.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from kennitala.classify import ROBOT_KT_NUMS, SUBJECT_TYPES, robot_kennitala
from kennitala.parse import Options, is_valid_kennitala
from kennitala.util.dates import COMPANY_DAY_OFFSET, century_digit

log = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000
PERSON_MIN_DATE = date(1800, 1, 1)
COMPANY_MIN_DATE = date(1969, 1, 1)
MAX_DATE = date(2100, 1, 1)
PERSON_MAX_AGE_YEARS = 100
COMPANY_MAX_AGE_YEARS = 50

_ROBOT_NUMS = tuple(sorted(ROBOT_KT_NUMS))


@dataclass(frozen=True)
class GenerateOptions:
    type: str | None = None
    temporary: bool = False   # только для person
    robot: bool = False       # только для person
    birth_date: date | None = None

    def __post_init__(self) -> None:
        if self.type is not None and self.type not in SUBJECT_TYPES:
            raise ValueError(f"unsupported type: {self.type!r}")


def _as_date(value: object) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def _pick_birth_date(supplied: object, is_company: bool, rng: random.Random) -> date:
    bday = _as_date(supplied)
    min_date = COMPANY_MIN_DATE if is_company else PERSON_MIN_DATE
    if bday is not None and min_date <= bday < MAX_DATE:
        return bday
    if supplied is not None:
        log.debug("birth date %r out of range, using a random one", supplied)
    years = COMPANY_MAX_AGE_YEARS if is_company else PERSON_MAX_AGE_YEARS
    max_age = years * 365 * 24 * 60 * 60
    moment = datetime.now(timezone.utc) - timedelta(seconds=rng.randint(0, max_age))
    return moment.date()


def generate_kennitala(opts: GenerateOptions | None = None, rng: random.Random | None = None) -> str:
    opts = opts or GenerateOptions()
    rng = rng or random.Random()
    is_company = opts.type == "company"

    if not is_company:
        if opts.temporary:
            head = rng.choice("89")
            return f"{head}{rng.randint(0, 999_999_999):09d}"
        if opts.robot:
            return robot_kennitala(rng.choice(_ROBOT_NUMS))

    bday = _pick_birth_date(opts.birth_date, is_company, rng)
    day = bday.day + (COMPANY_DAY_OFFSET if is_company else 0)
    ddmmyy = f"{day:02d}{bday.month:02d}{bday.year % 100:02d}"
    century = century_digit(bday.year)
    check_opts = Options(type=opts.type)

    for attempt in range(MAX_ATTEMPTS):
        rr = rng.randint(0, 99) if is_company else rng.randint(20, 99)
        for x in range(10):
            kt = f"{ddmmyy}{rr:02d}{x}{century}"
            if is_valid_kennitala(kt, check_opts):
                return kt
        log.debug("no check digit for %s%02d, rerolling (attempt %d)", ddmmyy, rr, attempt + 1)

    raise RuntimeError(f"could not generate a kennitala for {bday} in {MAX_ATTEMPTS} attempts")

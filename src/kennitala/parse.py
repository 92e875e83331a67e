"""Разбор и проверка кенниталы.

Порядок проверок (первая неудача -> None):
1. пустое значение;
2. очистка по `Options.clean` и проверка формы (ровно 10 цифр);
3. временные коды 8/9 принимаются сразу, без КС и даты
   (если не задан reject_temporary и не запрошен type="company");
4. тип (person/company) против запрошенного;
5. robot-коды только при `robot=True`;
6. контрольная сумма: веса 3,2,7,6,5,4,3,2,1 по первым 9 цифрам, сумма % 11 == 0;
7. дата: по умолчанию грубый регэксп, при `strict_date` — реальная календарная дата.

Примеры (doctest):
>>> parse_kennitala("010190-2079").formatted
'010190-2079'
>>> parse_kennitala("1234567890") is None
True
>>> parse_kennitala("8012345678").temporary
True
>>> check_kennitala("1234567890").reason
'checksum'
>>> is_valid_kennitala("010190-2079"), is_valid_kennitala("0101902079")
(False, True)
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Dict, NamedTuple, Optional

from kennitala.classify import SUBJECT_TYPES, is_robot, is_temporary
from kennitala.util.clean import clean_aggressive, clean_careful, format_kennitala, is_shaped
from kennitala.util.dates import birth_date_from_cleaned

WEIGHTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2, 1)
CLEAN_MODES = ("none", "careful", "aggressive")

# Грубая проверка дня/месяца + маркер века 8/9/0 где-то дальше. Пропускает, например, 31.02.
LOOSE_DATE_RE = re.compile(r"^(?:[012456]\d|[37][01])(?:0\d|1[012]).+[890]")


@dataclass(frozen=True)
class Options:
    clean: str | bool | None = None   # None -> careful (в is_valid_kennitala -> none)
    reject_temporary: bool = False
    type: str | None = None           # person | company | None
    robot: bool = False
    strict_date: bool = False

    def __post_init__(self) -> None:
        if self.clean not in (None, False) and self.clean not in CLEAN_MODES:
            raise ValueError(f"unsupported clean mode: {self.clean!r}")
        if self.type is not None and self.type not in SUBJECT_TYPES:
            raise ValueError(f"unsupported type: {self.type!r}")


@dataclass(frozen=True)
class ParseResult:
    value: str
    type: str
    robot: bool
    formatted: str
    temporary: bool | None = None  # только у временных кодов

    @property
    def birth_date(self) -> date | None:
        if self.temporary:
            return None
        return birth_date_from_cleaned(self.value)

    def to_dict(self) -> Dict[str, object]:
        d = asdict(self)
        if self.temporary is None:
            d.pop("temporary")
        return d


class Check(NamedTuple):
    result: Optional[ParseResult]
    reason: Optional[str]  # empty | shape | type | robot | checksum | date; None при успехе


def _clean(value: str, mode: str | bool | None) -> str:
    if mode in ("none", False):
        return value
    if mode == "aggressive":
        return clean_aggressive(value)
    return clean_careful(value)


def checksum_ok(kt: str) -> bool:
    """Weighted mod-11 check over the first nine digits; the last digit doesn't take part."""
    total = sum(int(d) * w for d, w in zip(kt, WEIGHTS))
    return total % 11 == 0


def loose_date_ok(kt: str) -> bool:
    return bool(LOOSE_DATE_RE.match(kt))


def check_kennitala(value: str, opts: Options | None = None) -> Check:
    """Same as `parse_kennitala`, but also says which check rejected the value."""
    opts = opts or Options()
    if not value:
        return Check(None, "empty")

    kt = _clean(value, opts.clean)
    if not is_shaped(kt):
        return Check(None, "shape")

    if is_temporary(kt) and not opts.reject_temporary and opts.type != "company":
        return Check(
            ParseResult(value=kt, type="person", robot=False,
                        formatted=format_kennitala(kt), temporary=True),
            None,
        )

    # 8/9 без короткого пути (reject_temporary или type="company") считаются company
    typ = "company" if kt[0] > "3" else "person"
    if opts.type and opts.type != typ:
        return Check(None, "type")

    robot = is_robot(kt)
    if robot and not opts.robot:
        return Check(None, "robot")

    if not checksum_ok(kt):
        return Check(None, "checksum")

    date_ok = birth_date_from_cleaned(kt) is not None if opts.strict_date else loose_date_ok(kt)
    if not date_ok:
        return Check(None, "date")

    return Check(ParseResult(value=kt, type=typ, robot=robot, formatted=format_kennitala(kt)), None)


def parse_kennitala(value: str, opts: Options | None = None) -> ParseResult | None:
    """Разобрать значение; None, если это не (технически) валидная кеннитала."""
    return check_kennitala(value, opts).result


def is_valid_kennitala(value: str, opts: Options | None = None) -> bool:
    """Like `parse_kennitala`, but the `clean` option defaults to "none"."""
    opts = opts or Options()
    if opts.clean is None:
        opts = replace(opts, clean="none")
    return check_kennitala(value, opts).result is not None

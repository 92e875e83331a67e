"""Классификация уже очищенной кенниталы по первой цифре и шаблону robot-кодов.

- 0-3: person; 4-7: company (день +40);
- 8-9: временные «kerfiskennitala», формально person;
- robot: 010130 + один из 14 зарезервированных номеров + 9.

Функции ожидают уже очищенное значение и ничего не проверяют сами.

Примеры (doctest):
>>> subject_type("0101902079"), subject_type("5503050030")
('person', 'company')
>>> is_temporary("8012345678"), is_person("8012345678")
(True, True)
>>> is_robot("0101302129")
True
"""
from __future__ import annotations

import re
from typing import Literal

SubjectType = Literal["person", "company"]
SUBJECT_TYPES: tuple[str, ...] = ("person", "company")

ROBOT_KT_NUMS: frozenset[int] = frozenset(
    (212, 220, 239, 247, 255, 263, 271, 298, 301, 336, 433, 492, 506, 778)
)
ROBOT_KT_RE = re.compile(
    r"^010130(?:" + "|".join(str(n) for n in sorted(ROBOT_KT_NUMS)) + r")9"
)


def is_person(kt: str) -> bool:
    return kt[:1] in ("0", "1", "2", "3", "8", "9")


def is_company(kt: str) -> bool:
    return kt[:1] in ("4", "5", "6", "7")


def is_temporary(kt: str) -> bool:
    return kt[:1] in ("8", "9")


def subject_type(kt: str) -> SubjectType:
    return "company" if is_company(kt) else "person"


def is_robot(kt: str) -> bool:
    """Один из известных тестовых («robot») кодов."""
    return bool(ROBOT_KT_RE.match(kt))


def robot_kennitala(num: int) -> str:
    if num not in ROBOT_KT_NUMS:
        raise ValueError(f"unknown robot number: {num}")
    return f"010130{num}9"

"""Поиск кенниталы в свободном тексте.

Кандидат: 6 цифр, необязательный разделитель (пробел/дефис/en-dash), 4 цифры,
не примыкающие к другим цифрам. Валидность считается с настройками по умолчанию.

Примеры (doctest):
>>> spans = list(iter_kennitala_spans("Kt. 010190-2079, sími 5551234."))
>>> len(spans), spans[0].digits, spans[0].formatted, spans[0].is_valid
(1, '0101902079', '010190-2079', True)
"""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, Iterator, List

from kennitala.classify import subject_type
from kennitala.parse import Options, parse_kennitala
from kennitala.util.clean import format_kennitala

KT_RE = re.compile(r"(?<![0-9])([0-9]{6})\s?[-–]?\s?([0-9]{4})(?![0-9])")


@dataclass(frozen=True)
class KennitalaSpan:
    start: int
    end: int
    raw: str
    digits: str
    formatted: str
    type: str
    is_valid: bool
    temporary: bool

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def iter_kennitala_spans(text: str, opts: Options | None = None) -> Iterator[KennitalaSpan]:
    """Итератор по всем похожим на кенниталу вхождениям в тексте."""
    for m in KT_RE.finditer(text):
        digits = m.group(1) + m.group(2)
        parsed = parse_kennitala(digits, opts)
        yield KennitalaSpan(
            start=m.start(),
            end=m.end(),
            raw=m.group(0),
            digits=digits,
            formatted=format_kennitala(digits),
            type=parsed.type if parsed else subject_type(digits),
            is_valid=parsed is not None,
            temporary=bool(parsed and parsed.temporary),
        )


def detect_file(path: str, encoding: str = "utf-8", opts: Options | None = None) -> List[KennitalaSpan]:
    with open(path, "r", encoding=encoding, errors="ignore") as f:
        txt = f.read()
    return list(iter_kennitala_spans(txt, opts))

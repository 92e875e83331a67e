from __future__ import annotations
"""
Пакетная проверка: список значений (JSON или CSV) -> документ-отчёт по схеме report.schema.json.

Поддерживаемые входы:
- JSON: ["0101902079", ...], [{"value": "..."}, ...] или {"items": [...]};
- CSV: ;-разделитель, колонка value (иначе берётся первая колонка).

Каждый элемент отчёта: input, valid, reason, value, type, robot, temporary, formatted, birth_date.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from jsonschema import validate as js_validate

from kennitala.parse import Options, check_kennitala

log = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schemas" / "report.schema.json"


def _read_schema() -> Dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def _value_of(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("value") or "")
    if item is None:
        return ""
    return str(item)


def _load_values_from_json(p: Path) -> List[str]:
    data = json.loads(p.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "items" in data:
        data = data["items"]
    if isinstance(data, list):
        return [_value_of(it) for it in data]
    raise ValueError("Unsupported JSON structure")


def _load_values_from_csv(p: Path) -> List[str]:
    out: List[str] = []
    with p.open("r", encoding="utf-8", newline="") as f:
        rows = (row for row in csv.reader(f, delimiter=";") if row)
        header = next(rows, None)
        if header is None:
            return out
        if "value" in header:
            col = header.index("value")
        else:
            # без заголовка: первая непустая строка — уже данные
            col = 0
            out.append(header[0])
        for row in rows:
            out.append(row[col] if col < len(row) else "")
    return out


def _report_item(value: str, opts: Options) -> Dict[str, Any]:
    res, reason = check_kennitala(value, opts)
    if res is None:
        return {
            "input": value,
            "valid": False,
            "reason": reason,
            "value": None,
            "type": None,
            "robot": False,
            "temporary": False,
            "formatted": None,
            "birth_date": None,
        }
    bday = res.birth_date
    return {
        "input": value,
        "valid": True,
        "reason": None,
        "value": res.value,
        "type": res.type,
        "robot": res.robot,
        "temporary": bool(res.temporary),
        "formatted": res.formatted,
        "birth_date": bday.isoformat() if bday else None,
    }


def build_report_document(values: Iterable[str], opts: Options | None = None) -> Dict[str, Any]:
    """Проверить каждое значение и собрать документ-отчёт (валидируется по схеме)."""
    opts = opts or Options()
    items = [_report_item(v, opts) for v in values]
    valid = sum(1 for it in items if it["valid"])
    doc = {
        "version": "1",
        "counts": {"total": len(items), "valid": valid, "invalid": len(items) - valid},
        "items": items,
    }
    js_validate(instance=doc, schema=_read_schema())
    log.info("checked %d values: %d valid, %d invalid", len(items), valid, len(items) - valid)
    return doc


def validate_file(
    input_path: str | Path,
    out_path: str | Path,
    opts: Options | None = None,
) -> Path:
    """
    Загрузить значения из JSON или CSV, проверить и сохранить отчёт.
    Возвращает путь к out_path.
    """
    in_p = Path(input_path)
    if not in_p.exists():
        raise FileNotFoundError(in_p)
    if in_p.suffix.lower() == ".csv":
        values = _load_values_from_csv(in_p)
    else:
        values = _load_values_from_json(in_p)

    doc = build_report_document(values, opts)
    out_p = Path(out_path)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    out_p.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
    return out_p

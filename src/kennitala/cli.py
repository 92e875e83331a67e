from __future__ import annotations
import json
import random
from datetime import datetime
from pathlib import Path
import typer

from kennitala.detect import detect_file
from kennitala.generate import GenerateOptions, generate_kennitala
from kennitala.parse import Options, parse_kennitala
from kennitala.util.clean import format_kennitala
from kennitala.util.dates import get_birth_date
from kennitala.validate import validate_file

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _options(clean: str, type_: str | None, reject_temporary: bool, robot: bool, strict_date: bool) -> Options:
    try:
        return Options(clean=clean, type=type_, reject_temporary=reject_temporary,
                       robot=robot, strict_date=strict_date)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command("parse")
def cmd_parse(
    value: str = typer.Argument(...),
    clean: str = typer.Option("careful", "--clean", help="none | careful | aggressive"),
    type_: str | None = typer.Option(None, "--type", help="person | company"),
    reject_temporary: bool = typer.Option(False, "--reject-temporary"),
    robot: bool = typer.Option(False, "--robot", help="Принимать тестовые (robot) коды"),
    strict_date: bool = typer.Option(False, "--strict-date"),
):
    """Разобрать значение и напечатать JSON. Код выхода 1, если кеннитала невалидна."""
    res = parse_kennitala(value, _options(clean, type_, reject_temporary, robot, strict_date))
    if res is None:
        typer.echo("null")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(res.to_dict(), ensure_ascii=False))


@app.command("format")
def cmd_format(
    value: str = typer.Argument(...),
    sep: str = typer.Option("-", "--sep"),
):
    typer.echo(format_kennitala(value, sep))


@app.command("birthdate")
def cmd_birthdate(value: str = typer.Argument(...)):
    """Дата рождения/основания (без проверки КС)."""
    bday = get_birth_date(value)
    if bday is None:
        typer.echo("null")
        raise typer.Exit(code=1)
    typer.echo(bday.isoformat())


@app.command("generate")
def cmd_generate(
    type_: str | None = typer.Option(None, "--type", help="person | company"),
    temporary: bool = typer.Option(False, "--temporary"),
    robot: bool = typer.Option(False, "--robot"),
    birth_date: str | None = typer.Option(None, "--birth-date", help="YYYY-MM-DD"),
    count: int = typer.Option(1, "--count", "-n", min=1),
    seed: int | None = typer.Option(None, "--seed"),
):
    """Сгенерировать технически валидные кенниталы."""
    bday = None
    if birth_date:
        try:
            bday = datetime.strptime(birth_date, "%Y-%m-%d").date()
        except ValueError:
            raise typer.BadParameter(f"expected YYYY-MM-DD, got {birth_date!r}")
    try:
        opts = GenerateOptions(type=type_, temporary=temporary, robot=robot, birth_date=bday)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    rng = random.Random(seed)
    for _ in range(count):
        typer.echo(generate_kennitala(opts, rng))


@app.command("validate")
def cmd_validate(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    out: Path = typer.Option(Path("report.json"), "--out", "-o"),
    clean: str = typer.Option("careful", "--clean"),
    type_: str | None = typer.Option(None, "--type"),
    reject_temporary: bool = typer.Option(False, "--reject-temporary"),
    robot: bool = typer.Option(False, "--robot"),
    strict_date: bool = typer.Option(False, "--strict-date"),
):
    """Проверить список значений (JSON или CSV) и сохранить отчёт."""
    res = validate_file(input_path, out, _options(clean, type_, reject_temporary, robot, strict_date))
    typer.echo(f"report: {res}")


@app.command("scan")
def cmd_scan(
    input_path: Path = typer.Argument(..., exists=True, readable=True),
    out: Path = typer.Option(Path("spans.json"), "--out", "-o"),
    encoding: str = typer.Option("utf-8", "--encoding"),
):
    """Найти кенниталы в тексте и сохранить спаны (JSON)."""
    spans = detect_file(str(input_path), encoding=encoding)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps([s.to_dict() for s in spans], ensure_ascii=False, indent=2), encoding="utf-8")
    typer.echo(f"found: {len(spans)}")
    typer.echo(f"written: {out}")


if __name__ == "__main__":
    app()

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from . import __version__
from .config import load_settings
from .core.errors import NumeralError
from .core.facade import format as format_value
from .core.facade import parse as parse_text
from .core.formatter import FormatStyle
from .utils.text import normalize_numerals

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """
    Japanese numeral text processing (漢数字の解析と生成).
    """
    settings = load_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _resolve_style(style: Optional[str]) -> FormatStyle:
    name = style or load_settings().default_style
    try:
        return FormatStyle(name)
    except ValueError:
        choices = ", ".join(s.value for s in FormatStyle)
        raise typer.BadParameter(f"Invalid style: {name}. Must be one of: {choices}.")


@app.command("parse")
def parse_command(
    texts: List[str] = typer.Argument(..., help="Numeral text, e.g. 二百三十四")
):
    """
    Convert Japanese numeral text to integers.
    """
    failed = False
    for text in texts:
        try:
            typer.echo(parse_text(text))
        except NumeralError as e:
            typer.echo(f"Error [{e.kind.value}] {e}", err=True)
            failed = True
    if failed:
        raise typer.Exit(code=1)


@app.command("format")
def format_command(
    values: List[int] = typer.Argument(..., help="Integers to render"),
    style: Optional[str] = typer.Option(None, help="kanji | daiji | mixed | positional"),
):
    """
    Render integers as Japanese numeral text.
    """
    fmt = _resolve_style(style)
    minus_sign = load_settings().minus_sign
    failed = False
    for value in values:
        try:
            typer.echo(format_value(value, fmt, minus_sign))
        except NumeralError as e:
            typer.echo(f"Error [{e.kind.value}] {e}", err=True)
            failed = True
    if failed:
        raise typer.Exit(code=1)


@app.command()
def normalize(
    text: str = typer.Argument(..., help="Free text containing kanji numerals")
):
    """
    Replace numerals inside text with Arabic digits (第百九十九条 → 第199条).
    """
    typer.echo(normalize_numerals(text))


@app.command()
def batch(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="One entry per line"),
    output: Optional[Path] = typer.Option(None, help="Write YAML results here instead of stdout"),
    direction: str = typer.Option("parse", help="parse | format"),
    style: Optional[str] = typer.Option(None, help="Style used when direction is format"),
):
    """
    Convert every line of a file and report the results as YAML.
    """
    if direction not in ("parse", "format"):
        raise typer.BadParameter(f"Invalid direction: {direction}. Must be 'parse' or 'format'.")
    fmt = _resolve_style(style)
    minus_sign = load_settings().minus_sign

    lines = [line.strip() for line in input_path.read_text(encoding="utf-8").splitlines()]
    entries = [line for line in lines if line]

    results: List[Dict[str, Any]] = []
    errors = 0
    from tqdm import tqdm
    for entry in tqdm(entries, desc="Converting", disable=output is None):
        record: Dict[str, Any] = {"input": entry}
        try:
            if direction == "parse":
                record["value"] = parse_text(entry)
            else:
                record["value"] = format_value(int(entry), fmt, minus_sign)
        except NumeralError as e:
            record["error"] = {"kind": e.kind.value, "message": str(e), "position": e.position}
            errors += 1
        except ValueError:
            record["error"] = {"kind": "InvalidInteger", "message": f"Not an integer: {entry!r}", "position": None}
            errors += 1
        results.append(record)

    logger.info(f"Converted {len(results) - errors}/{len(results)} entries ({errors} errors)")
    dumped = yaml.dump(results, allow_unicode=True, sort_keys=False, default_flow_style=False)

    if output is None:
        typer.echo(dumped, nl=False)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            f.write(dumped)
        typer.echo(f"Wrote {len(results)} entries to {output} ({errors} errors)")


@app.command()
def version():
    """
    Report that the module is loaded and working.
    """
    typer.echo(f"japan_number {__version__} is working")


if __name__ == "__main__":
    app()

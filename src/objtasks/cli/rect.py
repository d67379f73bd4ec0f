"""CLI commands: objtasks area / to-json / from-json -- rectangle helpers."""

from __future__ import annotations

import sys

import click

from objtasks.codec import from_json, to_json
from objtasks.config import ObjtasksConfig
from objtasks.errors import ParseError
from objtasks.model import Rectangle


def _number(value: float) -> int | float:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(_number(width), _number(height))
    click.echo(rect.area())


@click.command("to-json")
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
@click.option("--indent", type=int, default=None, help="Pretty-print with this indent")
@click.pass_obj
def to_json_cmd(
    config: ObjtasksConfig,
    width: float,
    height: float,
    sort_keys: bool,
    indent: int | None,
) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    rect = Rectangle(_number(width), _number(height))
    click.echo(
        to_json(
            rect,
            sort_keys=sort_keys or config.sort_keys,
            indent=config.indent if indent is None else indent,
        )
    )


@click.command("from-json")
@click.argument("text")
def from_json_cmd(text: str) -> None:
    """Decode a rectangle from JSON TEXT and print its fields and area."""
    try:
        rect = from_json(Rectangle, text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    missing = [name for name in ("width", "height") if not hasattr(rect, name)]
    if missing:
        click.echo(f"Missing field(s): {', '.join(missing)}", err=True)
        sys.exit(1)

    click.echo(f"width={rect.width} height={rect.height} area={rect.area()}")

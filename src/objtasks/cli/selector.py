"""CLI commands: objtasks build / check -- assemble and validate selectors."""

from __future__ import annotations

import sys

import click

from objtasks.errors import ParseError
from objtasks.selector import FragmentKind, Selector, SelectorError, parse_selector

_KIND_ALIASES = {"attr": FragmentKind.ATTRIBUTE}


def _parse_fragment(raw: str) -> tuple[FragmentKind, str]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}")
    name = name.strip().lower().replace("_", "-")
    if name in _KIND_ALIASES:
        return _KIND_ALIASES[name], value
    try:
        return FragmentKind(name), value
    except ValueError:
        choices = ", ".join(k.value for k in FragmentKind)
        raise click.BadParameter(f"unknown kind {name!r} (choose from {choices})") from None


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def build(fragments: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments, in order.

    Example: objtasks build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    parsed = [_parse_fragment(raw) for raw in fragments]
    selector = Selector()
    try:
        for kind, value in parsed:
            selector.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse selector text and print its canonical rendering.

    Exits with code 1 if the text is malformed or its parts are out of order.
    """
    try:
        result = parse_selector(selector)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())

"""CLI entry point for arrowchart."""

import json
import logging
import sys

import click

from arrowchart.ir.model import ParseResult
from arrowchart.parsers import parse


def _summary(result: ParseResult) -> str:
    lines: list[str] = []
    for node in result.nodes:
        targets = ", ".join(node.outgoing) or "-"
        lines.append(f"{node.id} {node.shape.value} ({node.x}, {node.y}) -> {targets}")
    if result.error_message:
        lines.append(f"error: {result.error_message}")
    return "\n".join(lines) + "\n" if lines else ""


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--indent", "-i", "indent", type=int, default=2, help="JSON indentation (0 for compact)")
@click.option("--summary", "-s", "summary", is_flag=True, help="Print a text summary instead of JSON")
@click.option("--strict", "strict", is_flag=True, help="Exit with status 1 if any line failed to parse")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log parser diagnostics to stderr")
def main(input: str | None, output: str | None, indent: int, summary: bool, strict: bool, verbose: bool) -> None:
    """Arrow shorthand flowchart to positioned graph JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    result = parse(text)

    if summary:
        rendered = _summary(result)
    else:
        rendered = json.dumps(result.to_dict(), indent=indent or None) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)

    if strict and result.error_message:
        click.echo(f"parse error: {result.error_message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

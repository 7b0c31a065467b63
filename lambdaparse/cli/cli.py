import logging
import sys

import click
from click import File

from lambdaparse.lib.grammar import ParseError, parse_expression

# pylint: disable=redefined-builtin
from lambdaparse.lib.lexpr import format

logger = logging.getLogger(__name__)


def show(source: str) -> None:
    try:
        expr = parse_expression(source)
    except ParseError as e:
        click.echo(f"Parse error: {e}", err=True)
        sys.exit(1)
    logger.debug("AST: %s", expr)
    click.echo(format(expr))


@click.group()
def main() -> None:
    """Parse lambda calculus expressions and print their structure."""


@main.command(name="parse")
@click.argument("expression", type=str, required=True)
@click.option("--debug", is_flag=True)
def parse_command(expression: str, debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    show(expression)


@main.command(name="parse-file")
@click.argument("program-file", type=File(encoding="utf-8"), default="-")
@click.option("--debug", is_flag=True)
def parse_file_command(program_file: File, debug: bool) -> None:
    """Parse one expression per line; lines starting with -- are comments."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    for line in program_file:  # type: ignore [attr-defined]
        line = line.strip()
        if not line or line.startswith("--"):
            continue
        show(line)


if __name__ == "__main__":
    main()

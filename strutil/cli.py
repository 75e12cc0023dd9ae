import random

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from strutil.config import load_settings
from strutil.ellipsis import ellipt_left, ellipt_right
from strutil.errors import SizeParseError
from strutil.logging import setup_logging
from strutil.randutil import make_random_string
from strutil.size import format_size, parse_size

app = typer.Typer(no_args_is_help=True)
console = Console()


@app.callback()
def main(ctx: typer.Context) -> None:
    """
    Text and byte utilities: sizes, output truncation, ellipsis.
    """
    try:
        settings = load_settings()
    except ValidationError as e:
        console.print(f"[red]Error: invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from None

    setup_logging(settings.log_level)
    ctx.obj = settings


@app.command("format-size")
def format_size_cmd(
    size: int = typer.Argument(..., min=0, help="Number of bytes"),
):
    """
    Print a byte count as a compact decimal size, e.g. 20000000 -> 20MB.
    """
    typer.echo(format_size(size))


@app.command("parse-size")
def parse_size_cmd(
    text: str = typer.Argument(..., help="Size string such as 400B or 20MB"),
):
    """
    Print the exact number of bytes a size string stands for.
    """
    try:
        typer.echo(parse_size(text))
    except SizeParseError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from None


@app.command("truncate")
def truncate_cmd(
    ctx: typer.Context,
    lines: int | None = typer.Option(
        None,
        "--lines",
        "-n",
        min=0,
        help="Maximum number of trailing lines to keep",
    ),
    max_bytes: int | None = typer.Option(
        None,
        "--bytes",
        "-c",
        min=0,
        help="Maximum number of trailing bytes to keep",
    ),
):
    """
    Read output from stdin and write back only its tail.

    Budgets that are not given come from STRUTIL_MAX_OUTPUT_LINES and
    STRUTIL_MAX_OUTPUT_BYTES.
    """
    budget = ctx.obj.truncation_budget(lines, max_bytes)
    data = typer.get_binary_stream("stdin").read()
    typer.echo(budget.apply(data), nl=False)


@app.command("ellipt")
def ellipt_cmd(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to shorten"),
    width: int | None = typer.Option(
        None,
        "--width",
        "-w",
        help="Maximum number of characters, ellipsis included",
    ),
    left: bool = typer.Option(
        False,
        "--left",
        "-l",
        help="Cut the start of the text instead of the end",
    ),
):
    """
    Shorten text with a single ellipsis.
    """
    if width is None:
        width = ctx.obj.ellipsis_width
    ellipt = ellipt_left if left else ellipt_right
    typer.echo(ellipt(text, width))


@app.command("random-string")
def random_string_cmd(
    length: int = typer.Argument(..., min=0, help="Number of characters"),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for a reproducible string",
    ),
):
    """
    Print a random alphanumeric string.
    """
    rng = random.Random(seed) if seed is not None else None
    typer.echo(make_random_string(length, rng))


if __name__ == "__main__":
    app()

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console

from calcdemo import PROG_NAME, __version__
from calcdemo.arith import ADD, OPERATIONS, SUB, WidthOverflowError, format_result

app = typer.Typer(
    subcommand_metavar="{add,sub} ...",
    add_completion=False,
)
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _single_value(param: typer.CallbackParam, value: List[int]) -> List[int]:
    # options are multiple, so a repeated flag arrives as more than one value
    if len(value) > 1:
        raise typer.BadParameter("duplicate values provided", param=param)
    return value


@app.callback()
def cli(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace the parsed operation on stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
):
    """A simple calculation tool"""
    ctx.obj = {"verbose": verbose}


def _run(ctx: typer.Context, num1: List[int], num2: List[int]) -> None:
    op = OPERATIONS[ctx.info_name]
    a, b = num1[0], num2[0]
    if (ctx.obj or {}).get("verbose"):
        err_console.print(f"[dim]{op.name}: {op.width} {a} {b}[/dim]")
    try:
        result = op.apply(a, b)
    except WidthOverflowError as e:
        err_console.print(f"[red]error:[/] {e}", highlight=False)
        raise typer.Exit(code=1)
    typer.echo(format_result(op, a, b, result))


@app.command("add")
def add(
    ctx: typer.Context,
    num1: List[int] = typer.Option(
        ..., min=ADD.width.min, max=ADD.width.max, callback=_single_value, help="the first number."
    ),
    num2: List[int] = typer.Option(
        ..., min=ADD.width.min, max=ADD.width.max, callback=_single_value, help="the second number"
    ),
):
    """Add two numbers"""
    _run(ctx, num1, num2)


@app.command("sub")
def sub(
    ctx: typer.Context,
    num1: List[int] = typer.Option(
        ..., min=SUB.width.min, max=SUB.width.max, callback=_single_value, help="the first number."
    ),
    num2: List[int] = typer.Option(
        ..., min=SUB.width.min, max=SUB.width.max, callback=_single_value, help="the second number"
    ),
):
    """Sub two numbers"""
    _run(ctx, num1, num2)


def main():
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()

# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import click

from .core import arithmetic

from . import cli


DEFAULT_INPUT = "11"


@click.group(invoke_without_command=True)
@click.option(
    "--width",
    type=click.Choice(arithmetic.NAMES),
    default=arithmetic.INT32.name,
    show_default=True,
    envvar="FIBRESOLVE_WIDTH",
    help="Bit width of the arithmetic or 'unbounded'.",
)
@click.pass_context
def main(ctx: click.Context, width: str) -> None:
    """
    Computes Fibonacci numbers for integers and numeric strings.

    Without a command the Fibonacci number for 11 is printed.
    """
    ctx.obj = arithmetic.by_name(width)
    if ctx.invoked_subcommand is None:
        cli.echo_resolution(ctx, DEFAULT_INPUT, ctx.obj, strict=False)


cli.add_resolution_commands(main)


if __name__ == "__main__":
    main()

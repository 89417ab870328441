# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import warnings

import click

from .core import arithmetic, fibonacci
from .pretty import console

from . import resolver


class WraparoundWarning(RuntimeWarning):
    pass


def echo_resolution(
    ctx: click.Context, obj: object, arith: arithmetic.Arithmetic, strict: bool
) -> None:
    resolution = resolver.try_resolve(obj, arith=arith)
    if resolution.failure is not None:
        if strict:
            click.echo(console.format_failure(resolution.failure, obj), err=True)
            ctx.exit(1)
        return
    if resolution.wrapped:
        warnings.warn(
            f"Fibonacci number for {obj!r} wrapped around at width {arith.name}",
            WraparoundWarning,
        )
    click.echo(str(resolution.result))


def add_resolution_commands(group: click.Group) -> None:
    @group.command("resolve")
    @click.argument("value")
    @click.option(
        "--strict",
        default=False,
        is_flag=True,
        help="Report failures on stderr and exit with status 1.",
    )
    @click.pass_context
    def _resolve(ctx: click.Context, value: str, strict: bool = False) -> None:
        """
        Print the Fibonacci number for VALUE.
        """
        echo_resolution(ctx, value, ctx.obj, strict)

    @group.command("trace")
    @click.argument("value")
    @click.pass_context
    def _trace(ctx: click.Context, value: str) -> None:
        """
        Print every Fibonacci pair up to VALUE.
        """
        arith: arithmetic.Arithmetic = ctx.obj
        try:
            index = resolver.resolve_index(value, arith)
        except resolver.ResolutionError as error:
            click.echo(console.format_failure(error.failure, value), err=True)
            ctx.exit(1)
        click.echo(console.format_trace(fibonacci.iter_pairs(index, arith)))

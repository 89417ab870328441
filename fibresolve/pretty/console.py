# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Module for pretty printing Fibonacci traces and failures on the console.
"""

from __future__ import annotations

import typing as t

import enum

import colorama

from ..core import fibonacci

from .. import resolver


colorama.just_fix_windows_console()


class Color(enum.Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    RESET = "reset"


_COLOR_MAP = {
    Color.BLACK: colorama.Fore.BLACK,
    Color.RED: colorama.Fore.RED,
    Color.GREEN: colorama.Fore.GREEN,
    Color.YELLOW: colorama.Fore.YELLOW,
    Color.BLUE: colorama.Fore.BLUE,
    Color.CYAN: colorama.Fore.CYAN,
    Color.MAGENTA: colorama.Fore.MAGENTA,
    Color.WHITE: colorama.Fore.WHITE,
    Color.RESET: colorama.Fore.RESET,
}


_INDEX_COLUMNS = 6
_VALUE_COLUMNS = 22

WRAPPED_MARKER = "(wrapped)"


def paint(text: str, color: t.Optional[Color], *, enabled: bool = True) -> str:
    if color is None or not enabled:
        return text
    return _COLOR_MAP[color] + text + _COLOR_MAP[Color.RESET]


def format_header(*, colorize: bool = True) -> str:
    return paint(
        "index".rjust(_INDEX_COLUMNS)
        + "current".rjust(_VALUE_COLUMNS)
        + "previous".rjust(_VALUE_COLUMNS),
        Color.CYAN,
        enabled=colorize,
    )


def format_pair(pair: fibonacci.Pair, *, colorize: bool = True) -> str:
    value_color = Color.YELLOW if pair.wrapped else Color.GREEN
    row = (
        paint(str(pair.index).rjust(_INDEX_COLUMNS), Color.BLUE, enabled=colorize)
        + paint(
            str(pair.current).rjust(_VALUE_COLUMNS), value_color, enabled=colorize
        )
        + str(pair.previous).rjust(_VALUE_COLUMNS)
    )
    if pair.wrapped:
        row += " " + paint(WRAPPED_MARKER, Color.YELLOW, enabled=colorize)
    return row


def format_trace(
    pairs: t.Iterable[fibonacci.Pair], *, colorize: bool = True
) -> str:
    lines = [format_header(colorize=colorize)]
    lines.extend(format_pair(pair, colorize=colorize) for pair in pairs)
    return "\n".join(lines)


def format_failure(
    failure: resolver.Failure, obj: object, *, colorize: bool = True
) -> str:
    return paint("Error:", Color.RED, enabled=colorize) + (
        f" unable to resolve {obj!r}: {failure.value}"
    )

# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Resolution of integer-like inputs to Fibonacci numbers.

The resolver accepts integers and strings encoding base-10 integers and
computes the `current` component of the corresponding Fibonacci pair. Failing
inputs are reported through :class:`Resolution` and never raise.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import enum

from .core import arithmetic, fibonacci, values
from .utils import parser


class Failure(enum.Enum):
    UNSUPPORTED_TYPE = "unsupported input type"
    MALFORMED_INTEGER = "not a base-10 integer"
    OUT_OF_RANGE = "integer does not fit the arithmetic width"
    NEGATIVE_INDEX = "index must not be negative"


class ResolutionError(Exception):
    failure: Failure

    def __init__(self, failure: Failure, obj: object) -> None:
        super().__init__(f"unable to resolve {obj!r}: {failure.value}")
        self.failure = failure


@d.dataclass(frozen=True)
class Resolution:
    result: int = 0
    failure: t.Optional[Failure] = None
    wrapped: bool = False

    @property
    def success(self) -> bool:
        return self.failure is None

    def __iter__(self) -> t.Iterator[t.Union[bool, int]]:
        yield self.success
        yield self.result


def resolve_index(
    obj: object, arith: arithmetic.Arithmetic = arithmetic.INT32
) -> int:
    value = values.create(obj)
    if isinstance(value, values.IntegerValue):
        index = value.value
    elif isinstance(value, values.StringValue):
        try:
            index = parser.parse_integer(value.value)
        except parser.MalformedIntegerError as error:
            raise ResolutionError(Failure.MALFORMED_INTEGER, obj) from error
        except parser.IntegerTooLongError as error:
            raise ResolutionError(Failure.OUT_OF_RANGE, obj) from error
    else:
        raise ResolutionError(Failure.UNSUPPORTED_TYPE, obj)
    if not arith.contains(index):
        raise ResolutionError(Failure.OUT_OF_RANGE, obj)
    if index < 0:
        raise ResolutionError(Failure.NEGATIVE_INDEX, obj)
    return index


def try_resolve(
    obj: object, *, arith: arithmetic.Arithmetic = arithmetic.INT32
) -> Resolution:
    try:
        index = resolve_index(obj, arith)
    except ResolutionError as error:
        return Resolution(failure=error.failure)
    pair = fibonacci.fib_pair(index, arith)
    return Resolution(result=pair.current, wrapped=pair.wrapped)

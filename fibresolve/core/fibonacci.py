# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
The pair-wise Fibonacci recurrence.

For every index `i` the pair `Fib(i)` consists of `F(i + 1)` and `F(i)`. The
recurrence starts at `Fib(0) = (1, 0)` and every step computes

    current_i  = current_{i-1} + previous_{i-1}
    previous_i = current_{i-1}

where the addition is carried out in the given arithmetic.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

from . import arithmetic


class NegativeIndexError(ValueError):
    pass


@d.dataclass(frozen=True)
class Pair:
    index: int
    current: int
    previous: int
    # true once any step up to this pair did overflow
    wrapped: bool = False


SEED = Pair(index=0, current=1, previous=0)


def step(pair: Pair, arith: arithmetic.Arithmetic) -> Pair:
    exact = pair.current + pair.previous
    current = arith.wrap(exact)
    return Pair(
        index=pair.index + 1,
        current=current,
        previous=pair.current,
        wrapped=pair.wrapped or current != exact,
    )


def iter_pairs(
    index: int, arith: arithmetic.Arithmetic = arithmetic.INT32
) -> t.Iterator[Pair]:
    if index < 0:
        raise NegativeIndexError(f"index must not be negative but is {index}")
    pair = SEED
    yield pair
    while pair.index < index:
        pair = step(pair, arith)
        yield pair


def fib_pair(index: int, arith: arithmetic.Arithmetic = arithmetic.INT32) -> Pair:
    pair = SEED
    for pair in iter_pairs(index, arith):
        pass
    return pair


def fibonacci(index: int, arith: arithmetic.Arithmetic = arithmetic.INT32) -> int:
    return fib_pair(index, arith).current

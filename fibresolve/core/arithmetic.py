# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Signed integer arithmetic of a fixed or unbounded width.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import abc


class Arithmetic(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError()

    @abc.abstractmethod
    def contains(self, value: int) -> bool:
        raise NotImplementedError()

    @abc.abstractmethod
    def wrap(self, value: int) -> int:
        raise NotImplementedError()

    def add(self, left: int, right: int) -> int:
        return self.wrap(left + right)


@d.dataclass(frozen=True)
class FixedWidth(Arithmetic):
    """
    Two's complement integers with the given number of bits.

    Results outside of the representable range wrap around modulo `2**bits`.
    """

    bits: int

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"width must be positive but is {self.bits}")

    @property
    def name(self) -> str:
        return str(self.bits)

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def wrap(self, value: int) -> int:
        return (value - self.minimum) % (1 << self.bits) + self.minimum


@d.dataclass(frozen=True)
class Unbounded(Arithmetic):
    @property
    def name(self) -> str:
        return "unbounded"

    def contains(self, value: int) -> bool:
        return True

    def wrap(self, value: int) -> int:
        return value


INT8 = FixedWidth(8)
INT16 = FixedWidth(16)
INT32 = FixedWidth(32)
INT64 = FixedWidth(64)

UNBOUNDED = Unbounded()


_BY_NAME: t.Dict[str, Arithmetic] = {
    arithmetic.name: arithmetic
    for arithmetic in (INT8, INT16, INT32, INT64, UNBOUNDED)
}

NAMES: t.Tuple[str, ...] = tuple(_BY_NAME)


def by_name(name: str) -> Arithmetic:
    return _BY_NAME[name]

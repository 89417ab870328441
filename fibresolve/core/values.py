# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Inputs accepted by the resolver.

A value is either an integer or a string which is supposed to encode one. Any
other object is turned away at the boundary in :func:`create`.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import abc


class Value(abc.ABC):
    value: t.Union[int, str]


@d.dataclass(frozen=True)
class IntegerValue(Value):
    value: int


@d.dataclass(frozen=True)
class StringValue(Value):
    value: str


def create(obj: object) -> t.Optional[Value]:
    if isinstance(obj, Value):
        return obj
    elif isinstance(obj, str):
        return StringValue(obj)
    # `bool` is a subclass of `int` but not an index.
    elif isinstance(obj, int) and not isinstance(obj, bool):
        return IntegerValue(obj)
    return None

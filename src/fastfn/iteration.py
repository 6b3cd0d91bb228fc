"""Sequence iteration with arity-specialized callback invocation.

Callbacks receive ``(item, index, sequence)`` (``reduce`` prepends the
accumulator), trimmed to the number of positional parameters they
declare. A supplied ``context`` is passed ahead of everything else, unless
the callback takes no positional parameters.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

from .dispatch import NO_RECEIVER, fit_callback, select_invoker
from .errors import EmptyReductionError
from .values import ShapeKind, kind_of, scalar_value

_MISSING = object()
_SCALAR_TYPES = (numbers.Number, str, bytes)


def _prepare(fn: Callable[..., Any], available: int, context: object):
    width, has_receiver = fit_callback(fn, available, receiver=context is not NO_RECEIVER)
    return select_invoker(width, receiver=has_receiver)


def map(sequence, fn: Callable[..., Any], context: object = NO_RECEIVER) -> list:
    call = _prepare(fn, 3, context)
    length = len(sequence)
    result = [None] * length
    for index in range(length):
        result[index] = call(fn, context, (sequence[index], index, sequence))
    return result


def reduce(sequence, fn: Callable[..., Any], initial: object = _MISSING, context: object = NO_RECEIVER):
    length = len(sequence)
    if initial is _MISSING:
        if length == 0:
            raise EmptyReductionError()
        accumulator = sequence[0]
        start = 1
    else:
        accumulator = initial
        start = 0
    call = _prepare(fn, 4, context)
    for index in range(start, length):
        accumulator = call(fn, context, (accumulator, sequence[index], index, sequence))
    return accumulator


def for_each(sequence, fn: Callable[..., Any], context: object = NO_RECEIVER) -> None:
    call = _prepare(fn, 3, context)
    for index in range(len(sequence)):
        call(fn, context, (sequence[index], index, sequence))


def _strict_equal(left: object, right: object) -> bool:
    if left is right:
        return True
    # Rank-0 dense elements compare by their Python scalar.
    left = scalar_value(left)
    right = scalar_value(right)
    if type(left) is not type(right) or not isinstance(left, _SCALAR_TYPES):
        return False
    return bool(left == right)


def index_of(sequence, value: object, from_index: int = 0) -> int:
    length = len(sequence)
    start = from_index if from_index >= 0 else max(0, length + from_index)
    for index in range(start, length):
        if _strict_equal(sequence[index], value):
            return index
    return -1


def last_index_of(sequence, value: object, from_index: int | None = None) -> int:
    length = len(sequence)
    if from_index is None:
        start = length - 1
    elif from_index >= 0:
        start = min(from_index, length - 1)
    else:
        start = length + from_index
    for index in range(start, -1, -1):
        if _strict_equal(sequence[index], value):
            return index
    return -1


def concat(sequence, *items) -> list:
    result = [sequence[index] for index in range(len(sequence))]
    for item in items:
        if kind_of(item) in (ShapeKind.SEQUENCE, ShapeKind.ARRAY):
            result.extend(item[index] for index in range(len(item)))
        else:
            result.append(item)
    return result

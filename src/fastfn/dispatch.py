"""Arity-specialized invocation.

Calls with up to ``SPECIALIZATION_BOUND`` arguments go through one of a
fixed set of invokers that spell the call out positionally. Anything
wider goes through a generic invoker that materializes the argument
slice and spreads it. Both produce the same result; only the amount of
per-call work differs.
"""

from __future__ import annotations

from enum import IntEnum
import inspect
import logging
import os
from types import CodeType, FunctionType, MethodType
from typing import Any, Callable, Final

logger = logging.getLogger(__name__)

Invoker = Callable[[Callable[..., Any], object, tuple], Any]

SPECIALIZATION_BOUND: Final[int] = 3

_USE_SPECIALIZED_PATHS: Final[bool] = os.environ.get("FASTFN_DISABLE_SPECIALIZED_PATHS", "0") != "1"


class _NoReceiver:
    _instance: "_NoReceiver | None" = None

    def __new__(cls) -> "_NoReceiver":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_RECEIVER"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_NoReceiver, ())


NO_RECEIVER: Final = _NoReceiver()


class ArityClass(IntEnum):
    NULLARY = 0
    UNARY = 1
    BINARY = 2
    TERNARY = 3
    OVERFLOW = 4

    @classmethod
    def of(cls, count: int) -> "ArityClass":
        if count < 0:
            raise ValueError(f"argument count must be non-negative, got {count}")
        if _USE_SPECIALIZED_PATHS and count <= SPECIALIZATION_BOUND:
            return cls(count)
        return cls.OVERFLOW


def _call0(fn, _receiver, _args):
    return fn()


def _call1(fn, _receiver, args):
    return fn(args[0])


def _call2(fn, _receiver, args):
    return fn(args[0], args[1])


def _call3(fn, _receiver, args):
    return fn(args[0], args[1], args[2])


def _method0(fn, receiver, _args):
    return fn(receiver)


def _method1(fn, receiver, args):
    return fn(receiver, args[0])


def _method2(fn, receiver, args):
    return fn(receiver, args[0], args[1])


def _method3(fn, receiver, args):
    return fn(receiver, args[0], args[1], args[2])


_SPECIALIZED_INVOKERS: Final[dict[tuple[ArityClass, bool], Invoker]] = {
    (ArityClass.NULLARY, False): _call0,
    (ArityClass.UNARY, False): _call1,
    (ArityClass.BINARY, False): _call2,
    (ArityClass.TERNARY, False): _call3,
    (ArityClass.NULLARY, True): _method0,
    (ArityClass.UNARY, True): _method1,
    (ArityClass.BINARY, True): _method2,
    (ArityClass.TERNARY, True): _method3,
}


def _overflow_invoker(count: int, receiver: bool) -> Invoker:
    if receiver:

        def _method_n(fn, receiver_value, args):
            return fn(receiver_value, *args[:count])

        return _method_n

    def _call_n(fn, _receiver, args):
        return fn(*args[:count])

    return _call_n


def select_invoker(count: int, *, receiver: bool = False) -> Invoker:
    """Pick the invoker that forwards the first ``count`` items of ``args``."""
    arity = ArityClass.of(count)
    if arity is ArityClass.OVERFLOW:
        return _overflow_invoker(count, receiver)
    return _SPECIALIZED_INVOKERS[(arity, receiver)]


def invoke(fn: Callable[..., Any], args: tuple = (), *, receiver: object = NO_RECEIVER) -> Any:
    has_receiver = receiver is not NO_RECEIVER
    return select_invoker(len(args), receiver=has_receiver)(fn, receiver, args)


def _code_capacity(code: CodeType) -> int | None:
    if code.co_flags & inspect.CO_VARARGS:
        return None
    return code.co_argcount


def positional_capacity(fn: Callable[..., Any]) -> int | None:
    """Positional parameters ``fn`` accepts, or ``None`` for no limit.

    Plain functions and their bound methods are read straight off the code
    object; everything else goes through ``inspect.signature``.
    """
    target, consumed = fn, 0
    if type(fn) is MethodType:
        target, consumed = fn.__func__, 1
    if type(target) is FunctionType and not hasattr(target, "__wrapped__"):
        capacity = _code_capacity(target.__code__)
        return None if capacity is None else max(0, capacity - consumed)
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        logger.debug("no introspectable signature for %r; forwarding every argument", fn)
        return None
    capacity = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            capacity += 1
    return capacity


def fit_callback(fn: Callable[..., Any], available: int, *, receiver: bool = False) -> tuple[int, bool]:
    """Payload width and receiver use for calling ``fn`` back.

    A receiver occupies the first positional slot and is dropped for
    callbacks that take no positional parameters at all. Callables with
    ``*args`` or without an introspectable signature get everything.
    """
    capacity = positional_capacity(fn)
    if capacity is None:
        return available, receiver
    if receiver:
        if capacity == 0:
            return 0, False
        capacity -= 1
    return min(available, capacity), receiver


def callback_width(fn: Callable[..., Any], available: int, *, receiver: bool = False) -> int:
    return fit_callback(fn, available, receiver=receiver)[0]

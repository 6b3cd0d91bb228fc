"""Receiver binding and partial application."""

from __future__ import annotations

from functools import update_wrapper
import inspect
from typing import Any, Callable

from .dispatch import NO_RECEIVER, select_invoker

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _remaining_signature(fn: Callable[..., Any], consumed: int) -> inspect.Signature | None:
    """Signature of ``fn`` after its first ``consumed`` positionals are filled."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    kept = []
    for param in signature.parameters.values():
        if consumed and param.kind in _POSITIONAL_KINDS:
            consumed -= 1
            continue
        kept.append(param)
    return signature.replace(parameters=kept)


def _call(fn, receiver, bound: tuple, call_args: tuple, kwargs: dict):
    args = bound + call_args if bound else call_args
    has_receiver = receiver is not NO_RECEIVER
    if kwargs:
        # Keywords never take part in arity dispatch.
        if has_receiver:
            return fn(receiver, *args, **kwargs)
        return fn(*args, **kwargs)
    return select_invoker(len(args), receiver=has_receiver)(fn, receiver, args)


def _label(fn: object) -> str:
    return str(getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or fn)


class BoundFunction:
    """``fn`` with a locked receiver and an optional argument prefix.

    Not a descriptor: storing one on a class and reading it through an
    instance leaves the locked receiver in place.
    """

    def __init__(self, fn: Callable[..., Any], context: object, args: tuple) -> None:
        update_wrapper(self, fn, updated=())
        self.func = fn
        self.context = context
        self.args = args

    def __call__(self, *call_args, **kwargs):
        return _call(self.func, self.context, self.args, call_args, kwargs)

    @property
    def __signature__(self) -> inspect.Signature | None:
        return _remaining_signature(self.func, 1 + len(self.args))

    def __repr__(self) -> str:
        return f"<BoundFunction {_label(self.func)} context={self.context!r} args={self.args!r}>"


class PartialFunction:
    """``fn`` with an argument prefix; the receiver comes from the call site."""

    def __init__(self, fn: Callable[..., Any], args: tuple) -> None:
        update_wrapper(self, fn, updated=())
        self.func = fn
        self.args = args

    def __call__(self, *call_args, **kwargs):
        return _call(self.func, NO_RECEIVER, self.args, call_args, kwargs)

    def call(self, receiver: object, *call_args, **kwargs):
        """Invoke with an explicit receiver placed ahead of the prefix."""
        return _call(self.func, receiver, self.args, call_args, kwargs)

    def __get__(self, instance: object, owner: type | None = None):
        if instance is None:
            return self
        return _ReceiverPartial(self, instance)

    @property
    def __signature__(self) -> inspect.Signature | None:
        return _remaining_signature(self.func, len(self.args))

    def __repr__(self) -> str:
        return f"<PartialFunction {_label(self.func)} args={self.args!r}>"


class _ReceiverPartial:
    __slots__ = ("partial", "receiver")

    def __init__(self, partial: PartialFunction, receiver: object) -> None:
        self.partial = partial
        self.receiver = receiver

    def __call__(self, *call_args, **kwargs):
        return self.partial.call(self.receiver, *call_args, **kwargs)

    @property
    def __signature__(self) -> inspect.Signature | None:
        return _remaining_signature(self.partial.func, 1 + len(self.partial.args))

    def __repr__(self) -> str:
        return f"<bound {self.partial!r} of {self.receiver!r}>"


class PartialConstructor:
    """Construction of ``cls`` with a fixed leading argument prefix.

    :meth:`construct` is the construction operation. Calling the object
    directly is an alias for it, so both forms return a fully initialized
    instance of ``cls``.
    """

    def __init__(self, cls: Callable[..., Any], args: tuple) -> None:
        update_wrapper(self, cls, updated=())
        self.func = cls
        self.args = args

    def construct(self, *call_args, **kwargs):
        return _call(self.func, NO_RECEIVER, self.args, call_args, kwargs)

    __call__ = construct

    def __instancecheck__(self, instance: object) -> bool:
        return isinstance(self.func, type) and isinstance(instance, self.func)

    @property
    def __signature__(self) -> inspect.Signature | None:
        return _remaining_signature(self.func, len(self.args))

    def __repr__(self) -> str:
        return f"<PartialConstructor {_label(self.func)} args={self.args!r}>"


def bind(fn: Callable[..., Any], context: object, *bound_args) -> BoundFunction:
    """Lock ``context`` as the receiver of ``fn`` and prefix ``bound_args``.

    >>> add = bind(lambda self, a, b: self + a + b, 100, 1)
    >>> add(2)
    103
    """
    return BoundFunction(fn, context, bound_args)


def partial(fn: Callable[..., Any], *bound_args) -> PartialFunction:
    """Prefix ``bound_args`` while leaving the receiver to the call site."""
    return PartialFunction(fn, bound_args)


def partial_constructor(cls: Callable[..., Any], *bound_args) -> PartialConstructor:
    return PartialConstructor(cls, bound_args)

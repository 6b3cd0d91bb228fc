"""Structured error types and failure normalization."""

from __future__ import annotations

from dataclasses import dataclass


class FastFnError(Exception):
    """Base class for structured fastfn errors."""


class EmptyReductionError(FastFnError, TypeError):
    """reduce() of an empty sequence with no initial value."""

    def __init__(self, message: str = "reduce() of empty sequence with no initial value") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CapturedFailure(FastFnError):
    """Wraps a failure signal that is not an exception instance."""

    payload: object

    def __post_init__(self) -> None:
        # BaseException.__init__ fills ``args`` without going through __setattr__.
        Exception.__init__(self, self.payload)

    def __reduce__(self):
        return (type(self), (self.payload,))

    def __str__(self) -> str:
        if isinstance(self.payload, str):
            return self.payload
        return repr(self.payload)


def normalize_failure(signal: object) -> BaseException:
    """Turn any failure signal into an exception object.

    Exception instances pass through unchanged, exception classes are
    instantiated without arguments, and everything else (a raw string, a
    status code) is wrapped in :class:`CapturedFailure`.
    """
    if isinstance(signal, BaseException):
        return signal
    if isinstance(signal, type) and issubclass(signal, BaseException):
        return signal()
    return CapturedFailure(payload=signal)

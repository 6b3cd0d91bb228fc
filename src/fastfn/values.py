"""Structural shape classification for cloning and concatenation.

Protocols are looked up on ``type(value)`` so that classes and generic
aliases (``list``, ``dict``, ``list[int]``) are atoms rather than
matching their own unbound methods.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

import jax.numpy as jnp

_TEXT_TYPES = (str, bytes, bytearray)


class ShapeKind(str, Enum):
    ATOM = "atom"
    ARRAY = "array"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


@dataclass(frozen=True)
class ValueInfo:
    kind: ShapeKind
    length: int | None


def has_protocol(value: object, *names: str) -> bool:
    cls = type(value)
    return all(hasattr(cls, name) for name in names)


def is_jax_array(value: object) -> bool:
    return isinstance(value, jnp.ndarray)


def is_dense_array(value: object) -> bool:
    """True for jax arrays and objects speaking the array protocol."""
    if is_jax_array(value):
        return True
    return has_protocol(value, "__array__", "shape", "ndim")


def is_plain_mapping(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    # Same protocol dict() accepts for its positional argument.
    return has_protocol(value, "keys", "__getitem__")


def _is_indexable(value: object) -> bool:
    return has_protocol(value, "__len__", "__getitem__")


def is_sequence_like(value: object) -> bool:
    return kind_of(value) in (ShapeKind.SEQUENCE, ShapeKind.ARRAY)


def kind_of(value: object) -> ShapeKind:
    if isinstance(value, _TEXT_TYPES):
        return ShapeKind.ATOM
    if is_dense_array(value):
        return ShapeKind.ATOM if value.ndim == 0 else ShapeKind.ARRAY
    if is_plain_mapping(value):
        return ShapeKind.MAPPING
    if _is_indexable(value):
        return ShapeKind.SEQUENCE
    return ShapeKind.ATOM


def scalar_value(value: object) -> object:
    """Python scalar behind a rank-0 dense value; anything else unchanged."""
    if is_dense_array(value) and value.ndim == 0 and has_protocol(value, "item"):
        return value.item()
    return value


def value_info(value: object) -> ValueInfo:
    kind = kind_of(value)
    if kind is ShapeKind.ATOM:
        return ValueInfo(kind=kind, length=None)
    return ValueInfo(kind=kind, length=len(value))

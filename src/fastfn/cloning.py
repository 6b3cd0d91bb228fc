"""Shallow cloning dispatched on value shape."""

from __future__ import annotations

from collections import ChainMap

import jax.numpy as jnp

from .values import ShapeKind, has_protocol, is_dense_array, is_jax_array, kind_of


def clone(value):
    """Shallow copy of sequences and mappings; atoms come back unchanged."""
    kind = kind_of(value)
    if kind is ShapeKind.SEQUENCE or kind is ShapeKind.ARRAY:
        return clone_array(value)
    if kind is ShapeKind.MAPPING:
        return clone_object(value)
    return value


def clone_array(sequence):
    if isinstance(sequence, (list, tuple)):
        return list(sequence)
    if is_jax_array(sequence):
        return jnp.array(sequence, copy=True)
    if is_dense_array(sequence) and has_protocol(sequence, "copy"):
        # The array's own copy keeps its dtype (int64, str, object, ...).
        return sequence.copy()
    return [sequence[index] for index in range(len(sequence))]


def clone_object(mapping) -> dict:
    if isinstance(mapping, ChainMap):
        # Parent maps play the role of inherited entries.
        return dict(mapping.maps[0])
    if type(mapping) is dict:
        return mapping.copy()
    return {key: mapping[key] for key in mapping.keys()}

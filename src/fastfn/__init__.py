"""fastfn public API."""

import logging

from .binding import BoundFunction, PartialConstructor, PartialFunction, bind, partial, partial_constructor
from .cloning import clone, clone_array, clone_object
from .dispatch import (
    NO_RECEIVER,
    SPECIALIZATION_BOUND,
    ArityClass,
    callback_width,
    fit_callback,
    invoke,
    positional_capacity,
    select_invoker,
)
from .errors import CapturedFailure, EmptyReductionError, FastFnError, normalize_failure
from .iteration import concat, for_each, index_of, last_index_of, map, reduce
from .safe import try_
from .values import ShapeKind, ValueInfo, kind_of, value_info

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bind",
    "partial",
    "partial_constructor",
    "clone",
    "clone_array",
    "clone_object",
    "concat",
    "map",
    "reduce",
    "for_each",
    "index_of",
    "last_index_of",
    "try_",
    "BoundFunction",
    "PartialFunction",
    "PartialConstructor",
    "NO_RECEIVER",
    "SPECIALIZATION_BOUND",
    "ArityClass",
    "invoke",
    "select_invoker",
    "callback_width",
    "fit_callback",
    "positional_capacity",
    "ShapeKind",
    "ValueInfo",
    "kind_of",
    "value_info",
    "normalize_failure",
    "FastFnError",
    "EmptyReductionError",
    "CapturedFailure",
]

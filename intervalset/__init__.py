from .core import IntervalSet, ReadOnlyError, intersection, union
from .interval import Interval
from .render import RenderMode, RenderOptions, element_name
from .tokens import (
    TOKEN_EOF,
    TOKEN_EPSILON,
    TOKEN_INVALID_TYPE,
    TOKEN_MIN_USER_TOKEN_TYPE,
)

__all__ = [
    "Interval",
    "IntervalSet",
    "ReadOnlyError",
    "RenderMode",
    "RenderOptions",
    "element_name",
    "union",
    "intersection",
    "TOKEN_EOF",
    "TOKEN_EPSILON",
    "TOKEN_INVALID_TYPE",
    "TOKEN_MIN_USER_TOKEN_TYPE",
]

"""Human-readable rendering of interval sets.

Three modes are supported, chosen by which options are supplied:

- INDEX: bare integers, ``lo..hi`` for runs (the default)
- CHAR: quoted characters, for sets of code points
- NAMED: every element expanded through the grammar's name tables
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from intervalset.interval import Interval
from intervalset.tokens import TOKEN_EOF, TOKEN_EPSILON

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


class RenderMode(Enum):
    INDEX = "index"
    CHAR = "char"
    NAMED = "named"


@dataclass(frozen=True, kw_only=True)
class RenderOptions:
    """Rendering configuration for ``IntervalSet.to_string``.

    Attributes:
        literal_names: Literal spellings indexed by token type (e.g. ``"'+'"``)
        symbolic_names: Symbolic names indexed by token type (e.g. ``"PLUS"``)
        elems_are_char: Render elements as characters when no table is given
    """

    literal_names: Sequence[str] | None = None
    symbolic_names: Sequence[str] | None = None
    elems_are_char: bool = False

    @property
    def mode(self) -> RenderMode:
        # Name tables take precedence over the character flag
        if self.literal_names is not None or self.symbolic_names is not None:
            return RenderMode.NAMED
        if self.elems_are_char:
            return RenderMode.CHAR
        return RenderMode.INDEX


def element_name(
    literal_names: Sequence[str] | None,
    symbolic_names: Sequence[str] | None,
    a: int,
) -> str:
    """Return the display name of token type ``a``.

    Precondition: unless ``a`` is a sentinel or has a non-empty literal name,
    ``symbolic_names`` must cover it.

    Raises:
        IndexError: If neither table has an entry for ``a``
    """
    if a == TOKEN_EOF:
        return "<EOF>"
    if a == TOKEN_EPSILON:
        return "<EPSILON>"
    if literal_names is not None and 0 <= a < len(literal_names) and literal_names[a]:
        return literal_names[a]
    if symbolic_names is None or not 0 <= a < len(symbolic_names):
        covered = 0 if symbolic_names is None else len(symbolic_names)
        raise IndexError(
            f"No name for token type {a}: symbolic_names covers {covered} entries.\n"
            f"Hint: name tables must cover every element of the rendered set."
        )
    return symbolic_names[a]


def _char(value: int) -> str:
    if 0 <= value <= _MAX_CODE_POINT and value not in _SURROGATES:
        return chr(value)
    return "\ufffd"


def _index_name(interval: Interval) -> str:
    if interval.stop == interval.start + 1:
        if interval.start == TOKEN_EOF:
            return "<EOF>"
        return str(interval.start)
    return f"{interval.start}..{interval.stop}"


def _char_name(interval: Interval) -> str:
    if interval.stop == interval.start + 1:
        if interval.start == TOKEN_EOF:
            return "<EOF>"
        return f"'{_char(interval.start)}'"
    return f"'{_char(interval.start)}'..'{_char(interval.stop)}'"


def _join(names: list[str]) -> str:
    if len(names) > 1:
        return "{" + ", ".join(names) + "}"
    if len(names) == 1:
        return names[0]
    return "{}"


def render(intervals: Sequence[Interval], options: RenderOptions = RenderOptions()) -> str:
    """Render a sorted interval sequence according to ``options.mode``."""
    if not intervals:
        return "{}"

    mode = options.mode
    if mode is RenderMode.NAMED:
        names = [
            element_name(options.literal_names, options.symbolic_names, a)
            for interval in intervals
            for a in range(interval.start, interval.stop)
        ]
    elif mode is RenderMode.CHAR:
        names = [_char_name(interval) for interval in intervals]
    else:
        names = [_index_name(interval) for interval in intervals]

    return _join(names)

"""Context-aware HTML escaping.

Each public method targets one HTML tokenizer state:

* ``escape_data``: text content (data state, §13.2.5.1)
* ``escape_double_quoted_attribute``: attribute value (double-quoted) state
* ``escape_single_quoted_attribute``: attribute value (single-quoted) state
* ``escape_unquoted_attribute``: attribute value (unquoted) state

The NUL character cannot be included in HTML documents. It is replaced with
U+FFFD REPLACEMENT CHARACTER before anything else happens.
"""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

from .entities import lookup_entity
from .errors import InvalidOptionError
from .replacements import lookup_replacement

CONTROL = "control"
NONBREAKING_SPACE = "nonbreaking-space"
NON_ASCII = "non-ascii"

ESCAPE_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    CONTROL: ((0x00, 0x1F), (0x7F, 0x7F), (0x80, 0x9F)),
    NONBREAKING_SPACE: ((0xA0, 0xA0),),
    NON_ASCII: ((0x80, 0x99999),),
}

DEFAULT_ESCAPE_RANGES = (CONTROL, NONBREAKING_SPACE)

# Plain words and spaces are never escaped, except spaces in unquoted attribute values.
_SAFE_RE = re.compile(r"[A-Za-z0-9_ ]*")
_UNQUOTED_SAFE_RE = re.compile(r"[A-Za-z0-9_]*")

# An ampersand followed by one of these could start a character reference.
_AMBIGUOUS_AMPERSAND_FOLLOWERS = frozenset(string.ascii_letters + string.digits)

_DATA_TARGETS = frozenset("<")
_DOUBLE_QUOTED_TARGETS = frozenset('"')
_SINGLE_QUOTED_TARGETS = frozenset("'")
_UNQUOTED_TARGETS = frozenset("\t\n\f <>=\"'`")


class EscaperOpts:
    """Escaper configuration.

    Args:
        escape_ranges: Zero or more of "control", "nonbreaking-space" and
            "non-ascii". Defaults to ("control", "nonbreaking-space").
        escape_base: Base of numeric character references, 10 or 16.
            Defaults to 16.
        force_escape: Whether to substitute a character that a numeric
            reference cannot express with the character a parser would read
            back. When false, such characters are left unescaped.
            Defaults to True.
    """

    __slots__ = ("escape_base", "escape_ranges", "force_escape")

    escape_ranges: frozenset[str]
    escape_base: int
    force_escape: bool

    def __init__(
        self,
        escape_ranges: Iterable[str] = DEFAULT_ESCAPE_RANGES,
        escape_base: int = 16,
        force_escape: bool = True,
    ) -> None:
        if isinstance(escape_ranges, str):
            raise InvalidOptionError("invalid-escape-ranges-type", escape_ranges)
        ranges = frozenset(escape_ranges)
        for name in sorted(ranges, key=str):
            if name not in ESCAPE_RANGES:
                raise InvalidOptionError("invalid-escape-range", name)
        if escape_base not in (10, 16):
            raise InvalidOptionError("invalid-escape-base", escape_base)

        object.__setattr__(self, "escape_ranges", ranges)
        object.__setattr__(self, "escape_base", escape_base)
        object.__setattr__(self, "force_escape", bool(force_escape))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"EscaperOpts(escape_ranges={sorted(self.escape_ranges)!r}, "
            f"escape_base={self.escape_base!r}, force_escape={self.force_escape!r})"
        )


class Escaper:
    """Escape text for HTML5 documents.

    An Escaper only holds its options, so one instance can be shared freely,
    including across threads.

    >>> Escaper().escape_data('< Abbott & Costello &me; "on first"')
    '&lt; Abbott & Costello &amp;me; "on first"'
    """

    __slots__ = ("_intervals", "_opts")

    _opts: EscaperOpts
    _intervals: tuple[tuple[int, int], ...]

    def __init__(self, opts: EscaperOpts | None = None) -> None:
        self._opts = opts if opts is not None else EscaperOpts()
        # Fixed order: control, nonbreaking-space, non-ascii
        intervals: list[tuple[int, int]] = []
        for name, ranges in ESCAPE_RANGES.items():
            if name in self._opts.escape_ranges:
                intervals.extend(ranges)
        self._intervals = tuple(intervals)

    @property
    def opts(self) -> EscaperOpts:
        """The options this escaper was built with; fixed for its lifetime."""
        return self._opts

    def _escape_character(self, character: str) -> str:
        """Return the escaped form of a single character."""
        to = lookup_replacement(character)
        if to is not None:
            if not self._opts.force_escape:
                return character
            character = to

        entity = lookup_entity(character)
        if entity is not None:
            return entity

        codepoint = ord(character[0])
        if self._opts.escape_base == 10:
            return f"&#{codepoint}"
        return f"&#x{codepoint:x}"

    def _in_ranges(self, codepoint: int) -> bool:
        for low, high in self._intervals:
            if low <= codepoint <= high:
                return True
        return False

    def _escape(self, value: str, targets: frozenset[str], safe_re: re.Pattern[str] = _SAFE_RE) -> str:
        if safe_re.fullmatch(value):
            return value

        value = value.replace("\x00", "\ufffd")

        # Escaped text goes straight to the output and is never rescanned.
        result: list[str] = []
        length = len(value)
        for i, ch in enumerate(value):
            if ch == "&":
                if i + 1 < length and value[i + 1] in _AMBIGUOUS_AMPERSAND_FOLLOWERS:
                    result.append(self._escape_character(ch))
                else:
                    result.append(ch)
            elif ch in targets or ((ch < " " or ch > "~") and self._in_ranges(ord(ch))):
                result.append(self._escape_character(ch))
            else:
                result.append(ch)
        return "".join(result)

    def escape_data(self, value: str) -> str:
        """Escape a text node.

        >>> Escaper().escape_data("a < b")
        'a &lt; b'
        """
        return self._escape(value, _DATA_TARGETS)

    def escape_double_quoted_attribute(self, value: str) -> str:
        """Escape an attribute value delimited by double quotes.

        >>> Escaper().escape_double_quoted_attribute('a "b" c')
        'a &quot;b&quot; c'
        """
        return self._escape(value, _DOUBLE_QUOTED_TARGETS)

    def escape_single_quoted_attribute(self, value: str) -> str:
        """Escape an attribute value delimited by single quotes."""
        return self._escape(value, _SINGLE_QUOTED_TARGETS)

    def escape_unquoted_attribute(self, value: str) -> str:
        """Escape an attribute value written without quotes.

        Whitespace ends an unquoted value, so spaces are escaped too.

        >>> Escaper().escape_unquoted_attribute("a b")
        'a&#x20b'
        """
        return self._escape(value, _UNQUOTED_TARGETS, _UNQUOTED_SAFE_RE)

"""Typed match criteria for ``find_one_document`` / ``find_many_documents``.

Callers pass plain ``str`` values for exact matches and compiled
``re.Pattern`` objects for pattern matches, or build the criteria explicitly
with :class:`StringMatch` and :class:`RegexMatch`. The ``str:`` / ``regex:``
wire prefixes only appear in :func:`encode_criteria`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Union

STRING_PREFIX = "str:"
REGEX_PREFIX = "regex:"

# Only flags with a counterpart in the backend's regex dialect.
_FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)
# re.UNICODE is set implicitly on every str pattern.
_SUPPORTED_FLAGS = re.IGNORECASE | re.MULTILINE | re.DOTALL | re.UNICODE


@dataclass(frozen=True)
class StringMatch:
    value: str

    def to_wire(self) -> str:
        return STRING_PREFIX + self.value


@dataclass(frozen=True)
class RegexMatch:
    pattern: str
    flags: str = ""

    @classmethod
    def from_pattern(cls, pattern: re.Pattern[str]) -> "RegexMatch":
        unsupported = pattern.flags & ~_SUPPORTED_FLAGS
        if unsupported:
            raise ValueError(
                f"Pattern {pattern.pattern!r} uses flags {re.RegexFlag(unsupported)!r} "
                "that cannot be sent to the backend"
            )
        letters = "".join(letter for flag, letter in _FLAG_LETTERS if pattern.flags & flag)
        return cls(pattern.pattern, letters)

    def compile(self) -> re.Pattern[str]:
        flags = 0
        for flag, letter in _FLAG_LETTERS:
            if letter in self.flags:
                flags |= flag
        return re.compile(self.pattern, flags)

    def to_wire(self) -> str:
        return f"{REGEX_PREFIX}/{_escape_slashes(self.pattern)}/{self.flags}"


Criterion = Union[StringMatch, RegexMatch]
CriterionLike = Union[str, "re.Pattern[str]", StringMatch, RegexMatch]


def as_criterion(value: CriterionLike) -> Criterion:
    """Classify a raw value by its runtime kind."""
    if isinstance(value, (StringMatch, RegexMatch)):
        return value
    if isinstance(value, str):
        return StringMatch(value)
    if isinstance(value, re.Pattern):
        return RegexMatch.from_pattern(value)
    raise TypeError(
        f"Unsupported criterion {value!r}; expected str or a compiled regular expression"
    )


def parse_criterion(raw: str) -> Criterion:
    """Turn a tagged wire string back into a typed criterion."""
    if raw.startswith(STRING_PREFIX):
        return StringMatch(raw[len(STRING_PREFIX):])
    if raw.startswith(REGEX_PREFIX):
        literal = raw[len(REGEX_PREFIX):]
        end = literal.rfind("/")
        if not literal.startswith("/") or end == 0:
            raise ValueError(f"Malformed regex criterion '{raw}'")
        return RegexMatch(_unescape_slashes(literal[1:end]), literal[end + 1:])
    raise ValueError(f"Criterion '{raw}' has no known tag")


def encode_criteria(values: Iterable[CriterionLike]) -> list[str]:
    return [as_criterion(value).to_wire() for value in values]


def _escape_slashes(pattern: str) -> str:
    """Escape every ``/`` that is not already escaped, as ``/.../`` literals require."""
    out = []
    escaped = False
    for char in pattern:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "/":
            out.append("\\")
        out.append(char)
    return "".join(out)


def _unescape_slashes(source: str) -> str:
    out = []
    escaped = False
    for char in source:
        if escaped:
            if char != "/":
                out.append("\\")
            out.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            out.append(char)
    if escaped:
        out.append("\\")
    return "".join(out)

"""IRC line grammar parser.

A line has the general form::

    [@tag1=val1;tag2=val2 ][:prefix ]COMMAND [param ...] [:trailing param]

Each optional segment is recognized by peeking at a single character, so the
whole line is parsed in one forward pass without backtracking. Tag values are
kept verbatim: IRCv3 escapes such as ``\\s`` are not unescaped.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors.internal import GrammarError

_LINE_BREAKS = "\r\n"
# Information separators: str.isspace() accepts them, but they are formatting
# codes inside IRC text, not field separators.
_NON_SEPARATORS = "\x1c\x1d\x1e\x1f"


def _is_separator(c: str) -> bool:
    return c.isspace() and c not in _NON_SEPARATORS


@dataclass
class RawMessage:
    """Parsed but uninterpreted form of one protocol line."""

    command: str
    params: list[str] = field(default_factory=list)
    prefix: str | None = None
    tags: list[tuple[str, str]] = field(default_factory=list)


class _Cursor:
    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self) -> None:
        self.pos += 1

    def skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and _is_separator(text[self.pos]):
            self.pos += 1

    def take_word(self) -> str:
        """Consume up to (not including) the next whitespace character."""
        start = self.pos
        text = self.text
        while self.pos < len(text) and not _is_separator(text[self.pos]):
            self.pos += 1
        return text[start : self.pos]

    def take_line(self) -> str:
        """Consume up to (not including) the next CR or LF."""
        start = self.pos
        text = self.text
        while self.pos < len(text) and text[self.pos] not in _LINE_BREAKS:
            self.pos += 1
        return text[start : self.pos]


def _parse_tags(blob: str) -> list[tuple[str, str]]:
    tags: list[tuple[str, str]] = []
    for pair in blob.split(";"):
        key, _, value = pair.partition("=")
        if not key:
            break
        tags.append((key, value))
    return tags


def parse_raw_message(line: str) -> RawMessage:
    """Parse one wire line into a :class:`RawMessage`.

    The line may end with ``\\r\\n``, ``\\n`` or nothing at all.

    Raises:
        GrammarError: if no command name could be found.
    """
    cursor = _Cursor(line)

    tags: list[tuple[str, str]] = []
    if cursor.peek() == "@":
        cursor.advance()
        tags = _parse_tags(cursor.take_word())
    cursor.skip_whitespace()

    prefix: str | None = None
    if cursor.peek() == ":":
        cursor.advance()
        prefix = cursor.take_word()
    cursor.skip_whitespace()

    command = cursor.take_word()
    if not command:
        raise GrammarError(
            "error parsing command name: expected command name, reached end of input",
            data={"line": line},
        )

    params: list[str] = []
    cursor.skip_whitespace()
    while not cursor.at_end():
        if cursor.peek() == ":":
            cursor.advance()
            params.append(cursor.take_line())
            break
        params.append(cursor.take_word())
        cursor.skip_whitespace()

    return RawMessage(command=command, params=params, prefix=prefix, tags=tags)


__all__ = ["RawMessage", "parse_raw_message"]

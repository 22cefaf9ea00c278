"""Minimal markup used in result messages.

Messages are plain strings. The renderer decides how to display them:

    **text**   emphasis
    `text`     literal value (a CURP, an RFC, a segment)
    newline    line break

A backslash makes the next character literal. Values embedded in a message
always go through :func:`escape` (or :func:`strong` / :func:`code`), which keeps user
input from opening or closing spans.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

_SPECIAL = re.compile(r"([\\*`])")


class SegmentKind(str, Enum):
    TEXT = "text"
    STRONG = "strong"
    CODE = "code"
    BREAK = "break"


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    text: str = ""


def escape(text: str) -> str:
    """Backslash-escape markup characters."""
    return _SPECIAL.sub(r"\\\1", text)


def strong(text: str) -> str:
    return f"**{escape(text)}**"


def code(text: str) -> str:
    return f"`{escape(text)}`"


def tokenize(message: str) -> Iterator[Segment]:
    """Split a message into text, strong, code and break segments.

    Unterminated spans are closed at the end of the message.
    """
    kind = SegmentKind.TEXT
    buf: list[str] = []
    i = 0
    n = len(message)

    def flush() -> Iterator[Segment]:
        if buf:
            yield Segment(kind, "".join(buf))
            buf.clear()

    while i < n:
        ch = message[i]
        if ch == "\\" and i + 1 < n:
            buf.append(message[i + 1])
            i += 2
            continue
        if ch == "\n":
            yield from flush()
            yield Segment(SegmentKind.BREAK)
            i += 1
            continue
        if ch == "`" and kind is not SegmentKind.STRONG:
            yield from flush()
            kind = SegmentKind.TEXT if kind is SegmentKind.CODE else SegmentKind.CODE
            i += 1
            continue
        if message.startswith("**", i) and kind is not SegmentKind.CODE:
            yield from flush()
            kind = SegmentKind.TEXT if kind is SegmentKind.STRONG else SegmentKind.STRONG
            i += 2
            continue
        buf.append(ch)
        i += 1

    yield from flush()


def to_plain(message: str) -> str:
    """Drop all markup, keeping text and line breaks."""
    return "".join(
        "\n" if seg.kind is SegmentKind.BREAK else seg.text for seg in tokenize(message)
    )

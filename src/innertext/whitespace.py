"""CSS white-space processing for a single merged text run.

See https://drafts.csswg.org/css-text/#white-space-rules
"""

from __future__ import annotations

import re

from .constants import ZERO_WIDTH_SPACE

_LINE_ENDINGS = re.compile(r"\r\n?")
_SPACES_AROUND_SEGMENT_BREAK = re.compile(r"[ \t]*\n[ \t]*")
_SEGMENT_BREAKS = re.compile(r"\n+")
_SPACES = re.compile(r" +")


def normalize_newlines(text: str) -> str:
    """Turn CRLF and lone CR into LF, leaving all other white-space alone."""
    return _LINE_ENDINGS.sub("\n", text)


def collapse_whitespace(text: str) -> str:
    # CRLF is a single segment break
    text = text.replace("\r\n", "\n")

    # Spaces and tabs around a segment break are removed
    text = _SPACES_AROUND_SEGMENT_BREAK.sub("\n", text)

    # A segment break following another one is removed
    text = _SEGMENT_BREAKS.sub("\n", text)

    # A segment break next to a zero-width space is removed, the zero-width space stays
    text = text.replace(ZERO_WIDTH_SPACE + "\n", ZERO_WIDTH_SPACE)
    text = text.replace("\n" + ZERO_WIDTH_SPACE, ZERO_WIDTH_SPACE)

    # Remaining segment breaks render as spaces
    text = text.replace("\n", " ")
    text = text.replace("\t", " ")

    return _SPACES.sub(" ", text)


def normalize_whitespace(text: str) -> str:
    # Merged runs always sit between block boundaries or breaks
    return collapse_whitespace(text).strip(" ")

"""Items produced by the inner text collection steps.

An item is one of:

- ``str``: a literal text fragment (possibly empty while collecting)
- ``PreservedText``: a ``str`` collected inside a white-space preserving
  element; enclosing merges keep its white-space
- ``RequiredBreak``: at least ``count`` line feeds must appear here
- ``BlockStart`` / ``BlockEnd``: delimit a scope whose text has already been
  normalized and must be passed through untouched by enclosing merges
"""

from __future__ import annotations

from typing import Union


class RequiredBreak:
    __slots__ = ("count",)

    def __init__(self, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            msg = f"Required line break count must be a positive integer, got {count!r}"
            raise ValueError(msg)
        self.count = count

    def __repr__(self) -> str:
        return f"RequiredBreak({self.count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequiredBreak):
            return NotImplemented
        return self.count == other.count

    def __hash__(self) -> int:
        return hash((RequiredBreak, self.count))


class PreservedText(str):
    __slots__ = ()


class BlockStart:
    __slots__ = ()

    def __repr__(self) -> str:
        return "BLOCK_START"


class BlockEnd:
    __slots__ = ()

    def __repr__(self) -> str:
        return "BLOCK_END"


BLOCK_START = BlockStart()
BLOCK_END = BlockEnd()

Item = Union[str, RequiredBreak, BlockStart, BlockEnd]


def format_items(items: tuple[Item, ...] | list[Item]) -> str:
    """Render an item sequence on one line for debug output.

    Text is shown quoted (repr-escaped), breaks as ``<n>`` and opaque scopes
    as ``{ ... }``.
    """
    parts: list[str] = []
    for item in items:
        if isinstance(item, str):
            parts.append(repr(item))
        elif isinstance(item, RequiredBreak):
            parts.append(f"<{item.count}>")
        elif isinstance(item, BlockStart):
            parts.append("{")
        else:
            parts.append("}")
    return "[" + " ".join(parts) + "]"

"""Inner text collection steps.

Walks a Node tree depth-first in document order and returns, per node, a
tuple of items (see ``innertext.items``). Text runs are merged and
normalized once per block so that enclosing blocks treat them as opaque.

See https://html.spec.whatwg.org/multipage/dom.html#inner-text-collection-steps
"""

from itertools import groupby

from .constants import ASCII_WHITESPACE, BLOCK_LINE_BREAKS, PARAGRAPH_LINE_BREAKS
from .items import BLOCK_END, BLOCK_START, BlockEnd, BlockStart, PreservedText, RequiredBreak, format_items
from .rendering import is_being_rendered, is_block_level, toggles_pre
from .whitespace import collapse_whitespace, normalize_newlines, normalize_whitespace

_LINE_BREAK = (BLOCK_START, "\n", BLOCK_END)


def merge_text_runs(items, pre=False):
    """Merge consecutive strings, normalize them and wrap the result in a block.

    Strings inside nested BLOCK_START/BLOCK_END pairs were normalized by the
    call that produced them and are passed through unchanged.
    """
    merged = [BLOCK_START]
    pending = []
    depth = 0
    for item in items:
        if pending and not isinstance(item, str):
            merged.append(_flush(pending, pre))
            pending = []
        if isinstance(item, BlockStart):
            depth += 1
        if depth > 0:
            if isinstance(item, BlockEnd):
                depth -= 1
            merged.append(item)
            continue
        if isinstance(item, str):
            pending.append(item)
        else:
            merged.append(item)
    if pending:
        merged.append(_flush(pending, pre))
    merged.append(BLOCK_END)
    return tuple(merged)


def _flush(pending, pre):
    if pre:
        return normalize_newlines("".join(pending))
    if not any(isinstance(piece, PreservedText) for piece in pending):
        return normalize_whitespace("".join(pending))

    # Preserved pieces keep their white-space, and only the ends of the run
    # that are not preserved get trimmed
    pieces = [piece for piece in pending if piece]
    parts = []
    for preserved, group in groupby(pieces, key=lambda piece: isinstance(piece, PreservedText)):
        text = "".join(group)
        parts.append(normalize_newlines(text) if preserved else collapse_whitespace(text))
    if not parts:
        return ""
    if not isinstance(pieces[0], PreservedText):
        parts[0] = parts[0].lstrip(" ")
    if not isinstance(pieces[-1], PreservedText):
        parts[-1] = parts[-1].rstrip(" ")
    return "".join(parts)


def _replacement_text(node):
    """Text standing in for an image: its alt text, else its src."""
    if node.has_attribute("alt"):
        value = node.get_attribute("alt", "")
    elif node.has_attribute("src"):
        value = node.get_attribute("src", "")
    else:
        value = ""
    return value.strip(ASCII_WHITESPACE)


class _Frame:
    """An element whose children are still being collected."""

    __slots__ = ("depth", "index", "items", "node", "outer", "pre")

    def __init__(self, node, outer, pre, depth):
        self.node = node
        self.outer = outer
        self.pre = pre
        self.depth = depth
        self.index = 0
        self.items = []


class TextCollector:
    __slots__ = ("env_debug",)

    def __init__(self, *, debug=False):
        self.env_debug = bool(debug)

    def debug(self, message, indent=4):
        # Only format the message when debugging is on
        if self.env_debug:
            class_name = self.__class__.__name__
            print(f"{' ' * indent}{class_name}: {message}")

    def collect(self, node, outer=False, pre=False):
        # Explicit stack, so tree depth is not bounded by the recursion limit
        frame = self._open(node, outer, pre, 0)
        if not isinstance(frame, _Frame):
            return frame
        stack = [frame]
        while True:
            frame = stack[-1]
            children = frame.node.children
            if frame.index < len(children):
                child = children[frame.index]
                frame.index += 1
                opened = self._open(child, False, frame.pre, frame.depth + 1)
                if isinstance(opened, _Frame):
                    stack.append(opened)
                else:
                    frame.items.extend(opened)
                continue

            stack.pop()
            result = self._close(frame)
            if not stack:
                return result
            stack[-1].items.extend(result)

    def _open(self, node, outer, pre, depth):
        """Return the items of a leaf or skipped node, or a frame to walk."""
        if node.is_text:
            # Text nodes are leaves, whatever the tree claims about their children
            if pre:
                return (PreservedText(node.text_content),)
            return (node.text_content,)
        if not node.is_element and not node.is_root:
            return ()

        # Hidden subtrees contribute nothing, so their children are never walked
        if not outer and not is_being_rendered(node):
            self.debug(f"<{node.local_name}> not rendered, skipping subtree", indent=depth * 2)
            return ()

        return _Frame(node, outer, pre or toggles_pre(node), depth)

    def _close(self, frame):
        node = frame.node
        items = frame.items
        tag = node.local_name

        if tag == "br":
            return _LINE_BREAK

        if tag == "p":
            items.insert(0, RequiredBreak(PARAGRAPH_LINE_BREAKS))
            items.append(RequiredBreak(PARAGRAPH_LINE_BREAKS))

        if tag == "img":
            value = _replacement_text(node)
            if frame.outer:
                return (value,)
            # Padded so neighbouring inline text does not run into it
            return (f" {value} ",)

        block_level = is_block_level(node)
        if block_level or tag == "caption":
            items.insert(0, RequiredBreak(BLOCK_LINE_BREAKS))
            items.append(RequiredBreak(BLOCK_LINE_BREAKS))

        if frame.outer or block_level:
            result = merge_text_runs(items, frame.pre)
            self.debug(f"<{tag}> -> {format_items(result)}", indent=frame.depth * 2)
            return result

        return tuple(items)


_DEFAULT_COLLECTOR = TextCollector()


def collect(node, outer=False, pre=False):
    """Run the inner text collection steps for ``node``.

    ``outer`` marks the element innerText was requested for: it is never
    treated as hidden and an image root yields its bare replacement text.
    ``pre`` is set when an ancestor preserves white-space.
    """
    return _DEFAULT_COLLECTOR.collect(node, outer, pre)

"""Rendering predicates.

Decide whether an element produces a box at all, and whether that box is
block-level, using the default rendering rules instead of a CSS cascade.
"""

from .constants import (
    BLOCK_LEVEL_ELEMENTS,
    FORM_HIDING_PARENTS,
    NON_RENDERED_ELEMENTS,
    WHITESPACE_PRESERVING_ELEMENTS,
)


def is_being_rendered(node):
    """Return False for elements the default stylesheet hides.

    See https://html.spec.whatwg.org/multipage/rendering.html#hidden-elements
    and https://html.spec.whatwg.org/multipage/rendering.html#tables-2
    """
    tag = node.local_name
    if tag in NON_RENDERED_ELEMENTS:
        return False
    # embed ignores the hidden attribute
    if node.has_attribute("hidden") and tag != "embed":
        return False
    if tag == "input" and (node.get_attribute("type") or "").lower() == "hidden":
        return False
    if tag == "dialog" and not node.has_attribute("open"):
        return False
    if tag == "form":
        parent = node.parent
        if parent is not None and parent.local_name in FORM_HIDING_PARENTS:
            return False
    return True


def is_block_level(node):
    return node.local_name in BLOCK_LEVEL_ELEMENTS


def toggles_pre(node):
    """Check if the element switches its subtree to preserved white-space."""
    return node.local_name in WHITESPACE_PRESERVING_ELEMENTS

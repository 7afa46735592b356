"""Build Node trees from HTML markup or ElementTree-style elements.

Markup is parsed with html5lib, which implements the WHATWG tree
construction algorithm, so the resulting tree matches what a browser
would build (implied <html>/<head>/<body>, foster parenting, etc.).

Any element exposing the ElementTree API (``tag``, ``attrib``, ``text``,
``tail`` and iteration over children) can be converted, which covers
``xml.etree.ElementTree`` and lxml elements as well.
"""

from __future__ import annotations

from typing import Any
from xml.etree import ElementTree

import html5lib

from .constants import COMMENT_NODE, DOCUMENT_NODE, FRAGMENT_NODE, NAMESPACE_PREFIXES
from .node import Node

# Root element names used by html5lib's etree tree builder
_ETREE_ROOTS = {
    "DOCUMENT_ROOT": DOCUMENT_NODE,
    "DOCUMENT_FRAGMENT": FRAGMENT_NODE,
}

_ATTRIBUTE_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
    "http://www.w3.org/2000/xmlns/": "xmlns",
}


def parse_html(markup: str | bytes) -> Node:
    """Parse a complete HTML document into a ``#document`` Node."""
    html = html5lib.parse(markup, treebuilder="etree", namespaceHTMLElements=False)
    document = Node(DOCUMENT_NODE)
    document.append_child(from_etree(html))
    return document


def parse_fragment(markup: str | bytes, container: str = "div") -> Node:
    """Parse markup as the contents of ``container`` into a ``#document-fragment`` Node."""
    fragment = html5lib.parseFragment(
        markup,
        container=container,
        treebuilder="etree",
        namespaceHTMLElements=False,
    )
    return from_etree(fragment)


def _split_name(name: str) -> tuple[str | None, str]:
    """Split a Clark-notation name ``{uri}local`` into (uri, local)."""
    if name.startswith("{"):
        uri, _, local = name[1:].partition("}")
        return uri, local
    return None, name


def _convert_attributes(attrib: dict[str, Any]) -> dict[str, str]:
    attributes = {}
    for key, value in attrib.items():
        uri, local = _split_name(key)
        prefix = _ATTRIBUTE_PREFIXES.get(uri) if uri else None
        attributes[f"{prefix}:{local}" if prefix else local] = value
    return attributes


def _make_node(element: Any) -> Node | None:
    tag = element.tag
    if not isinstance(tag, str):
        # Comments (xml.etree and lxml both use a Comment factory as the tag)
        if tag is ElementTree.Comment or getattr(tag, "__name__", "") == "Comment":
            return Node(COMMENT_NODE, text_content=element.text or "")
        # Processing instructions, entities
        return None
    if tag in _ETREE_ROOTS:
        return Node(_ETREE_ROOTS[tag])
    if tag.startswith("<!"):
        return None
    uri, local = _split_name(tag)
    namespace = NAMESPACE_PREFIXES.get(uri) if uri else None
    return Node(local, _convert_attributes(dict(element.attrib)), namespace=namespace)


def _append_text(parent: Node, data: str | None) -> None:
    if data:
        parent.append_child(Node.text(data))


def from_etree(element: Any) -> Node:
    """Convert an ElementTree-style element (and its subtree) into a Node.

    The element's own ``tail`` belongs to its parent and is not included.
    Conversion is iterative, so deep trees do not hit the recursion limit.
    """
    root = _make_node(element)
    if root is None:
        msg = f"Cannot convert {element.tag!r} into a Node"
        raise ValueError(msg)

    stack = [(element, root)]
    while stack:
        current, node = stack.pop()
        if node.is_comment:
            continue
        _append_text(node, current.text)
        pending = []
        for child in current:
            child_node = _make_node(child)
            if child_node is not None:
                node.append_child(child_node)
                pending.append((child, child_node))
            _append_text(node, child.tail)
        stack.extend(reversed(pending))
    return root

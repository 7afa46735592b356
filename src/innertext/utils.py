"""Tree lookup helpers shared by the CLI and the fixture runner."""

from .constants import DOCUMENT_NODE


def get_html(root):
    """Find the <html> node of a document tree."""
    if not root:
        return None
    if root.tag_name == "html":
        return root
    if root.tag_name != DOCUMENT_NODE:
        return None
    return root.find_child_by_tag("html")


def get_body(root):
    """Find existing body node in the document tree."""
    html_node = get_html(root)
    if not html_node:
        return None
    return html_node.find_child_by_tag("body")

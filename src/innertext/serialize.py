"""
HTML5 test format serialization.

Dumps Node trees in the '| ' prefixed format used by html5lib tests, which
makes it easy to see what the parser built before text is collected.
"""

from .constants import COMMENT_NODE, ROOT_NODES, TEXT_NODE


def to_test_format(node, indent=0):
    """Convert a Node (and its subtree) to HTML5 test format."""
    if node.tag_name in ROOT_NODES:
        return "\n".join(to_test_format(child, indent) for child in node.children)

    padding = " " * indent
    if node.tag_name == TEXT_NODE:
        return f'| {padding}"{node.text_content}"'
    if node.tag_name == COMMENT_NODE:
        return f"| {padding}<!-- {node.text_content} -->"

    display_tag = f"{node.namespace} {node.tag_name}" if node.namespace else node.tag_name
    lines = [f"| {padding}<{display_tag}>"]
    # Attributes on their own lines, sorted for deterministic output
    for key, value in sorted(node.attributes.items()):
        lines.append(f'| {" " * (indent + 2)}{key}="{value}"')
    lines.extend(to_test_format(child, indent + 2) for child in node.children)
    return "\n".join(lines)

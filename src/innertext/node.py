from .constants import COMMENT_NODE, ROOT_NODES, TEXT_NODE


class Node:
    """Represents a DOM-like node walked by the inner text collector.
    - tag_name: e.g., 'div', 'p', etc. Use '#text' for text nodes, '#comment' for comments.
    - attributes: dict of tag attributes (keys lower-cased)
    - children: list of child Nodes
    - parent: reference to parent Node (or None for root)
    - text_content: character data for text and comment nodes
    """

    __slots__ = (
        "attributes",
        "children",
        "namespace",
        "parent",
        "tag_name",
        "text_content",
    )

    def __init__(self, tag_name, attributes=None, text_content=None, namespace=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(
                msg,
            )

        self.tag_name = tag_name
        self.namespace = namespace  # None for HTML, "svg" or "math" for foreign elements
        if attributes:
            # Lowercase attribute names deterministically; keep first occurrence
            lowered = {}
            for k, v in attributes.items():
                lk = k.lower()
                if lk not in lowered:
                    lowered[lk] = v
            self.attributes = lowered
        else:
            self.attributes = {}
        self.children = []
        self.parent = None
        self.text_content = text_content if text_content is not None else ""

    @classmethod
    def text(cls, data):
        return cls(TEXT_NODE, text_content=data)

    @property
    def is_text(self):
        return self.tag_name == TEXT_NODE

    @property
    def is_comment(self):
        return self.tag_name == COMMENT_NODE

    @property
    def is_root(self):
        """Check if this is a document or document-fragment node."""
        return self.tag_name in ROOT_NODES

    @property
    def is_element(self):
        return not self.tag_name.startswith("#")

    @property
    def local_name(self):
        """Tag name lower-cased for comparisons against the element tables."""
        return self.tag_name.lower()

    def has_attribute(self, name):
        return name.lower() in self.attributes

    def get_attribute(self, name, default=None):
        value = self.attributes.get(name.lower(), default)
        return default if value is None else value

    def append_child(self, child):
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(
                msg,
            )

        if child.parent:
            child.parent.children.remove(child)

        child.parent = self
        self.children.append(child)
        return child

    def _would_create_circular_reference(self, child):
        """Check if adding child would create a circular reference."""
        # Fast path: a childless node can only be an ancestor of itself
        if not child.children:
            return child is self
        current = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def iter_descendants(self):
        """Yield every descendant in document order (excluding self)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if not node.is_text:
                stack.extend(reversed(node.children))

    def find_by_id(self, element_id):
        """Find the first element (self included) whose id attribute matches."""
        if self.attributes.get("id") == element_id:
            return self
        for node in self.iter_descendants():
            if node.is_element and node.attributes.get("id") == element_id:
                return node
        return None

    def find_child_by_tag(self, tag_name):
        for child in self.children:
            if child.tag_name == tag_name:
                return child
        return None

    def __repr__(self):
        if self.tag_name == TEXT_NODE:
            return f"Node(#text='{self.text_content[:30]}')"
        if self.tag_name == COMMENT_NODE:
            return f"Node(#comment='{self.text_content[:30]}')"
        return f"Node(<{self.tag_name}>, children={len(self.children)})"

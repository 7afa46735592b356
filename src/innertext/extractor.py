"""innerText entry point."""

from .collector import TextCollector
from .reducer import reduce_items


class InnerText:
    """Compute the rendered text of a Node subtree.

    Holds the options shared by every call; instances carry no per-call
    state and can be reused (or shared between threads).
    """

    __slots__ = ("collector", "debug")

    def __init__(self, *, debug=False):
        self.debug = bool(debug)
        self.collector = TextCollector(debug=self.debug)

    def inner_text(self, node):
        items = self.collector.collect(node, outer=True, pre=False)
        return reduce_items(items)

    __call__ = inner_text


def inner_text(node, *, debug=False):
    """Return the innerText of ``node`` as a browser would render it.

    Only ``\\n`` is used for line breaks. Never raises for a well-formed Node tree.
    """
    return InnerText(debug=debug).inner_text(node)

"""Rendering classification tables

Static element tables used by the inner text algorithm to decide which
elements are rendered and which ones stack vertically. All sets are frozen
and shared; nothing in the package mutates them.

Usage:
    from innertext.constants import BLOCK_LEVEL_ELEMENTS, NON_RENDERED_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/dom.html#the-innertext-idl-attribute
    - https://html.spec.whatwg.org/multipage/rendering.html#hidden-elements
    - https://developer.mozilla.org/en-US/docs/Web/HTML/Block-level_elements
"""

# Elements with display: none in the default rendering stylesheet
NON_RENDERED_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "datalist",
        "head",
        "link",
        "meta",
        "noembed",
        "noframes",
        "param",
        "rp",
        "script",
        "source",
        "style",
        "template",
        "track",
        "title",
    },
)

# A <form> directly inside these is hidden by the table rendering rules
FORM_HIDING_PARENTS = frozenset({"table", "thead", "tbody", "tfoot", "tr"})

BLOCK_LEVEL_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "dialog",
        "dd",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    },
)

# Elements whose contents keep their white-space (white-space: pre and friends)
WHITESPACE_PRESERVING_ELEMENTS = frozenset({"listing", "plaintext", "pre", "xmp", "textarea"})

# Required line break counts
BLOCK_LINE_BREAKS = 1
PARAGRAPH_LINE_BREAKS = 2

# Pseudo tag names for non-element nodes
TEXT_NODE = "#text"
COMMENT_NODE = "#comment"
DOCUMENT_NODE = "#document"
FRAGMENT_NODE = "#document-fragment"
ROOT_NODES = frozenset({DOCUMENT_NODE, FRAGMENT_NODE})

ZERO_WIDTH_SPACE = "\u200b"

NAMESPACE_PREFIXES = {
    "http://www.w3.org/1999/xhtml": None,
    "http://www.w3.org/2000/svg": "svg",
    "http://www.w3.org/1998/Math/MathML": "math",
}

# https://infra.spec.whatwg.org/#ascii-whitespace
ASCII_WHITESPACE = " \t\n\f\r"

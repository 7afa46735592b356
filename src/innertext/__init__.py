from .collector import TextCollector, collect, merge_text_runs
from .extractor import InnerText, inner_text
from .items import BLOCK_END, BLOCK_START, BlockEnd, BlockStart, PreservedText, RequiredBreak, format_items
from .node import Node
from .reducer import reduce_items
from .rendering import is_being_rendered, is_block_level
from .serialize import to_test_format
from .treebuilder import from_etree, parse_fragment, parse_html
from .whitespace import normalize_whitespace

__all__ = [
    "BLOCK_END",
    "BLOCK_START",
    "BlockEnd",
    "BlockStart",
    "InnerText",
    "Node",
    "PreservedText",
    "RequiredBreak",
    "TextCollector",
    "collect",
    "format_items",
    "from_etree",
    "inner_text",
    "is_being_rendered",
    "is_block_level",
    "merge_text_runs",
    "normalize_whitespace",
    "parse_fragment",
    "parse_html",
    "reduce_items",
    "to_test_format",
]

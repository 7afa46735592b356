"""Command line interface: print the inner text of an HTML document."""

from __future__ import annotations

import argparse
import sys

from .extractor import InnerText
from .serialize import to_test_format
from .treebuilder import parse_fragment, parse_html
from .utils import get_body


def parse_args(argv: list[str] | None = None) -> dict:
    parser = argparse.ArgumentParser(
        prog="innertext",
        description="Print the rendered text (innerText) of an HTML document or element.",
    )
    parser.add_argument("file", nargs="?", help="HTML file to read (default: stdin)")
    parser.add_argument("--id", dest="element_id", help="Only print the element with this id attribute")
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Parse the input as a fragment (contents of a <div>) instead of a full document",
    )
    parser.add_argument("--tree", action="store_true", help="Print the parsed tree in html5lib test format first")
    parser.add_argument("--debug", action="store_true", help="Trace the collected items per block")
    args = parser.parse_args(argv)

    return {
        "file": args.file,
        "element_id": args.element_id,
        "fragment": args.fragment,
        "tree": args.tree,
        "debug": args.debug,
    }


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)

    try:
        markup = _read_input(config["file"])
    except OSError as exc:
        print(f"innertext: cannot read {config['file']}: {exc.strerror}", file=sys.stderr)
        return 1

    root = parse_fragment(markup) if config["fragment"] else parse_html(markup)
    if config["tree"]:
        print(to_test_format(root))

    if config["element_id"]:
        target = root.find_by_id(config["element_id"])
        if target is None:
            print(f"innertext: no element with id {config['element_id']!r}", file=sys.stderr)
            return 1
    elif config["fragment"]:
        target = root
    else:
        target = get_body(root) or root

    print(InnerText(debug=config["debug"]).inner_text(target))
    return 0

"""Turn collected items into the final inner text string.

See steps 3 to 6 of
https://html.spec.whatwg.org/multipage/dom.html#the-innertext-idl-attribute
"""

from .items import RequiredBreak


def reduce_items(items):
    # Block markers carry no text and are transparent to break runs
    results = [item for item in items if isinstance(item, RequiredBreak) or (isinstance(item, str) and item)]

    # Leading and trailing required breaks have nothing to separate
    start = 0
    while start < len(results) and isinstance(results[start], RequiredBreak):
        start += 1
    end = len(results)
    while end > start and isinstance(results[end - 1], RequiredBreak):
        end -= 1

    parts = []
    breaks = 0
    for item in results[start:end]:
        if isinstance(item, RequiredBreak):
            # Adjacent breaks collapse to the largest count, they never add up
            breaks = max(breaks, item.count)
            continue
        if breaks:
            parts.append("\n" * breaks)
            breaks = 0
        parts.append(item)
    return "".join(parts)

from __future__ import annotations

import re

from html_prep.tags import FILL_ATTRS, FILTER_ATTRS

__all__ = ['ATTR', 'END_TAG', 'START_TAG', 'parse_attributes']

START_TAG = re.compile(
    r'^<([-A-Za-z0-9_]+)'
    r'((?:\s+[a-zA-Z0-9_:][-a-zA-Z0-9_:.]*(?:\s*=\s*(?:(?:"[^"]*")|(?:\'[^\']*\')|[^>\s]+))?)*)'
    r'\s*(/?)>'
)
"""Opening tag at the start of the scanned text.

Groups: 1 = tag name, 2 = raw attribute text (possibly empty), 3 = self-close marker (`/` or empty).
"""

END_TAG = re.compile(r'^</([-A-Za-z0-9_]+)[^>]*>')
"""Closing tag at the start of the scanned text. Group 1 = tag name."""

ATTR = re.compile(
    r'([a-zA-Z0-9_:][-a-zA-Z0-9_:.]*)'
    r'(?:\s*=\s*(?:(?:"((?:\\.|[^"])*)")|(?:\'((?:\\.|[^\'])*)\')|([^>\s]+)))?'
)
"""Single attribute assignment, meant for `finditer` over the raw attribute text of `START_TAG`.

Groups: 1 = name, 2 = double-quoted value, 3 = single-quoted value, 4 = bare value. Value groups that did not
take part in the match are `None`.
"""


def parse_attributes(raw: str, *, drop_filtered: bool = False) -> list[tuple[str, str]]:
    """Read the attributes out of the raw attribute text captured by `START_TAG`.

    A valueless boolean attribute (see `FILL_ATTRS`) gets its own name as the value, any other valueless
    attribute gets an empty string.

    Args:
        raw: Attribute text, i.e. group 2 of a `START_TAG` match.
        drop_filtered: Skip the attributes listed in `FILTER_ATTRS`.

    Returns:
        Name and value pairs in document order.
    """
    attributes: list[tuple[str, str]] = []

    for match in ATTR.finditer(raw):
        name = match.group(1)
        if drop_filtered and name in FILTER_ATTRS:
            continue

        value = next((group for group in match.groups()[1:] if group is not None), None)
        if value is None:
            value = name if name in FILL_ATTRS else ''

        attributes.append((name, value))

    return attributes

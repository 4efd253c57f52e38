from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from html_prep.tags import BLOCK

__all__ = [
    'BLOCK_TAG_PATTERN',
    'LinefeedInsertion',
    'add_root_div',
    'extract_body_content',
    'first_text_wrap_inline_tag',
    'replace_br',
    'replace_escape_symbol',
    'replace_webp_pic',
    'start_with_block_tag',
    'start_with_html_element',
    'start_with_html_element_insert_linefeed',
    'trim_html',
]

# Attribute text is skipped as a run of unquoted characters or whole quoted segments, so a quoted `>`
# such as in <body onclick="alert('>')"> does not end the tag.
_BODY = re.compile(
    r'<body(?:\s+(?:[^>"\']|"[^"]*"|\'[^\']*\')*)?>\s*([\s\S]*?)\s*</body\s*>',
    re.IGNORECASE | re.MULTILINE,
)

# Any character but a line terminator, what `.` matches in JavaScript
_LINE_CHAR = r'[^\n\r\u2028\u2029]'

_HTML_COMMENT = re.compile(r'<!--.*?-->', re.DOTALL)
# Line-bounded, a `/*` in text such as a glob must not reach a `*/` further down
_BLOCK_COMMENT = re.compile(rf'/\*{_LINE_CHAR}*?\*/')
_SCRIPT = re.compile(r'<script[^>]*>[\s\S]*?</script>', re.IGNORECASE)
_STYLE = re.compile(r'<style[^>]*>[\s\S]*?</style>', re.IGNORECASE)

# Each line is handled on its own and only its last <br> is split.
_BR = re.compile(rf'({_LINE_CHAR}*)<br\s*/?>({_LINE_CHAR}*)', re.IGNORECASE)

_LEADING_ELEMENT = re.compile(r'^<\w+(\s+\w+="[^"]*"|\s+\w+=\'[^\']*\'|\s+[^\s>]+)*\s*>')
_FIRST_TAG_AND_TEXT = re.compile(r'(<[^>]+>)([^<]*)')
_FIRST_TEXT_NODE = re.compile(r'<[^>]*>([^<]+)')

BLOCK_TAG_PATTERN = re.compile(
    r'^\s*<\s*({})\b[^>]*>'.format('|'.join(re.escape(tag) for tag in sorted(BLOCK))),
    re.IGNORECASE,
)
"""Block-level opening tag after optional leading whitespace."""

# The path may not run past a suffix inserted earlier, so rewriting twice changes nothing
_WEBP_CANDIDATE = re.compile(
    rf'(http)(s)?://(img|static)((?:(?!_\.webp){_LINE_CHAR})*?)\.(png|jpg|gif|jpeg|bmp)(?!_.webp)',
    re.IGNORECASE,
)
_WEBP_SUFFIX = '_.webp'


@dataclass(frozen=True)
class LinefeedInsertion:
    """Result of `start_with_html_element_insert_linefeed`."""

    start_with_html: bool
    """Whether the input starts with an opening tag."""

    html: str
    """The input, with a line feed after its first tag when `start_with_html` is set."""


def extract_body_content(html: Any) -> Any:
    """Extract the content of the `<body>` element.

    Input that is not a complete document (no body tag), or whose body is blank, is returned unchanged.

    Args:
        html: HTML string, possibly a whole document.

    Returns:
        The trimmed body content, or the original input.
    """
    if not html or not isinstance(html, str):
        return html or ''

    match = _BODY.search(html)
    if match is not None:
        content = match.group(1).strip()
        return content or html

    return html


def trim_html(html: Any) -> Any:
    """Remove HTML comments, `/* */` comments, and `<script>` and `<style>` elements with their content.

    Every construct is removed up to its nearest closing delimiter. A removal can join the remaining text into a new
    construct, so the passes repeat until nothing is left to remove. Whitespace elsewhere is left alone.
    """
    if not html or not isinstance(html, str):
        return html or ''

    while True:
        trimmed = _STYLE.sub('', _SCRIPT.sub('', _BLOCK_COMMENT.sub('', _HTML_COMMENT.sub('', html))))
        if trimmed == html:
            return trimmed
        html = trimmed


def replace_br(html: Any) -> Any:
    """Turn `<br>` tags into line feeds.

    When the text after a `<br>` starts with an element, the tag is dropped and the line feed goes right
    after that element's opening tag instead.

    Args:
        html: HTML string.

    Returns:
        The converted string, or an empty string for empty input.
    """
    if not html:
        return ''
    if not isinstance(html, str):
        return html

    def _replace(match: re.Match[str]) -> str:
        before, after = match.group(1), match.group(2)
        insertion = start_with_html_element_insert_linefeed(after)
        if insertion.start_with_html:
            return before + insertion.html
        return f'{before}\n{after}'

    return _BR.sub(_replace, html)


def start_with_html_element_insert_linefeed(html: str = '') -> LinefeedInsertion:
    """Insert a line feed between the leading opening tag and the text following it.

    Only the first tag is touched. Input that does not start with an element is returned as is.
    """
    starts_with_element = start_with_html_element(html)
    if starts_with_element:
        html = _FIRST_TAG_AND_TEXT.sub(r'\1\n\2', html, count=1)

    return LinefeedInsertion(start_with_html=starts_with_element, html=html)


def replace_escape_symbol(html: Any) -> Any:
    """Double every tab character."""
    if not html or not isinstance(html, str):
        return html or ''

    return html.replace('\t', '\t\t')


def add_root_div(html: Any) -> Any:
    """Wrap the fragment in a root `<div>`, empty input is returned unchanged."""
    if not html:
        return html

    return f'<div>{html}</div>'


def start_with_html_element(html: Any) -> bool:
    """Check whether the string starts with an opening tag, ignoring line feeds.

    The tag name is not checked against any list of known elements.
    """
    if not isinstance(html, str):
        return False

    return _LEADING_ELEMENT.match(html.replace('\n', '')) is not None


def first_text_wrap_inline_tag(html: Any) -> Any:
    """Wrap the first character of the first text node in a `<span>`.

    The first text node is the first run of characters other than `<` right after a complete tag. Everything from
    there to the end of the string is trimmed before wrapping. Input without such a text node is returned unchanged.

    Args:
        html: HTML string.

    Returns:
        The markup up to the text node, followed by `<span>` with the first character and the rest of the text.
    """
    if not html or not isinstance(html, str):
        return html

    match = _FIRST_TEXT_NODE.search(html)
    if match is None:
        return html

    text_start = match.start(1)
    text = html[text_start:].strip()

    return f'{html[:text_start]}<span>{text[:1]}</span>{text[1:]}'


def start_with_block_tag(value: Any) -> bool:
    """Check whether the string starts (after optional whitespace) with a block-level opening tag."""
    if not isinstance(value, str):
        return False

    return BLOCK_TAG_PATTERN.match(value) is not None


def replace_webp_pic(img_url: Any) -> Any:
    """Point image URLs served from `img` and `static` hosts to their WebP variant.

    Every matching URL in the string that is not already suffixed gets `_.webp` appended, so applying the function
    twice changes nothing.

    Args:
        img_url: A URL, or any text containing image URLs.

    Returns:
        The rewritten string. Empty and non-string input is returned unchanged.
    """
    if not img_url or not isinstance(img_url, str):
        return img_url

    return _WEBP_CANDIDATE.sub(lambda match: match.group(0) + _WEBP_SUFFIX, img_url)

from importlib import metadata

from ._service_locator import service_locator
from .configuration import Configuration
from .errors import InputTooLargeError, ServiceConflictError
from .patterns import ATTR, END_TAG, START_TAG, parse_attributes
from .pipeline import HtmlPreprocessor
from .tags import BLOCK, CLOSE_SELF, EMPTY, FILL_ATTRS, FILTER_ATTRS, INLINE, SPECIAL, make_map
from .transforms import (
    LinefeedInsertion,
    add_root_div,
    extract_body_content,
    first_text_wrap_inline_tag,
    replace_br,
    replace_escape_symbol,
    replace_webp_pic,
    start_with_block_tag,
    start_with_html_element,
    start_with_html_element_insert_linefeed,
    trim_html,
)

__version__ = metadata.version('html-prep')

__all__ = [
    'ATTR',
    'BLOCK',
    'CLOSE_SELF',
    'EMPTY',
    'END_TAG',
    'FILL_ATTRS',
    'FILTER_ATTRS',
    'INLINE',
    'SPECIAL',
    'START_TAG',
    'Configuration',
    'HtmlPreprocessor',
    'InputTooLargeError',
    'LinefeedInsertion',
    'ServiceConflictError',
    'add_root_div',
    'extract_body_content',
    'first_text_wrap_inline_tag',
    'make_map',
    'parse_attributes',
    'replace_br',
    'replace_escape_symbol',
    'replace_webp_pic',
    'service_locator',
    'start_with_block_tag',
    'start_with_html_element',
    'start_with_html_element_insert_linefeed',
    'trim_html',
]

from __future__ import annotations

import logging

import pytest

from html_prep import service_locator
from html_prep.configuration import Configuration
from html_prep.errors import InputTooLargeError
from html_prep.pipeline import HtmlPreprocessor


def test_default_steps() -> None:
    preprocessor = HtmlPreprocessor(Configuration())
    assert preprocessor.step_names == ['extract_body', 'trim_noise', 'replace_line_breaks', 'wrap_root']


def test_all_steps_in_order() -> None:
    configuration = Configuration(double_tabs=True, webp_images=True)
    assert HtmlPreprocessor(configuration).step_names == [
        'extract_body',
        'trim_noise',
        'replace_line_breaks',
        'double_tabs',
        'webp_images',
        'wrap_root',
    ]


def test_process_document() -> None:
    preprocessor = HtmlPreprocessor(Configuration())
    assert preprocessor.process('<html><body><!--c-->a<br>b</body></html>') == '<div>a\nb</div>'


def test_process_pasted_fragment() -> None:
    html = (
        '<html><head><style>p{margin:0}</style></head>'
        '<body class="paste"><p>one<br><b>two</b></p><script>track()</script></body></html>'
    )
    preprocessor = HtmlPreprocessor(Configuration())
    assert preprocessor.process(html) == '<div><p>one<b>\ntwo</b></p></div>'


def test_process_with_optional_steps() -> None:
    configuration = Configuration(double_tabs=True, webp_images=True, wrap_root=False)
    preprocessor = HtmlPreprocessor(configuration)
    html = '<img src="https://img.example.com/a.png">\tcaption'
    assert preprocessor.process(html) == '<img src="https://img.example.com/a.png_.webp">\t\tcaption'


def test_process_with_every_step_disabled() -> None:
    configuration = Configuration(extract_body=False, trim_noise=False, replace_line_breaks=False, wrap_root=False)
    preprocessor = HtmlPreprocessor(configuration)
    html = '<body><!--c-->a<br>b</body>'
    assert preprocessor.step_names == []
    assert preprocessor.process(html) == html


def test_process_empty_input() -> None:
    assert HtmlPreprocessor(Configuration()).process('') == ''


def test_input_limit() -> None:
    preprocessor = HtmlPreprocessor(Configuration(max_input_length=5))
    assert preprocessor.process('abcde') == '<div>abcde</div>'

    with pytest.raises(InputTooLargeError, match='exceeds the limit of 5 characters') as exc_info:
        preprocessor.process('<p>123456</p>')

    assert exc_info.value.length == 13
    assert exc_info.value.limit == 5


def test_uses_global_configuration() -> None:
    service_locator.set_configuration(Configuration(wrap_root=False))
    assert HtmlPreprocessor().process('a<br>b') == 'a\nb'


def test_steps_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger='html_prep'):
        HtmlPreprocessor(Configuration()).process('a<br>b')

    assert 'Step replace_line_breaks done.' in caplog.messages
    assert 'Step wrap_root done.' in caplog.messages
    record = next(record for record in caplog.records if record.getMessage() == 'Step wrap_root done.')
    assert record.length == len('<div>a\nb</div>')

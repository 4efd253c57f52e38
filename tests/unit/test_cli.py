from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

import html_prep._cli
from html_prep import __version__

if TYPE_CHECKING:
    from pathlib import Path

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(html_prep._cli.cli, ['--version'])
    assert result.exit_code == 0
    assert result.output == f'{__version__}\n'


def test_process_file(tmp_path: Path) -> None:
    source = tmp_path / 'paste.html'
    source.write_text('<html><body><p>a<br>b</p><!-- tracking --></body></html>', encoding='utf-8')

    result = runner.invoke(html_prep._cli.cli, ['process', str(source)])
    assert result.exit_code == 0
    assert result.output == '<div><p>a\nb</p></div>\n'


def test_process_standard_input() -> None:
    result = runner.invoke(html_prep._cli.cli, ['process', '--no-root'], input='a<br>b')
    assert result.exit_code == 0
    assert result.output == 'a\nb\n'


def test_process_with_flags() -> None:
    result = runner.invoke(
        html_prep._cli.cli,
        ['process', '-', '--webp', '--double-tabs', '--no-root', '--no-br'],
        input='<img src="https://img.example.com/a.png">\t<br>',
    )
    assert result.exit_code == 0
    assert result.output == '<img src="https://img.example.com/a.png_.webp">\t\t<br>\n'


def test_process_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HTML_PREP_WRAP_ROOT', 'false')

    result = runner.invoke(html_prep._cli.cli, ['process'], input='x')
    assert result.exit_code == 0
    assert result.output == 'x\n'


def test_process_input_too_large() -> None:
    result = runner.invoke(html_prep._cli.cli, ['process', '--max-length', '3'], input='abcdef')
    assert result.exit_code == 1
    assert 'exceeds the limit of 3 characters' in result.output


def test_process_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(html_prep._cli.cli, ['process', str(tmp_path / 'missing.html')])
    assert result.exit_code == 1
    assert 'Unable to read' in result.output


def test_process_file_not_in_utf8(tmp_path: Path) -> None:
    source = tmp_path / 'latin1.html'
    source.write_bytes(b'<p>caf\xe9</p>')

    result = runner.invoke(html_prep._cli.cli, ['process', str(source)])
    assert result.exit_code == 1
    assert 'Unable to read' in result.output


@pytest.mark.parametrize('log_level', ['debug', 'WARNING', 'Critical'], ids=['lowercase', 'uppercase', 'mixed_case'])
def test_process_log_level_is_case_insensitive(log_level: str) -> None:
    result = runner.invoke(html_prep._cli.cli, ['process', '--no-root', '--log-level', log_level], input='a<br>b')
    assert result.exit_code == 0
    assert 'a\nb' in result.output


def test_process_rejects_unknown_log_level() -> None:
    result = runner.invoke(html_prep._cli.cli, ['process', '--log-level', 'verbose'], input='x')
    assert result.exit_code == 2


@pytest.mark.parametrize(
    ('tag_name', 'expected'),
    [
        ('div', 'div: block\n'),
        ('IMG', 'img: empty, inline\n'),
        ('li', 'li: block, close-self\n'),
        ('script', 'script: block, inline, special\n'),
        ('blink', 'blink: unclassified\n'),
    ],
    ids=['block', 'uppercase_void', 'close_self', 'special', 'unknown'],
)
def test_classify(tag_name: str, expected: str) -> None:
    result = runner.invoke(html_prep._cli.cli, ['classify', tag_name])
    assert result.exit_code == 0
    assert result.output == expected

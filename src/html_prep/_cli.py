# ruff: noqa: FBT002
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Any, get_args

try:
    import typer
    from click import Choice
except ModuleNotFoundError as exc:
    raise ImportError(
        "Missing required dependencies for the html-prep CLI. It looks like you're running 'html-prep' "
        "without the CLI extra. Try installing 'html-prep[cli]' instead."
    ) from exc

from html_prep._log_config import configure_logger
from html_prep._service_locator import service_locator
from html_prep._types import LogLevel
from html_prep.configuration import Configuration
from html_prep.errors import InputTooLargeError
from html_prep.pipeline import HtmlPreprocessor
from html_prep.tags import is_block, is_close_self, is_empty, is_inline, is_special

cli = typer.Typer(no_args_is_help=True)

_LOG_LEVEL_CHOICES = list(get_args(LogLevel))


@cli.callback(invoke_without_command=True)
def callback(
    version: Annotated[
        bool,
        typer.Option(
            '-V',
            '--version',
            help='Print html-prep version',
        ),
    ] = False,
) -> None:
    """html-prep cleans up pasted HTML before it is imported into a rich-text editor."""
    if version:
        from html_prep import __version__  # noqa: PLC0415

        typer.echo(__version__)


@cli.command()
def process(
    path: Path | None = typer.Argument(
        default=None,
        show_default=False,
        help='The HTML file to process. Standard input is read when not given or when it is "-".',
    ),
    *,
    extract_body: bool | None = typer.Option(
        None,
        '--body/--no-body',
        show_default=False,
        help='Reduce whole documents to the content of their <body> element.',
    ),
    trim_noise: bool | None = typer.Option(
        None,
        '--trim/--no-trim',
        show_default=False,
        help='Remove comments, <script> and <style> elements.',
    ),
    replace_line_breaks: bool | None = typer.Option(
        None,
        '--br/--no-br',
        show_default=False,
        help='Turn <br> tags into line feeds.',
    ),
    double_tabs: bool | None = typer.Option(
        None,
        '--double-tabs/--no-double-tabs',
        show_default=False,
        help='Double every tab character.',
    ),
    webp_images: bool | None = typer.Option(
        None,
        '--webp/--no-webp',
        show_default=False,
        help='Point image URLs on img/static hosts to their WebP variant.',
    ),
    wrap_root: bool | None = typer.Option(
        None,
        '--root/--no-root',
        show_default=False,
        help='Wrap the result in a root <div>.',
    ),
    max_input_length: int | None = typer.Option(
        None,
        '--max-length',
        show_default=False,
        min=1,
        help='Reject input longer than this many characters.',
    ),
    log_level: str | None = typer.Option(
        None,
        show_default=False,
        click_type=Choice(_LOG_LEVEL_CHOICES, case_sensitive=False),
        help='The logging level.',
    ),
) -> None:
    """Preprocess an HTML file and print the result. Options not given fall back to HTML_PREP_* variables."""
    options: dict[str, Any] = {
        'extract_body': extract_body,
        'trim_noise': trim_noise,
        'replace_line_breaks': replace_line_breaks,
        'double_tabs': double_tabs,
        'webp_images': webp_images,
        'wrap_root': wrap_root,
        'max_input_length': max_input_length,
        'log_level': log_level,
    }
    # Keyed by alias, flags take precedence over HTML_PREP_* variables
    configuration = Configuration(
        **{f'html_prep_{name}': value for name, value in options.items() if value is not None}
    )
    service_locator.set_configuration(configuration)
    configure_logger(logging.getLogger('html_prep'), remove_old_handlers=True)

    if path is None or str(path) == '-':
        html = sys.stdin.read()
    else:
        try:
            html = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f'Unable to read {path}: {exc!s}', err=True)
            sys.exit(1)

    try:
        result = HtmlPreprocessor(configuration).process(html)
    except InputTooLargeError as exc:
        typer.echo(f'Preprocessing failed: {exc!s}', err=True)
        sys.exit(1)

    typer.echo(result)


@cli.command()
def classify(
    tag_name: str = typer.Argument(help='The tag name to look up, e.g. "div".'),
) -> None:
    """Print the classification tables the given tag name belongs to."""
    tag_name = tag_name.lower()
    categories = [
        category
        for category, predicate in (
            ('empty', is_empty),
            ('block', is_block),
            ('inline', is_inline),
            ('close-self', is_close_self),
            ('special', is_special),
        )
        if predicate(tag_name)
    ]

    typer.echo(f'{tag_name}: {", ".join(categories) or "unclassified"}')

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from html_prep._service_locator import service_locator
from html_prep.errors import InputTooLargeError
from html_prep.transforms import (
    add_root_div,
    extract_body_content,
    replace_br,
    replace_escape_symbol,
    replace_webp_pic,
    trim_html,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from html_prep.configuration import Configuration

__all__ = ['HtmlPreprocessor']

logger = getLogger(__name__)


class HtmlPreprocessor:
    """Runs the enabled transforms over pasted or imported HTML before it reaches a rich-text parser.

    The steps always run in the same order: body extraction, noise trimming, `<br>` replacement, tab doubling,
    WebP image rewriting and root wrapping. Which of them run is decided by the `Configuration`.

    ### Usage

    ```python
    preprocessor = HtmlPreprocessor(Configuration(webp_images=True))
    fragment = preprocessor.process(pasted_html)
    ```
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        """Create a new instance.

        Args:
            configuration: Settings deciding the enabled steps and the input limit. The global configuration
                from the service locator is used when not provided.
        """
        self._configuration = configuration or service_locator.get_configuration()

        candidates: list[tuple[bool, str, Callable[[str], str]]] = [
            (self._configuration.extract_body, 'extract_body', extract_body_content),
            (self._configuration.trim_noise, 'trim_noise', trim_html),
            (self._configuration.replace_line_breaks, 'replace_line_breaks', replace_br),
            (self._configuration.double_tabs, 'double_tabs', replace_escape_symbol),
            (self._configuration.webp_images, 'webp_images', replace_webp_pic),
            (self._configuration.wrap_root, 'wrap_root', add_root_div),
        ]
        self._steps = [(name, step) for enabled, name, step in candidates if enabled]

    @property
    def step_names(self) -> list[str]:
        """Names of the enabled steps, in execution order."""
        return [name for name, _ in self._steps]

    def process(self, html: str) -> str:
        """Run the enabled steps over the input.

        Args:
            html: The HTML fragment or document.

        Returns:
            The preprocessed HTML, or an empty string for empty input.

        Raises:
            InputTooLargeError: If the input is longer than `Configuration.max_input_length`.
        """
        if not html:
            return ''

        limit = self._configuration.max_input_length
        if limit is not None and len(html) > limit:
            raise InputTooLargeError(len(html), limit)

        for name, step in self._steps:
            html = step(html)
            logger.debug(f'Step {name} done.', extra={'length': len(html)})

        return html

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from html_prep._types import LogLevel

if TYPE_CHECKING:
    from typing_extensions import Self

__all__ = ['Configuration']


class Configuration(BaseSettings):
    """Configuration settings for the html-prep pipeline.

    The string transforms themselves take no configuration. These settings only drive the composed
    `HtmlPreprocessor` and the logging. Default values are provided for all settings, so typically no adjustments
    are necessary.

    Settings can also be configured via environment variables, prefixed with `HTML_PREP_`.
    """

    model_config = SettingsConfigDict(populate_by_name=True)

    log_level: Annotated[
        LogLevel,
        Field(alias='html_prep_log_level'),
        BeforeValidator(lambda value: str(value).upper()),
    ] = 'INFO'
    """The logging level."""

    max_input_length: Annotated[
        int | None,
        Field(alias='html_prep_max_input_length'),
    ] = None
    """The maximum number of characters the pipeline accepts. Longer input is rejected with `InputTooLargeError`.
    No limit is applied when not set."""

    extract_body: Annotated[
        bool,
        Field(alias='html_prep_extract_body'),
    ] = True
    """Whether to reduce whole documents to the content of their `<body>` element."""

    trim_noise: Annotated[
        bool,
        Field(alias='html_prep_trim_noise'),
    ] = True
    """Whether to remove comments, `<script>` and `<style>` elements."""

    replace_line_breaks: Annotated[
        bool,
        Field(alias='html_prep_replace_line_breaks'),
    ] = True
    """Whether to turn `<br>` tags into line feeds."""

    double_tabs: Annotated[
        bool,
        Field(alias='html_prep_double_tabs'),
    ] = False
    """Whether to double every tab character."""

    webp_images: Annotated[
        bool,
        Field(alias='html_prep_webp_images'),
    ] = False
    """Whether to point `img`/`static` host image URLs to their WebP variant."""

    wrap_root: Annotated[
        bool,
        Field(alias='html_prep_wrap_root'),
    ] = True
    """Whether to wrap the result in a root `<div>`."""

    @classmethod
    def get_global_configuration(cls) -> Self:
        """Retrieve the global instance of the configuration.

        Same as `service_locator.get_configuration()`.
        """
        # Import here to avoid circular imports.
        from html_prep import service_locator  # noqa: PLC0415

        config = service_locator.get_configuration()

        if not isinstance(config, cls):
            raise TypeError(f'Requested global configuration object of type {cls}, but {config.__class__} was found')

        return config

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest

from html_prep import service_locator

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def prepare_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset the global state of the package before and after each test.

    Drops any `HTML_PREP_*` environment variables so that the configuration defaults apply, resets the service
    locator and removes the handlers the CLI attaches to the package logger.
    """
    for name in list(os.environ):
        if name.upper().startswith('HTML_PREP_'):
            monkeypatch.delenv(name)

    service_locator._configuration = None

    yield

    service_locator._configuration = None

    package_logger = logging.getLogger('html_prep')
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

from __future__ import annotations

from logging import getLogger

from html_prep.configuration import Configuration
from html_prep.errors import ServiceConflictError

logger = getLogger(__name__)


class ServiceLocator:
    """Service locator holding the configuration shared by the pipeline and the logging setup.

    The configuration is initialized to its default value lazily.
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        self._configuration = configuration

    def get_configuration(self) -> Configuration:
        """Get the configuration."""
        if self._configuration is None:
            logger.debug('No configuration set, implicitly creating and using default Configuration.')
            self._configuration = Configuration()

        return self._configuration

    def set_configuration(self, configuration: Configuration) -> None:
        """Set the configuration.

        Args:
            configuration: The configuration to set.

        Raises:
            ServiceConflictError: If the configuration has already been retrieved before.
        """
        if self._configuration is configuration:
            # Same instance, no need to anything
            return
        if self._configuration is not None:
            raise ServiceConflictError(Configuration, configuration, self._configuration)

        self._configuration = configuration


service_locator = ServiceLocator()

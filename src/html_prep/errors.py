from __future__ import annotations

__all__ = [
    'InputTooLargeError',
    'ServiceConflictError',
]


class ServiceConflictError(Exception):
    """Raised when attempting to reassign a service in the service locator that is already in use."""

    def __init__(self, service: type, new_value: object, existing_value: object) -> None:
        super().__init__(
            f'Service {service.__name__} is already in use. Existing value: {existing_value}, '
            f'attempted new value: {new_value}.'
        )


class InputTooLargeError(Exception):
    """Raised by the preprocessing pipeline when the input is longer than the configured limit.

    The transforms are regex based and some of them can backtrack heavily on adversarial markup, so untrusted
    input should be bounded with `Configuration.max_input_length`.
    """

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f'Input of {length} characters exceeds the limit of {limit} characters.')
        self.length = length
        self.limit = limit

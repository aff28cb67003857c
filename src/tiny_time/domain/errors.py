from __future__ import annotations


class TimeError(ValueError):
    """Base class for validation failures raised by tiny_time."""


class InvalidInstant(TimeError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"The value <{value}> could not be decoded into a valid instant.")


class InvalidTimezone(TimeError):
    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Timezone <{identifier}> is invalid.")

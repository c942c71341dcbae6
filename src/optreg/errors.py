"""Errors raised by the option registry."""

from typing import Any


class OptionError(Exception):
    """Base class for option registry failures."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message

    def __str__(self) -> str:
        return self.message


class DuplicateNameError(OptionError):
    """Raised when registering an option whose name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Option already registered: {name}")


class InvalidDefaultError(OptionError):
    """Raised when an option's default lies outside its own domain."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(name, f"Invalid default for option '{name}': {reason}")
        self.value = value


class UnknownOptionError(OptionError, KeyError):
    """Raised when reading or writing an option that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Unknown option: {name}")


class InvalidValueError(OptionError, ValueError):
    """Raised when a submitted value lies outside the option's domain."""

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(name, f"Invalid value for option '{name}': {reason}")
        self.value = value

"""In-memory registry of typed configuration options.

A plugin builds one registry when it loads, registers its option
definitions in declaration order, and afterwards reads and writes current
values by option name. Every write is checked against the option's domain;
a rejected write leaves the registry untouched.

The registry does no locking. Hosts that share one across threads must
serialise calls themselves.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from .config.models import OptionDefinition
from .errors import (
    DuplicateNameError,
    InvalidDefaultError,
    InvalidValueError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)


class OptionsView(Sequence):
    """Read-only view over registered definitions, in registration order.

    Iteration reads the underlying list on demand, so each pass starts
    fresh and reflects options registered after the view was taken.
    """

    def __init__(self, definitions: list[OptionDefinition]) -> None:
        self._definitions = definitions

    def __getitem__(self, index):
        return self._definitions[index]

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        names = ", ".join(d.name for d in self._definitions)
        return f"OptionsView([{names}])"


class ConfigOptionRegistry:
    """Ordered option definitions plus the current value of each."""

    def __init__(self, definitions: Iterable[OptionDefinition] = ()) -> None:
        self._definitions: list[OptionDefinition] = []
        self._by_name: dict[str, OptionDefinition] = {}
        self._values: dict[str, Any] = {}
        for definition in definitions:
            self.register(definition)

    def register(self, definition: OptionDefinition) -> None:
        """Add an option and set its current value to the default.

        Raises:
            DuplicateNameError: If an option with the same name exists.
            InvalidDefaultError: If the default is outside the option's domain.
        """
        if definition.name in self._by_name:
            raise DuplicateNameError(definition.name)
        error = definition.validate_value(definition.default_value)
        if error is not None:
            raise InvalidDefaultError(definition.name, definition.default_value, error)

        self._definitions.append(definition)
        self._by_name[definition.name] = definition
        self._values[definition.name] = definition.default_value
        logger.debug(f"Registered {definition.kind} option '{definition.name}'")

    def definition(self, name: str) -> OptionDefinition:
        """Return the definition registered under ``name``."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def get(self, name: str) -> Any:
        """Return the current value of an option (its default if never set)."""
        if name not in self._values:
            raise UnknownOptionError(name)
        return self._values[name]

    def set(self, name: str, value: Any) -> None:
        """Replace the current value of an option.

        Raises:
            UnknownOptionError: If no option is registered under ``name``.
            InvalidValueError: If ``value`` is outside the option's domain.
        """
        definition = self.definition(name)
        self._check(definition, value)
        self._values[name] = value
        logger.debug(f"Option '{name}' set to {value!r}")

    def update(self, values: Mapping[str, Any]) -> None:
        """Set several options at once.

        Every entry is checked before any is applied, so either all values
        are stored or none are.
        """
        checked = []
        for name, value in values.items():
            definition = self.definition(name)
            self._check(definition, value)
            checked.append((name, value))

        for name, value in checked:
            self._values[name] = value
        logger.debug(f"Updated {len(checked)} option(s)")

    def reset(self, name: str | None = None) -> None:
        """Restore one option, or every option, to its default."""
        if name is None:
            for definition in self._definitions:
                self._values[definition.name] = definition.default_value
            logger.debug(f"Reset {len(self._definitions)} option(s) to defaults")
            return
        self._values[name] = self.definition(name).default_value
        logger.debug(f"Option '{name}' reset to default")

    def values(self) -> dict[str, Any]:
        """Snapshot of current values in registration order."""
        return {d.name: self._values[d.name] for d in self._definitions}

    def defaults(self) -> dict[str, Any]:
        """Snapshot of default values in registration order."""
        return {d.name: d.default_value for d in self._definitions}

    def _check(self, definition: OptionDefinition, value: Any) -> None:
        error = definition.validate_value(value)
        if error is not None:
            raise InvalidValueError(definition.name, value, error)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return (d.name for d in self._definitions)

    def list(self) -> OptionsView:
        """Registered definitions in registration order, as a read-only view."""
        return OptionsView(self._definitions)

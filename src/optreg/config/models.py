"""Pydantic models for option definitions."""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_serializer,
    field_validator,
)


class OptionBase(BaseModel, ABC):
    """Fields shared by every option kind.

    Definitions are frozen once built. Only the shape of each field is
    checked here; whether ``default_value`` lies in the option's domain is
    decided by the registry at registration time.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    label: str = ""
    description: str = ""
    notes: str = ""  # Shown verbatim, e.g. minimum host version
    display_columns: int = Field(default=1, ge=1)

    @abstractmethod
    def validate_value(self, value: Any) -> str | None:
        """Check a value against this option's domain.

        Returns error message or None if valid.
        """

    def display_value(self, value: Any) -> str:
        """Human-readable rendering of a stored value."""
        return str(value)

    def describe_domain(self) -> str:
        """Short summary of the accepted values."""
        return "any"


class ChoiceOption(OptionBase):
    """A closed set of selectable values, rendered as radios or a select."""

    kind: Literal["choice"] = "choice"
    # stored value -> label, read-only once built
    choices: dict[Any, str] = Field(default_factory=dict, validate_default=True)
    default_value: Any

    @field_validator("choices", mode="after")
    @classmethod
    def _freeze_choices(cls, choices: dict[Any, str]) -> MappingProxyType:
        return MappingProxyType(dict(choices))

    @field_serializer("choices")
    def _dump_choices(self, choices: MappingProxyType) -> dict[Any, str]:
        return dict(choices)

    def validate_value(self, value: Any) -> str | None:
        if not self.choices:
            return f"Option '{self.name}' declares no choices"
        # Type-strict membership: True must not match 1, "1" must not match 1
        for key in self.choices:
            if type(key) is type(value) and key == value:
                return None
        options = ", ".join(repr(k) for k in self.choices)
        return f"{value!r} is not one of the declared choices. Options: {options}"

    def display_value(self, value: Any) -> str:
        for key, label in self.choices.items():
            if type(key) is type(value) and key == value:
                return label
        return str(value)

    def describe_domain(self) -> str:
        return ", ".join(f"{key}={label}" for key, label in self.choices.items())


class TextOption(OptionBase):
    """Free-form text."""

    kind: Literal["text"] = "text"
    max_length: int | None = Field(default=None, ge=0)
    default_value: Any = ""

    def validate_value(self, value: Any) -> str | None:
        if not isinstance(value, str):
            return f"expected text, got {type(value).__name__}"
        if self.max_length is not None and len(value) > self.max_length:
            return f"text longer than {self.max_length} characters"
        return None

    def describe_domain(self) -> str:
        if self.max_length is None:
            return "text"
        return f"text (max {self.max_length})"


class IntegerOption(OptionBase):
    """Whole number, optionally bounded on either side (inclusive)."""

    kind: Literal["integer"] = "integer"
    minimum: int | None = None
    maximum: int | None = None
    default_value: Any

    def validate_value(self, value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return f"expected integer, got {type(value).__name__}"
        if self.minimum is not None and value < self.minimum:
            return f"{value} is below minimum {self.minimum}"
        if self.maximum is not None and value > self.maximum:
            return f"{value} is above maximum {self.maximum}"
        return None

    def describe_domain(self) -> str:
        low = "" if self.minimum is None else str(self.minimum)
        high = "" if self.maximum is None else str(self.maximum)
        if not low and not high:
            return "integer"
        return f"integer [{low}..{high}]"


class BooleanOption(OptionBase):
    """On/off switch."""

    kind: Literal["boolean"] = "boolean"
    default_value: Any = False

    def validate_value(self, value: Any) -> str | None:
        if not isinstance(value, bool):
            return f"expected true or false, got {type(value).__name__}"
        return None

    def describe_domain(self) -> str:
        return "true, false"


OptionDefinition = Annotated[
    ChoiceOption | TextOption | IntegerOption | BooleanOption,
    Field(discriminator="kind"),
]

_definition_adapter = TypeAdapter(OptionDefinition)


def parse_definition(data: dict[str, Any]) -> OptionDefinition:
    """Build the option variant named by ``data["kind"]``.

    Raises:
        pydantic.ValidationError: If the kind is unknown or a field is malformed.
    """
    return _definition_adapter.validate_python(data)

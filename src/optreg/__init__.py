"""optreg - typed configuration option registry."""

__version__ = "0.1.0"

from .config.models import (  # noqa: E402
    BooleanOption,
    ChoiceOption,
    IntegerOption,
    OptionDefinition,
    TextOption,
    parse_definition,
)
from .errors import (  # noqa: E402
    DuplicateNameError,
    InvalidDefaultError,
    InvalidValueError,
    OptionError,
    UnknownOptionError,
)
from .registry import ConfigOptionRegistry  # noqa: E402

__all__ = [
    "BooleanOption",
    "ChoiceOption",
    "ConfigOptionRegistry",
    "DuplicateNameError",
    "IntegerOption",
    "InvalidDefaultError",
    "InvalidValueError",
    "OptionDefinition",
    "OptionError",
    "TextOption",
    "UnknownOptionError",
    "parse_definition",
]

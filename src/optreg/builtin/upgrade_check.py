"""Options for the upgrade-check plugin.

The plugin can look for upgrades every time a superuser logs in, or only
when an administrator opens Setup > Upgrades. The login hook itself and the
host version gate live in the host; this module only declares the option.
"""

from ..config.models import ChoiceOption
from ..registry import ConfigOptionRegistry

USE_LOGIN_HOOK = ChoiceOption(
    name="useLoginHook",
    label="Check for upgrades on superuser login?",
    description=(
        'If "No" is selected, then upgrades will only be checked manually '
        "when you click to Setup > Upgrades."
    ),
    notes="Automatic upgrade check requires ProcessWire 3.0.123 or newer.",
    choices={1: "Yes", 0: "No"},
    display_columns=1,
    default_value=0,
)


def build_upgrade_check_registry() -> ConfigOptionRegistry:
    """Create a registry holding the upgrade-check options at their defaults."""
    return ConfigOptionRegistry([USE_LOGIN_HOOK])


def login_check_enabled(registry: ConfigOptionRegistry) -> bool:
    """Whether the host should check for upgrades on superuser login."""
    return registry.get(USE_LOGIN_HOOK.name) == 1

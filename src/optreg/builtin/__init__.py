"""Option declarations shipped with optreg."""

from .upgrade_check import USE_LOGIN_HOOK, build_upgrade_check_registry

__all__ = ["USE_LOGIN_HOOK", "build_upgrade_check_registry"]

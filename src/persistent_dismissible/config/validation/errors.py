"""Errors raised while loading or validating ``DismissibleSettings``.

Settings come from ``DISMISSIBLE_*`` environment variables, an optional
``.env`` file and explicit overrides.  The offending name (env var or field)
is carried in ``detail`` so it shows up in structured logs.
"""
from persistent_dismissible.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or describe an unusable setup."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default was not supplied by any source."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"No value for '{setting_name}' in the environment, .env file or overrides",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot drive a dismissible store or service."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}'={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]

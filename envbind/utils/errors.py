from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by binding errors."""
    INVALID_CONFIG_VARIABLE = "invalid_config_variable"
    CONVERSION_ERROR = "conversion_error"


class ConfigError(Exception):
    """Base error for recoverable binding failures."""
    code: ErrorCode = ErrorCode.INVALID_CONFIG_VARIABLE


class InvalidConfigVariable(ConfigError):
    """Destination is not a writable dataclass instance."""
    code = ErrorCode.INVALID_CONFIG_VARIABLE

    def __init__(self, message: str = "Invalid config variable") -> None:
        super().__init__(message)


class ConversionError(ConfigError, ValueError):
    """Raw value is not a valid base-10 integer literal."""
    code = ErrorCode.CONVERSION_ERROR

    def __init__(self, value: str, reason: str = "invalid syntax", *, key: str | None = None) -> None:
        self.value = value
        self.reason = reason
        self.key = key
        msg = f"parsing {value!r}: {reason}"
        if key:
            msg = f"{key}: {msg}"
        super().__init__(msg)

"""
motion_control - Exceptions
===========================
Exception hierarchy shared by the whole package.
"""


class MotionControlError(Exception):
    """Base exception for every motion_control error"""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} | Details: {self.details}"
        return f"[{self.code}] {self.message}"


# ============================================================
# Validation Errors
# ============================================================

class ValidationError(MotionControlError):
    """Rejected call arguments"""
    pass


class InvalidArgumentError(ValidationError):
    """Argument has the wrong type or is out of range"""

    def __init__(self, argument: str, value, reason: str = None):
        msg = f"Invalid value for argument '{argument}': {value!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(
            msg,
            code="INVALID_ARGUMENT",
            details={"argument": argument, "value": value, "reason": reason}
        )


class InvalidInputError(ValidationError):
    """Inputs outside the domain of a formula"""

    def __init__(self, reason: str, details: dict = None):
        super().__init__(
            f"Invalid input: {reason}",
            code="INVALID_INPUT",
            details=details or {}
        )


# ============================================================
# Configuration Errors
# ============================================================

class ConfigError(MotionControlError):
    """Missing or malformed configuration"""

    def __init__(self, reason: str, path: str = None):
        super().__init__(
            f"Configuration error: {reason}",
            code="CONFIG_ERROR",
            details={"path": path} if path else None
        )

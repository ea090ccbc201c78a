"""Domain-layer error definitions."""

# ============================================================================
#                           General toolbox errors
# ============================================================================


class ToolboxError(Exception):
    """Base class for toolbox errors."""


class InvalidConfigurationError(ToolboxError):
    """Raised when a required configuration value is empty at the point of use."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Configuration value '{key}' is required but empty.")
        self.key = key


# ============================================================================
#                           Datetime errors
# ============================================================================


class ParseError(ToolboxError):
    """Raised when a value is not a recognizable datetime."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Could not parse {raw!r} as a datetime.")
        self.raw = raw


class FormatError(ToolboxError):
    """Raised when a datetime format pattern is empty or invalid."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid datetime format {pattern!r}: {reason}.")
        self.pattern = pattern
        self.reason = reason


# ============================================================================
#                           Token errors
# ============================================================================


class RandomnessUnavailableError(ToolboxError):
    """Raised when the secure entropy source cannot provide random bytes."""

    def __init__(self, detail: str = "") -> None:
        message = "Secure randomness is unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(f"{message}.")
        self.detail = detail


class UnsupportedAlgorithmError(ToolboxError):
    """Raised when a token is requested with an unknown or variable-length hash."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unsupported HMAC algorithm '{algorithm}'.")
        self.algorithm = algorithm

"""
Exception classes for FormSpec schema derivation and configuration loading.

Only unrepresentable input is raised. Duplicate names, dangling conditional
references and capability violations are reported as ValidationIssue data
instead, so callers can batch-report everything found in one pass.
"""


class FormSpecError(Exception):
    """Base exception for all FormSpec errors."""

    pass


class EmptyEnumOptionsError(FormSpecError):
    """Raised when a static enum field declares no options."""

    def __init__(self, field_name: str, path: str | None = None):
        """
        Initialize the exception.

        Params:
            field_name: Name of the enum field without options
            path: Diagnostic path of the field, if known
        """
        self.field_name = field_name
        self.path = path
        location = f" at {path}" if path and path != field_name else ""
        super().__init__(
            f"Enum field '{field_name}'{location} has no options; "
            "a static enum needs at least one option"
        )


class ConfigError(FormSpecError):
    """Base exception for constraint configuration problems."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: The resolved path that was looked up
        """
        self.path = path
        super().__init__(f"Config file not found at {path}")


class InvalidConfigError(ConfigError):
    """Raised when configuration content has the wrong shape or values."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: Where the configuration came from (file path or "<string>")
            reason: What is wrong with it
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid config {source}: {reason}")


class FormLoadError(FormSpecError):
    """Raised when a form specification cannot be loaded from a file."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: Path of the file being loaded
            reason: Why loading failed
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load form from '{source}': {reason}")

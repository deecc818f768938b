"""Exception hierarchy for suitegen."""


class SuiteGenError(Exception):
    """Base exception for all suitegen errors."""


class PermanentError(SuiteGenError):
    """Errors that reproduce on every run until the input or code changes."""


class ConfigurationError(PermanentError):
    """Invalid or missing configuration."""


class SchemaError(PermanentError):
    """A renderer was registered with an invalid kind, method or callable."""


class ModelError(PermanentError):
    """A suite or snippet document does not match the expected structure."""


class ProjectLoadError(PermanentError):
    """Failed to read an input document from disk.

    This error occurs when a suite, snippet or environment file is missing
    or does not contain valid JSON.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize ProjectLoadError with the offending path.

        Args:
            path: The file path that could not be loaded.
            reason: Short description of what went wrong.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class TestGeneratorError(PermanentError):
    """Generation of test source failed.

    Command-level failures carry the command coordinates so the editor can
    highlight the offending command. Suite-level failures carry none of them.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        message: str,
        *,
        target: str | None = None,
        method: str | None = None,
        command_id: str | None = None,
        group_id: str | None = None,
        test_id: str | None = None,
    ) -> None:
        """Initialize TestGeneratorError.

        Args:
            message: Human-readable description, including the cause.
            target: Target name of the failing command.
            method: Method name of the failing command.
            command_id: Id of the failing command.
            group_id: Group id of the failing command.
            test_id: Test id of the failing command.
        """
        self.target = target
        self.method = method
        self.command_id = command_id
        self.group_id = group_id
        self.test_id = test_id
        super().__init__(message)

    @property
    def location(self) -> str | None:
        """Return "target.method" for command-level failures."""
        if self.target is None or self.method is None:
            return None
        return f"{self.target}.{self.method}"

"""Tests for suitegen exception hierarchy."""

import pytest

from suitegen.utils.exceptions import (
    ConfigurationError,
    ModelError,
    PermanentError,
    ProjectLoadError,
    SchemaError,
    SuiteGenError,
    TestGeneratorError,
)


class TestExceptionHierarchy:
    """Test the exception class hierarchy."""

    def test_suitegen_error_is_base_exception(self):
        """SuiteGenError should inherit from Exception."""
        assert issubclass(SuiteGenError, Exception)

    def test_permanent_error_inherits_from_base(self):
        """PermanentError should inherit from SuiteGenError."""
        assert issubclass(PermanentError, SuiteGenError)

    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            ModelError,
            ProjectLoadError,
            SchemaError,
            TestGeneratorError,
        ],
    )
    def test_errors_inherit_from_permanent(self, error_class):
        """Every concrete error is permanent: retrying cannot help."""
        assert issubclass(error_class, PermanentError)
        assert issubclass(error_class, SuiteGenError)


class TestProjectLoadError:
    """Tests for ProjectLoadError."""

    def test_message_and_attributes(self):
        """ProjectLoadError should keep the path and reason."""
        error = ProjectLoadError("suite.json", "file not found")
        assert error.path == "suite.json"
        assert error.reason == "file not found"
        assert str(error) == "Failed to load suite.json: file not found"


class TestTestGeneratorError:
    """Tests for TestGeneratorError."""

    def test_command_context(self):
        """Command-level errors carry their coordinates."""
        error = TestGeneratorError(
            "boom in BTN.click",
            target="BTN",
            method="click",
            command_id="c1",
            group_id="g1",
            test_id="t1",
        )
        assert str(error) == "boom in BTN.click"
        assert error.location == "BTN.click"
        assert (error.group_id, error.test_id, error.command_id) == ("g1", "t1", "c1")

    def test_suite_level_error_has_no_location(self):
        """Suite-level errors carry no command context."""
        error = TestGeneratorError("template broke")
        assert error.location is None
        assert error.command_id is None

    def test_catch_as_base(self):
        """TestGeneratorError should be catchable as SuiteGenError."""
        with pytest.raises(SuiteGenError):
            raise TestGeneratorError("boom")

"""Utilities module for suitegen.

Configuration lives in ``suitegen.utils.config`` and is imported from there
directly, since it depends on the core model.
"""

from .exceptions import (
    ConfigurationError,
    ModelError,
    PermanentError,
    ProjectLoadError,
    SchemaError,
    SuiteGenError,
    TestGeneratorError,
)

__all__ = [
    "ConfigurationError",
    "ModelError",
    "PermanentError",
    "ProjectLoadError",
    "SchemaError",
    "SuiteGenError",
    "TestGeneratorError",
]

"""Core module for suitegen code generation.

This module exports the suite model, the template schema registry and the
generator that compiles one into source text with the other.
"""

from suitegen.core.generator import TestGenerator
from suitegen.core.instrumentation import (
    COMMAND_ID_COMMENT,
    CommandMarker,
    parse_command_marker,
)
from suitegen.core.models import (
    Command,
    Fragment,
    GenerationOptions,
    GenerationResult,
    Group,
    Runner,
    SnippetLibrary,
    Suite,
    Target,
    TargetKind,
    Test,
)
from suitegen.core.schema import (
    Composer,
    SuiteContext,
    TemplateContext,
    TemplateSchema,
)
from suitegen.core.targets import TargetResolver

__all__ = [
    "COMMAND_ID_COMMENT",
    "Command",
    "CommandMarker",
    "Composer",
    "Fragment",
    "GenerationOptions",
    "GenerationResult",
    "Group",
    "Runner",
    "SnippetLibrary",
    "Suite",
    "SuiteContext",
    "Target",
    "TargetKind",
    "TargetResolver",
    "TemplateContext",
    "TemplateSchema",
    "Test",
    "TestGenerator",
    "parse_command_marker",
]

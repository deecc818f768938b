"""Built-in template schemas."""

from suitegen.schemas.jest import JestComposer, build_jest_schema

__all__ = [
    "JestComposer",
    "build_jest_schema",
]

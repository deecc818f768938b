"""suitegen - compile authored browser test suites into test source."""

__version__ = "0.1.0"

"""Services module for reading project documents."""

from suitegen.services.loader import load_json, load_snippets, load_suite

__all__ = [
    "load_json",
    "load_snippets",
    "load_suite",
]

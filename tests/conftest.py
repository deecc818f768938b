"""Shared pytest fixtures for suitegen tests.

This module provides common fixtures used across unit and integration tests.
Fixtures include a stub schema with predictable output, suite and snippet
documents in the editor's JSON layout, and the models built from them.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from suitegen.core.models import SnippetLibrary, Suite, Target, TargetKind
from suitegen.core.schema import SuiteContext, TemplateContext, TemplateSchema


class StubComposer:
    """Composer producing compact, easy-to-assert output."""

    def __init__(self) -> None:
        self.suite_contexts: list[SuiteContext] = []

    def query(self, target: Target) -> str:
        return f"Q[{target.name}={target.selector}]"

    def test(self, title: str, body: str) -> str:
        return f"T[{title}]\n{body}"

    def group(self, title: str, body: str) -> str:
        return f"G[{title}]\n{body}"

    def suite(self, context: SuiteContext) -> str:
        self.suite_contexts.append(context)
        return f"S[{context.title}]\n{context.targets}\n{context.body}"


def build_stub_schema() -> TemplateSchema:
    """Schema with a handful of predictable renderers."""
    schema = TemplateSchema(composer=StubComposer())

    @schema.template(TargetKind.PAGE, "goto")
    def goto(ctx: TemplateContext) -> str:
        return f"goto {ctx.params['url']}"

    @schema.template(TargetKind.PAGE, "setViewport")
    def set_viewport(ctx: TemplateContext) -> str:
        return f"viewport {ctx.params.get('width')}x{ctx.params.get('height')}"

    @schema.template(TargetKind.ELEMENT, "click")
    def click(ctx: TemplateContext) -> str:
        return f"click {ctx.target} {ctx.selector}"

    @schema.template(TargetKind.ELEMENT, "type")
    def type_(ctx: TemplateContext) -> str:
        return f"type {ctx.target} {ctx.params['value']}"

    return schema


@pytest.fixture
def stub_schema() -> TemplateSchema:
    """Fresh stub schema for each test.

    Returns:
        TemplateSchema: Schema whose composer records every SuiteContext.
    """
    return build_stub_schema()


@pytest.fixture
def suite_data() -> dict[str, Any]:
    """Suite document in the editor's JSON layout.

    One group "g1" with two tests: "t1" (goto + click) and "t2" (type).
    """
    return {
        "title": "Login suite",
        "targets": {
            "EMAIL": "#email",
            "SUBMIT": "#submit",
        },
        "groups": {
            "g1": {
                "title": "Login",
                "tests": {
                    "t1": {
                        "title": "opens the form",
                        "commands": {
                            "c1": {
                                "target": "page",
                                "method": "goto",
                                "params": {"url": "http://localhost"},
                            },
                            "c2": {"target": "SUBMIT", "method": "click"},
                        },
                    },
                    "t2": {
                        "title": "fills the email",
                        "commands": {
                            "c3": {
                                "target": "EMAIL",
                                "method": "type",
                                "params": {"value": "me@example.com"},
                            },
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def snippets_data() -> dict[str, Any]:
    """Snippet library document using the grouped layout.

    Snippet test "login" clicks SUBMIT and types into PASSWORD.
    """
    return {
        "targets": {
            "SUBMIT": "#snippet-submit",
            "PASSWORD": "#password",
        },
        "groups": {
            "snippets": {
                "title": "Snippets",
                "tests": {
                    "login": {
                        "title": "Log in",
                        "commands": {
                            "s1": {"target": "SUBMIT", "method": "click"},
                            "s2": {
                                "target": "PASSWORD",
                                "method": "type",
                                "params": {"value": "secret"},
                            },
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def suite(suite_data: dict[str, Any]) -> Suite:
    """Suite model built from suite_data."""
    return Suite.from_dict(suite_data)


@pytest.fixture
def snippets(snippets_data: dict[str, Any]) -> SnippetLibrary:
    """Snippet library built from snippets_data."""
    return SnippetLibrary.from_dict(snippets_data)


@pytest.fixture
def project_files(
    tmp_path: Path, suite_data: dict[str, Any], snippets_data: dict[str, Any]
) -> dict[str, Path]:
    """Suite, snippet and env documents written to a temporary project.

    Returns:
        Mapping of "suite", "snippets" and "env" to file paths.
    """
    files = {
        "suite": tmp_path / "suite.json",
        "snippets": tmp_path / "snippets.json",
        "env": tmp_path / "env.json",
    }
    files["suite"].write_text(json.dumps(suite_data), encoding="utf-8")
    files["snippets"].write_text(json.dumps(snippets_data), encoding="utf-8")
    files["env"].write_text(json.dumps({"BASE_URL": "http://localhost"}))
    return files

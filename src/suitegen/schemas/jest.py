"""Built-in schema emitting Jest test files driven by a Puppeteer session.

Targets are declared as async accessors (``const SUBMIT = async () => ...``)
so element renderers only refer to targets by name. Renderers raise
``KeyError`` or ``ValueError`` on missing or malformed parameters; the
generator reports those against the failing command.
"""

import json
from collections.abc import Mapping
from typing import Any

from suitegen.core.models import Target, TargetKind
from suitegen.core.schema import SuiteContext, TemplateContext, TemplateSchema

INDENT = "      "
DEFAULT_NAVIGATION_TIMEOUT = 30000  # ms
JEST_TIMEOUT = 50000  # ms


def js(value: Any) -> str:
    """Serialize a value as a JavaScript literal."""
    return json.dumps(value, ensure_ascii=False)


def _int_param(params: Mapping[str, Any], name: str) -> int:
    value = params[name]
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"parameter '{name}' must be an integer, got {value!r}"
        ) from e


def _assertion_value(ctx: TemplateContext) -> Any:
    if not ctx.assertion or "value" not in ctx.assertion:
        raise ValueError(f"{ctx.method} requires an assertion value")
    return ctx.assertion["value"]


def _identifier(name: str) -> str:
    if not name.isidentifier():
        raise ValueError(f"target name {name!r} is not a valid JavaScript identifier")
    return name


def _element(ctx: TemplateContext) -> str:
    return f"( await {_identifier(ctx.target)}() )"


class JestComposer:
    """Composition templates for a Jest test file."""

    def query(self, target: Target) -> str:
        return (
            f"const {_identifier(target.name)} = async () => "
            f"await bs.query( {js(target.selector)}, {js(target.name)} );"
        )

    def test(self, title: str, body: str) -> str:
        return f"    test( {js(title)}, async () => {{\n{body}\n    }});\n"

    def group(self, title: str, body: str) -> str:
        return f"  describe( {js(title)}, async () => {{\n{body}\n  }});\n"

    def suite(self, context: SuiteContext) -> str:
        options = context.options
        setup = {
            "incognito": options.incognito,
            "ignoreHTTPSErrors": options.ignore_https_errors,
        }
        return (
            f"/**\n"
            f" * {context.title}\n"
            f" * Generated by suitegen for the {context.runner.value} runner.\n"
            f" */\n"
            f'const BrowserSession = require( "./lib/BrowserSession" ),\n'
            f"      bs = new BrowserSession( {js(context.output_directory)} );\n"
            f"\n"
            f"const ENV = {js(dict(context.env))},\n"
            f"      OPTIONS = {js(options.to_dict())},\n"
            f"      PROJECT_DIRECTORY = {js(context.project_directory)},\n"
            f"      INTERACTIVE_IDS = {js(list(context.interactive_ids))};\n"
            f"\n"
            f"{context.targets}\n"
            f"\n"
            f"jest.setTimeout( {JEST_TIMEOUT} );\n"
            f"\n"
            f"describe( {js(context.title)}, async () => {{\n"
            f"  beforeAll(async () => {{\n"
            f"    await bs.setup( {js(setup)} );\n"
            f"  }});\n"
            f"\n"
            f"  afterAll(async () => {{\n"
            f"    await bs.teardown();\n"
            f"  }});\n"
            f"\n"
            f"{context.body}\n"
            f"}});\n"
        )


def build_jest_schema() -> TemplateSchema:
    """Create a schema with the built-in page and element renderers."""
    schema = TemplateSchema(composer=JestComposer())
    page, element = TargetKind.PAGE, TargetKind.ELEMENT

    @schema.template(page, "goto")
    def goto(ctx: TemplateContext) -> str:
        timeout = ctx.params.get("timeout", DEFAULT_NAVIGATION_TIMEOUT)
        return (
            f"{INDENT}await bs.page.goto( {js(ctx.params['url'])}, "
            f"{{ timeout: {int(timeout)} }} );"
        )

    @schema.template(page, "setViewport")
    def set_viewport(ctx: TemplateContext) -> str:
        width = _int_param(ctx.params, "width")
        height = _int_param(ctx.params, "height")
        return (
            f"{INDENT}await bs.page.setViewport("
            f"{{ width: {width}, height: {height} }});"
        )

    @schema.template(page, "screenshot")
    def screenshot(ctx: TemplateContext) -> str:
        name = ctx.params.get("name") or ctx.command_id
        return f"{INDENT}await bs.screenshot( {js(name)} );"

    @schema.template(page, "waitForTimeout")
    def wait_for_timeout(ctx: TemplateContext) -> str:
        value = _int_param(ctx.params, "value")
        return f"{INDENT}await bs.page.waitForTimeout( {value} );"

    @schema.template(page, "reload")
    def reload(ctx: TemplateContext) -> str:
        return f"{INDENT}await bs.page.reload();"

    @schema.template(page, "assertTitle")
    def assert_title(ctx: TemplateContext) -> str:
        value = _assertion_value(ctx)
        return f"{INDENT}expect( await bs.page.title() ).toBe( {js(value)} );"

    @schema.template(element, "click")
    def click(ctx: TemplateContext) -> str:
        return f"{INDENT}await {_element(ctx)}.click();"

    @schema.template(element, "type")
    def type_(ctx: TemplateContext) -> str:
        return f"{INDENT}await {_element(ctx)}.type( {js(ctx.params['value'])} );"

    @schema.template(element, "focus")
    def focus(ctx: TemplateContext) -> str:
        return f"{INDENT}await {_element(ctx)}.focus();"

    @schema.template(element, "hover")
    def hover(ctx: TemplateContext) -> str:
        return f"{INDENT}await {_element(ctx)}.hover();"

    @schema.template(element, "assertVisible")
    def assert_visible(ctx: TemplateContext) -> str:
        return (
            f"{INDENT}expect( await bs.isVisible( {_element(ctx)} ) )"
            f".toBe( true ); // {ctx.test_id}:{ctx.command_id}"
        )

    @schema.template(element, "assertText")
    def assert_text(ctx: TemplateContext) -> str:
        value = _assertion_value(ctx)
        return (
            f"{INDENT}expect( await bs.getText( {_element(ctx)} ) )"
            f".toContain( {js(value)} );"
        )

    return schema

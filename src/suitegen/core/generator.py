"""Test source generator.

Compiles a Suite into test source text by walking groups, tests and commands
in their authored order. Each command is rendered by the schema renderer for
its (target kind, method) pair, then optionally instrumented with tracing and
interactive-mode waits. Reference commands inline a snippet test in place.

Failures are attributable: any error while rendering a command surfaces as a
TestGeneratorError naming the command's ``target.method``. Generation is
all-or-nothing, so no partial output is ever returned.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from suitegen.core.instrumentation import (
    DEFAULT_INTERACTIVE_ILLEGAL_METHODS,
    command_marker,
    interactive_template,
    snippet_fence,
    trace_template,
    variables_template,
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
    Test,
)
from suitegen.core.schema import SuiteContext, TemplateContext, TemplateSchema
from suitegen.core.targets import TargetResolver
from suitegen.utils.exceptions import TestGeneratorError

logger = logging.getLogger(__name__)


class TestGenerator:
    """Generates test source for one suite.

    A generator holds read-only inputs only. Interactive ids are returned
    with every rendered Fragment, so concurrent generate() calls on the same
    instance share no state.

    Example:
        generator = TestGenerator(suite, build_jest_schema(), snippets=library)
        result = generator.generate()
        print(result.source)
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        suite: Suite,
        schema: TemplateSchema,
        snippets: SnippetLibrary | None = None,
        runner: Runner = Runner.EXPORT,
        project_directory: str = "",
        output_directory: str = "",
        env: Mapping[str, Any] | None = None,
        options: GenerationOptions | None = None,
        interactive_illegal_methods: Iterable[str] = (
            DEFAULT_INTERACTIVE_ILLEGAL_METHODS
        ),
    ) -> None:
        """Initialize the generator.

        Args:
            suite: Suite to generate.
            schema: Renderers and composer for the target runtime.
            snippets: Library of snippet tests and their targets.
            runner: EMBEDDED adds command id markers for the live UI.
            project_directory: Project directory, forwarded to the composer.
            output_directory: Artifact directory, forwarded to the composer.
            env: Environment record, forwarded to the composer.
            options: Generation options.
            interactive_illegal_methods: Methods never followed by an
                interactive wait.
        """
        self.suite = suite
        self.schema = schema
        self.snippets = snippets or SnippetLibrary()
        self.runner = runner
        self.project_directory = project_directory
        self.output_directory = output_directory
        self.env = dict(env or {})
        self.options = options or GenerationOptions()
        self.interactive_illegal_methods = frozenset(interactive_illegal_methods)
        self.resolver = TargetResolver(suite.targets, self.snippets.targets)
        self.selectors = self.resolver.selector_table()

    def render_reference(
        self, ref: str | None, variables: Mapping[str, Any] | None = None
    ) -> Fragment:
        """Inline the snippet test ``ref`` as a fenced block.

        A ref that does not resolve to a snippet test renders as an empty
        fragment. Reference commands inside the snippet are not expanded.
        """
        test = self.snippets.get_test(ref)
        if test is None:
            logger.debug(f"Snippet '{ref}' not found, skipping reference")
            return Fragment()

        rendered = []
        for command in test.enabled_commands():
            if command.is_ref:
                logger.debug(
                    f"Nested reference '{command.ref}' in snippet '{ref}' skipped"
                )
                continue
            rendered.append(self.render_command(command))
        chunk = Fragment.join(rendered)
        env = variables_template(variables) if variables else ""
        return Fragment(
            text=snippet_fence(test.title, chunk.text, env),
            interactive_ids=chunk.interactive_ids,
        )

    def render_command(self, command: Command) -> Fragment:
        """Render one command, or an empty fragment if it yields no code.

        Raises:
            TestGeneratorError: If the renderer or instrumentation fails.
        """
        if command.disabled:
            return Fragment()
        if command.is_ref:
            return self.render_reference(command.ref, command.variables)

        try:
            kind = command.target_kind
            if not self.schema.supports(kind, command.method):
                logger.debug(
                    f"No template for {kind.value}.{command.method}, "
                    f"skipping command {command.id}"
                )
                return Fragment()

            chunk = self.schema.render(
                kind,
                command.method,
                TemplateContext(
                    target=command.target,
                    assertion=command.assertion,
                    params=command.params,
                    selector=self.selectors.get(command.target),
                    method=command.method,
                    command_id=command.id,
                    test_id=command.test_id,
                ),
            )
            if self.options.trace:
                chunk += trace_template(command)

            interactive_ids: tuple[str, ...] = ()
            if (
                self.options.interactive_mode
                and command.method not in self.interactive_illegal_methods
            ):
                chunk += interactive_template(command)
                interactive_ids = (command.id,)

            if self.runner is Runner.EMBEDDED:
                chunk = f"{command_marker(command)}\n{chunk}"
            return Fragment(text=chunk, interactive_ids=interactive_ids)
        except Exception as e:
            logger.warning(
                f"Failed to render command {command.id} "
                f"(group {command.group_id}, test {command.test_id}) "
                f"{command.target}.{command.method}: {e}"
            )
            raise TestGeneratorError(
                f"{e} in {command.target}.{command.method}",
                target=command.target,
                method=command.method,
                command_id=command.id,
                group_id=command.group_id,
                test_id=command.test_id,
            ) from e

    def render_test(self, test: Test) -> Fragment:
        """Render a test block, or nothing if it has no enabled commands."""
        commands = test.enabled_commands()
        if not commands:
            return Fragment()
        body = Fragment.join(self.render_command(c) for c in commands)
        return Fragment(
            text=self.schema.composer.test(f"{test.title} {{{test.id}}}", body.text),
            interactive_ids=body.interactive_ids,
        )

    def render_group(self, group: Group) -> Fragment:
        """Render a group block, or nothing if none of its tests render."""
        tests = [t for t in map(self.render_test, group.enabled_tests()) if t]
        if not tests:
            return Fragment()
        body = Fragment.join(tests)
        return Fragment(
            text=self.schema.composer.group(group.title, body.text),
            interactive_ids=body.interactive_ids,
        )

    def generate(self) -> GenerationResult:
        """Generate the source of the whole suite.

        Raises:
            TestGeneratorError: If any stage of generation fails.
        """
        try:
            rendered = map(self.render_group, self.suite.enabled_groups())
            groups = [g for g in rendered if g]
            body = Fragment.join(groups)
            source = self.schema.composer.suite(
                SuiteContext(
                    title=self.suite.title,
                    targets=self.resolver.render_declarations(self.schema.composer),
                    suite=self.suite,
                    runner=self.runner,
                    env=self.env,
                    options=self.options,
                    project_directory=self.project_directory,
                    output_directory=self.output_directory,
                    interactive_ids=body.interactive_ids,
                    body=body.text,
                )
            )
        except TestGeneratorError as e:
            logger.warning(f"Generation of '{self.suite.title}' failed: {e}")
            raise
        except Exception as e:
            logger.warning(f"Generation of '{self.suite.title}' failed: {e}")
            raise TestGeneratorError(str(e)) from e

        logger.info(
            f"Generated '{self.suite.title}': {len(groups)} group(s), "
            f"{len(body.interactive_ids)} interactive stop(s)"
        )
        return GenerationResult(source=source, interactive_ids=body.interactive_ids)

"""Template schema: the pluggable renderers behind code generation.

A schema maps ``(TargetKind, method)`` pairs to pure renderer functions and
holds a Composer that assembles rendered commands into tests, groups and a
whole suite. Renderers are validated when they are registered, so a lookup at
generation time only has to ask whether the pair is supported.

Example:
    schema = TemplateSchema(composer=JestComposer())

    @schema.template(TargetKind.ELEMENT, "click")
    def click(ctx: TemplateContext) -> str:
        return f"await ( await {ctx.target}() ).click();"
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from suitegen.core.models import GenerationOptions, Runner, Suite, Target, TargetKind
from suitegen.utils.exceptions import SchemaError


@dataclass(frozen=True)
class TemplateContext:
    """Input handed to a per-method renderer.

    Attributes:
        target: Target name of the command ("page" for page commands).
        assertion: Assertion descriptor of the command, if any.
        params: Method parameters.
        selector: Selector currently bound to the target, if any.
        method: Method name.
        command_id: Id of the command, for debug-identifiable output.
        test_id: Id of the owning test, for debug-identifiable output.
    """

    target: str
    assertion: Mapping[str, Any] | None
    params: Mapping[str, Any]
    selector: str | None
    method: str
    command_id: str
    test_id: str


@dataclass(frozen=True)
class SuiteContext:
    """Input handed to the suite composer.

    Attributes:
        title: Suite title.
        targets: Rendered target-declaration block.
        suite: The full suite record.
        runner: Consumer of the generated source.
        env: Environment record, forwarded verbatim.
        options: Generation options, forwarded verbatim.
        project_directory: Project directory of the suite.
        output_directory: Directory the runtime writes artifacts to.
        interactive_ids: Commands followed by an interactive wait.
        body: Joined rendering of all enabled groups.
    """

    title: str
    targets: str
    suite: Suite
    runner: Runner
    env: Mapping[str, Any]
    options: GenerationOptions
    project_directory: str
    output_directory: str
    interactive_ids: tuple[str, ...]
    body: str


Renderer = Callable[[TemplateContext], str]


class Composer(Protocol):
    """Composition renderers for the structural levels of a suite."""

    def query(self, target: Target) -> str:
        """Render the declaration of one target."""
        ...

    def test(self, title: str, body: str) -> str:
        """Render a test block around its commands."""
        ...

    def group(self, title: str, body: str) -> str:
        """Render a group block around its tests."""
        ...

    def suite(self, context: SuiteContext) -> str:
        """Render the whole suite."""
        ...


class TemplateSchema:
    """Registry of per-method renderers plus a Composer."""

    def __init__(self, composer: Composer) -> None:
        """Initialize an empty schema.

        Args:
            composer: Composition renderers for tests, groups and the suite.
        """
        self.composer = composer
        self._renderers: dict[TargetKind, dict[str, Renderer]] = {
            kind: {} for kind in TargetKind
        }

    def register(
        self,
        kind: TargetKind | str,
        method: str,
        renderer: Renderer,
        replace: bool = False,
    ) -> None:
        """Register a renderer for a (kind, method) pair.

        Args:
            kind: Target kind, as enum or its string value.
            method: Method name, a valid identifier.
            renderer: Pure function turning a TemplateContext into source.
            replace: Allow overriding an existing registration.

        Raises:
            SchemaError: If kind, method or renderer are invalid, or the
                pair is already registered and replace is False.
        """
        kind = self._coerce_kind(kind)
        if not isinstance(method, str) or not method.isidentifier():
            raise SchemaError(f"Invalid method name {method!r} for {kind.value}")
        if not callable(renderer):
            raise SchemaError(f"Renderer for {kind.value}.{method} is not callable")
        if method in self._renderers[kind] and not replace:
            raise SchemaError(f"Renderer for {kind.value}.{method} already registered")
        self._renderers[kind][method] = renderer

    def template(
        self, kind: TargetKind | str, method: str, replace: bool = False
    ) -> Callable[[Renderer], Renderer]:
        """Decorator form of register()."""

        def decorator(renderer: Renderer) -> Renderer:
            self.register(kind, method, renderer, replace=replace)
            return renderer

        return decorator

    def supports(self, kind: TargetKind, method: str) -> bool:
        """Whether a renderer is registered for the pair."""
        return method in self._renderers[kind]

    def methods(self, kind: TargetKind) -> list[str]:
        """Registered method names for a kind, sorted."""
        return sorted(self._renderers[kind])

    def render(self, kind: TargetKind, method: str, context: TemplateContext) -> str:
        """Render a command with the registered renderer.

        Raises:
            KeyError: If no renderer is registered for the pair.
        """
        return self._renderers[kind][method](context)

    @staticmethod
    def _coerce_kind(kind: TargetKind | str) -> TargetKind:
        if isinstance(kind, TargetKind):
            return kind
        try:
            return TargetKind(kind)
        except ValueError as e:
            valid = ", ".join(k.value for k in TargetKind)
            raise SchemaError(
                f"Unknown target kind {kind!r} (expected one of: {valid})"
            ) from e

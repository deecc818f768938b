"""Data model for authored test suites.

This module defines the immutable inputs of a generation run:
- Target, Command, Test, Group and Suite for the authored hierarchy
- SnippetLibrary for reusable tests inlined by reference
- GenerationOptions and Runner for generation settings
- Fragment and GenerationResult for rendered output

Every input type can be built from the editor's JSON layout via ``from_dict``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from suitegen.utils.exceptions import ModelError

PAGE_TARGET = "page"
SNIPPETS_GROUP_ID = "snippets"


class TargetKind(Enum):
    """Kind of object a command acts upon."""

    PAGE = "page"
    ELEMENT = "element"


class Runner(Enum):
    """Consumer of the generated source.

    EMBEDDED is the driver runtime bundled with the editor; its output carries
    command id markers so execution traces map back to authored commands.
    EXPORT is a stand-alone export with no live UI to highlight.
    """

    EMBEDDED = "embedded"
    EXPORT = "export"


def _require(data: Mapping[str, Any], key: str, entity: str) -> Any:
    if key not in data:
        raise ModelError(f"{entity} is missing required field '{key}'")
    return data[key]


def _as_mapping(value: Any, entity: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ModelError(f"{entity} must be an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Target:
    """A named logical page element bound to a selector.

    Attributes:
        name: Name the commands refer to (e.g. "SUBMIT_BTN").
        selector: CSS selector locating the element.
        id: Editor id of the binding; defaults to the name.
    """

    name: str
    selector: str
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", self.name)

    @property
    def is_declarable(self) -> bool:
        """Whether both name and selector are non-empty."""
        return bool(self.name) and bool(self.selector)

    @classmethod
    def from_dict(cls, key: str, value: Any) -> Target:
        """Build a Target from either ``name: selector`` or an editor record."""
        if isinstance(value, str) or value is None:
            return cls(name=key, selector=value or "")
        record = _as_mapping(value, f"target '{key}'")
        return cls(
            name=record.get("target") or "",
            selector=record.get("selector") or "",
            id=record.get("id") or key,
        )


def parse_targets(data: Any) -> dict[str, Target]:
    """Parse a target mapping, keyed by target id."""
    targets = {}
    for key, value in _as_mapping(data, "targets").items():
        target = Target.from_dict(key, value)
        targets[target.id] = target
    return targets


@dataclass(frozen=True)
class Command:
    """The atomic, renderable unit of a test.

    Attributes:
        id: Command id, unique within its test.
        group_id: Id of the owning group.
        test_id: Id of the owning test.
        target: Target name, or "page" for page-level commands.
        method: Method name looked up in the template schema.
        params: Method parameters.
        assertion: Optional assertion descriptor, may name a second target.
        variables: Variable overrides applied before an inlined snippet.
        disabled: Excluded from output when true.
        is_ref: Whether this command inlines a snippet test.
        ref: Id of the snippet test to inline.
    """

    id: str
    group_id: str = ""
    test_id: str = ""
    target: str = ""
    method: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    assertion: Mapping[str, Any] | None = None
    variables: Mapping[str, Any] | None = None
    disabled: bool = False
    is_ref: bool = False
    ref: str | None = None

    @property
    def target_kind(self) -> TargetKind:
        """PAGE when the target literally names the page, else ELEMENT."""
        return TargetKind.PAGE if self.target == PAGE_TARGET else TargetKind.ELEMENT

    @property
    def secondary_target(self) -> str | None:
        """Target named by the assertion, if any."""
        if not self.assertion:
            return None
        return self.assertion.get("target") or None

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], group_id: str = "", test_id: str = ""
    ) -> Command:
        data = _as_mapping(data, "command")
        assertion = data.get("assert")
        variables = data.get("variables")
        return cls(
            id=str(_require(data, "id", "command")),
            group_id=data.get("groupId") or group_id,
            test_id=data.get("testId") or test_id,
            target=data.get("target") or "",
            method=data.get("method") or "",
            params=dict(_as_mapping(data.get("params"), "command params")),
            assertion=dict(assertion) if isinstance(assertion, Mapping) else None,
            variables=dict(variables) if isinstance(variables, Mapping) else None,
            disabled=bool(data.get("disabled", False)),
            is_ref=bool(data.get("isRef", False)),
            ref=data.get("ref"),
        )


@dataclass(frozen=True)
class Test:
    """An ordered sequence of commands."""

    __test__ = False  # not a pytest test class

    id: str
    title: str
    commands: Mapping[str, Command] = field(default_factory=dict)
    disabled: bool = False

    def enabled_commands(self) -> list[Command]:
        """Commands not marked disabled, in original order."""
        return [c for c in self.commands.values() if not c.disabled]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], group_id: str = "") -> Test:
        data = _as_mapping(data, "test")
        test_id = str(_require(data, "id", "test"))
        commands = {}
        for key, value in _as_mapping(data.get("commands"), "test commands").items():
            record = {"id": key, **_as_mapping(value, "command")}
            command = Command.from_dict(record, group_id=group_id, test_id=test_id)
            if command.id in commands:
                raise ModelError(
                    f"Duplicate command id '{command.id}' in test '{test_id}'"
                )
            commands[command.id] = command
        return cls(
            id=test_id,
            title=data.get("title") or "",
            commands=commands,
            disabled=bool(data.get("disabled", False)),
        )


def _parse_tests(data: Any, group_id: str) -> dict[str, Test]:
    return {
        key: Test.from_dict(
            {"id": key, **_as_mapping(value, "test")}, group_id=group_id
        )
        for key, value in _as_mapping(data, "tests").items()
    }


@dataclass(frozen=True)
class Group:
    """A titled collection of tests."""

    id: str
    title: str
    tests: Mapping[str, Test] = field(default_factory=dict)
    disabled: bool = False

    def enabled_tests(self) -> list[Test]:
        """Tests not marked disabled, in original order."""
        return [t for t in self.tests.values() if not t.disabled]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Group:
        data = _as_mapping(data, "group")
        group_id = str(_require(data, "id", "group"))
        return cls(
            id=group_id,
            title=data.get("title") or "",
            tests=_parse_tests(data.get("tests"), group_id),
            disabled=bool(data.get("disabled", False)),
        )


@dataclass(frozen=True)
class Suite:
    """Top-level authored test specification."""

    title: str
    targets: Mapping[str, Target] = field(default_factory=dict)
    groups: Mapping[str, Group] = field(default_factory=dict)

    def enabled_groups(self) -> list[Group]:
        """Groups not marked disabled, in original order."""
        return [g for g in self.groups.values() if not g.disabled]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Suite:
        data = _as_mapping(data, "suite")
        groups = {
            key: Group.from_dict({"id": key, **_as_mapping(value, "group")})
            for key, value in _as_mapping(data.get("groups"), "suite groups").items()
        }
        return cls(
            title=data.get("title") or "",
            targets=parse_targets(data.get("targets")),
            groups=groups,
        )


@dataclass(frozen=True)
class SnippetLibrary:
    """Reusable tests inlined by reference, plus the targets they use."""

    targets: Mapping[str, Target] = field(default_factory=dict)
    tests: Mapping[str, Test] = field(default_factory=dict)

    def get_test(self, ref: str | None) -> Test | None:
        """Return the snippet test with the given id, or None."""
        if ref is None:
            return None
        return self.tests.get(ref)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SnippetLibrary:
        """Build a library from ``{targets, tests}`` or the grouped layout.

        The grouped layout keeps snippet tests under
        ``groups[SNIPPETS_GROUP_ID].tests``.
        """
        data = _as_mapping(data, "snippets")
        if "tests" in data:
            tests = _parse_tests(data["tests"], SNIPPETS_GROUP_ID)
        else:
            groups = _as_mapping(data.get("groups"), "snippet groups")
            group = _as_mapping(groups.get(SNIPPETS_GROUP_ID), "snippet group")
            tests = _parse_tests(group.get("tests"), SNIPPETS_GROUP_ID)
        return cls(targets=parse_targets(data.get("targets")), tests=tests)


@dataclass(frozen=True)
class GenerationOptions:
    """Options of one generation run.

    Attributes:
        trace: Emit tracing instrumentation after every command.
        interactive_mode: Emit synchronisation waits between commands.
        update_snapshot: Forwarded to the suite composer as given.
        incognito: Forwarded to the suite composer as given.
        ignore_https_errors: Forwarded to the suite composer as given.
        extra: Unrecognised keys, forwarded verbatim.
    """

    trace: bool = False
    interactive_mode: bool = False
    update_snapshot: Any = False
    incognito: Any = False
    ignore_https_errors: Any = False
    extra: Mapping[str, Any] = field(default_factory=dict)

    _KEYS = {
        "trace": "trace",
        "interactiveMode": "interactive_mode",
        "updateSnapshot": "update_snapshot",
        "incognito": "incognito",
        "ignoreHTTPSErrors": "ignore_https_errors",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> GenerationOptions:
        data = _as_mapping(data, "options")
        known = {cls._KEYS[k]: v for k, v in data.items() if k in cls._KEYS}
        for flag in ("trace", "interactive_mode"):
            if flag in known:
                known[flag] = bool(known[flag])
        extra = {k: v for k, v in data.items() if k not in cls._KEYS}
        return cls(**known, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Editor-style record of the options, extra keys included."""
        record = {key: getattr(self, attr) for key, attr in self._KEYS.items()}
        record.update(self.extra)
        return record


@dataclass(frozen=True)
class Fragment:
    """Rendered source text plus the commands it paused on in interactive mode."""

    text: str = ""
    interactive_ids: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.text)

    @classmethod
    def join(cls, fragments: Iterable[Fragment], separator: str = "\n") -> Fragment:
        """Concatenate fragments in order."""
        fragments = list(fragments)
        return cls(
            text=separator.join(f.text for f in fragments),
            interactive_ids=tuple(i for f in fragments for i in f.interactive_ids),
        )


@dataclass(frozen=True)
class GenerationResult:
    """Output of one generation run.

    Attributes:
        source: Generated source text.
        interactive_ids: Ids of commands followed by an interactive wait,
            in encounter order.
    """

    source: str
    interactive_ids: tuple[str, ...] = ()

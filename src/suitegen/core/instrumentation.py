"""Source templates the generator wraps around rendered commands.

These fragments are emitted into the generated test file regardless of the
schema in use: tracing calls, interactive-mode waits, snippet fences and the
command id markers read back by execution-trace consumers.
"""

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from suitegen.core.models import Command, TargetKind

COMMAND_ID_COMMENT = "// COMMAND_ID: "
INTERACTIVE_TIMEOUT = 900000  # 15 min, in ms
INTERACTIVE_MARKER_ATTR = "data-suitegen-next"
DEFAULT_INTERACTIVE_ILLEGAL_METHODS: tuple[str, ...] = ("setViewport",)

_MARKER_PATTERN = re.compile(
    r"^\s*" + re.escape(COMMAND_ID_COMMENT) + r"([^:\s]*):([^:\s]*):([^:\s]*)\s*$"
)


@dataclass(frozen=True)
class CommandMarker:
    """Position of a command in the suite, as encoded in a marker line."""

    group_id: str
    test_id: str
    command_id: str


def command_marker(command: Command) -> str:
    """Marker line preceding a command rendered for the embedded runner."""
    return (
        f"      {COMMAND_ID_COMMENT}"
        f"{command.group_id}:{command.test_id}:{command.id}"
    )


def parse_command_marker(line: str) -> CommandMarker | None:
    """Parse a marker line back into its triplet.

    Returns:
        CommandMarker if the line is a marker, None otherwise.
    """
    match = _MARKER_PATTERN.match(line)
    if not match:
        return None
    return CommandMarker(*match.groups())


def trace_template(command: Command) -> str:
    """Tracing call capturing page or target state after a command."""
    if command.target_kind is TargetKind.PAGE:
        call = f'      await bs.tracePage( "{command.id}" );'
    else:
        props = [_trace_prop(command.target)]
        if command.secondary_target:
            props.append(_trace_prop(command.secondary_target))
        call = f'      await bs.traceTarget( "{command.id}", {{ {", ".join(props)} }});'
    return "\n      // Tracing... \n" + call


def _trace_prop(target: str) -> str:
    return f'"{target}": async () => await {target}()'


def interactive_template(command: Command) -> str:
    """Wait for the runtime to release the command in interactive mode."""
    return (
        f"\n    await bs.page.waitForSelector("
        f'`body[{INTERACTIVE_MARKER_ATTR}="{command.id}"]`, '
        f"{{ timeout: {INTERACTIVE_TIMEOUT} }});"
    )


def variables_template(variables: Mapping[str, Any]) -> str:
    """Statement merging variable overrides into the runtime environment."""
    payload = json.dumps(dict(variables), separators=(",", ":"))
    return f"      Object.assign( ENV, {payload} );\n"


def snippet_fence(title: str, body: str, variables: str = "") -> str:
    """Bound an inlined snippet with start/end markers naming it."""
    return (
        f"      // SNIPPET {title}: START\n"
        f"{variables}{body}\n"
        f"      // SNIPPET {title}: END\n"
    )
